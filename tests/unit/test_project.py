"""Unit tests for the FurnitureProject aggregate."""

import pytest

from wardrobes.domain import (
    ContentType,
    Dimensions,
    FurnitureProject,
    GenerationError,
    HorizontalSeparator,
    SettingsError,
    Shelf,
    ThicknessProfile,
    WardrobeRail,
)
from wardrobes.domain.content import DrawerSettings, ShelfSettings
from wardrobes.domain.content.shelves import ShelvesContent
from wardrobes.domain.value_objects import SubZoneName


class TestProjectCreation:
    """Tests for FurnitureProject.create."""

    def test_default_structure(self, project: FurnitureProject) -> None:
        assert project.dimensions == Dimensions(2000, 2400, 600)
        assert [d.position for d in project.dividers] == [990.5]
        assert [z.content_type for z in project.zones] == [
            ContentType.SHELVES,
            ContentType.WARDROBE,
        ]
        assert [c.id for c in project.components] == [
            "side_left",
            "side_right",
            "top",
            "bottom",
            "divider_v_0",
            "back",
            "shelf_zone0_0",
            "shelf_zone0_1",
            "shelf_zone0_2",
            "wardrobe_rail_zone1_0",
        ]

    def test_zones_share_the_width_evenly(self, project: FurnitureProject) -> None:
        left, right = project.zones

        assert (left.position, left.width) == (0, 990.5)
        assert (right.position, right.width) == (1009.5, 990.5)

    def test_without_default_structure(self, empty_project: FurnitureProject) -> None:
        assert empty_project.dividers == ()
        assert len(empty_project.zones) == 1
        assert empty_project.zones[0].content_type == ContentType.EMPTY
        assert [c.id for c in empty_project.components] == [
            "side_left",
            "side_right",
            "top",
            "bottom",
            "back",
        ]

    def test_without_back(self) -> None:
        project = FurnitureProject.create(has_back=False, default_structure=False)

        assert project.find_component("back") is None
        assert project.find_component("side_left").width == 600

    def test_carcass_panels_are_structural(self, project: FurnitureProject) -> None:
        structural = {c.id for c in project.structural_components}

        assert structural == {"side_left", "side_right", "top", "bottom", "divider_v_0", "back"}

    def test_new_project_has_no_history(self, project: FurnitureProject) -> None:
        assert not project.can_undo
        assert not project.can_redo


class TestDividers:
    """Tests for divider edits and zone recalculation."""

    def test_add_divider_splits_zone(self, empty_project: FurnitureProject) -> None:
        divider = empty_project.add_divider(500)

        assert divider.index == 0
        assert divider.position == 500
        assert len(empty_project.zones) == 2
        assert empty_project.zones[1].position == 519

    def test_indices_follow_position_order(self, project: FurnitureProject) -> None:
        project.add_divider(400)

        assert [(d.index, d.position) for d in project.dividers] == [(0, 400), (1, 990.5)]
        assert project.find_component("divider_v_1") is not None

    @pytest.mark.parametrize("position", [0, -10, 1981, 2500])
    def test_position_outside_cabinet_rejected(
        self, project: FurnitureProject, position: float
    ) -> None:
        before = project.snapshot()

        with pytest.raises(ValueError):
            project.add_divider(position)

        assert project.snapshot() == before
        assert not project.can_undo

    def test_new_zone_starts_empty_and_others_keep_content(
        self, project: FurnitureProject
    ) -> None:
        project.add_divider(1500)

        assert [z.content_type for z in project.zones] == [
            ContentType.SHELVES,
            ContentType.WARDROBE,
            ContentType.EMPTY,
        ]

    def test_remove_divider_keeps_left_zone_content(self, project: FurnitureProject) -> None:
        project.remove_divider(0)

        assert len(project.zones) == 1
        assert project.zones[0].content_type == ContentType.SHELVES
        assert project.zones[0].width == 2000

    def test_remove_missing_divider(self, project: FurnitureProject) -> None:
        with pytest.raises(IndexError):
            project.remove_divider(3)

    def test_move_divider_keeps_zone_content(self, project: FurnitureProject) -> None:
        project.move_divider(0, 800)

        left, right = project.zones
        assert left.width == 800
        assert right.position == 819
        assert right.content_type == ContentType.WARDROBE

    def test_shrinking_width_drops_dividers_outside(self, project: FurnitureProject) -> None:
        project.set_dimensions(Dimensions(900, 2400, 600))

        assert project.dividers == ()
        assert len(project.zones) == 1

    def test_zone_heights_follow_cabinet_height(self, project: FurnitureProject) -> None:
        project.set_dimensions(Dimensions(2000, 2200, 600))

        assert all(z.height == 2200 for z in project.zones)
        assert project.find_component("side_left").length == 2200


class TestZoneContent:
    """Tests for zone and sub-zone configuration."""

    def test_set_zone_content(self, project: FurnitureProject) -> None:
        zone = project.set_zone_content(1, "drawers", {"drawer_count": 4})

        assert zone.settings == DrawerSettings(drawer_count=4)
        assert len([c for c in project.components_for_zone(1)]) == 4

    def test_settings_merge_onto_current(self, project: FurnitureProject) -> None:
        project.set_zone_content(0, "shelves", {"shelf_count": 5})
        project.set_zone_content(0, "shelves", {"retraction": 20})

        assert project.zones[0].settings == ShelfSettings(shelf_count=5, retraction=20)

    def test_invalid_settings_leave_project_unchanged(self, project: FurnitureProject) -> None:
        before = project.snapshot()

        with pytest.raises(SettingsError):
            project.set_zone_content(0, "shelves", {"shelf_count": -1})

        assert project.snapshot() == before
        assert not project.can_undo

    def test_missing_zone(self, project: FurnitureProject) -> None:
        with pytest.raises(IndexError):
            project.set_zone_content(5, "shelves")

    def test_sub_zone_content(self, project: FurnitureProject) -> None:
        project.set_zone_content(1, "horizontal_separation", {"separation_height": 1000})
        project.set_sub_zone_content(1, "lower", "drawers", {"drawer_count": 3})
        project.set_sub_zone_content(1, SubZoneName.UPPER, "wardrobe")

        kinds = [type(c) for c in project.components_for_zone(1)]
        assert kinds.count(HorizontalSeparator) == 1
        assert kinds.count(WardrobeRail) == 1
        assert project.zones[1].sub_zone_content("lower").settings.drawer_count == 3

    def test_sub_zone_requires_separation(self, project: FurnitureProject) -> None:
        with pytest.raises(SettingsError):
            project.set_sub_zone_content(0, "lower", "drawers")

    def test_update_zone_attributes(self, project: FurnitureProject) -> None:
        project.update_zone(0, custom_name="Linen", material_id="oak")

        assert project.zones[0].display_name == "Linen"
        assert all(s.material_id == "oak" for s in project.components_for_zone(0))

    def test_update_zone_rejects_content_changes(self, project: FurnitureProject) -> None:
        with pytest.raises(ValueError, match="content_type"):
            project.update_zone(0, content_type="drawers")

    def test_generation_failure_rolls_back(
        self, project: FurnitureProject, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom(self, settings, context):
            raise RuntimeError("generator crashed")

        before = project.snapshot()
        monkeypatch.setattr(ShelvesContent, "generate", boom)

        with pytest.raises(GenerationError):
            project.set_zone_content(1, "shelves")

        assert project.snapshot() == before
        assert not project.can_undo


class TestThicknessAndMaterials:
    """Tests for thickness and material changes."""

    def test_shelf_thickness_only_affects_shelves(self, project: FurnitureProject) -> None:
        before = {c.id: c.thickness for c in project.components}

        project.set_thickness(ThicknessProfile().with_updates({"shelves": 25}))

        for component in project.components:
            if isinstance(component, Shelf):
                assert component.thickness == 25
            else:
                assert component.thickness == before[component.id]

    def test_divider_thickness_moves_zones(self, project: FurnitureProject) -> None:
        project.set_thickness(ThicknessProfile().with_updates({"vertical_dividers": 25}))

        assert project.dividers[0].thickness == 25
        assert project.zones[1].position == 1015.5

    def test_component_material_survives_regeneration(self, project: FurnitureProject) -> None:
        project.set_component_material("shelf_zone0_0", "oak")
        project.add_divider(1500)

        assert project.find_component("shelf_zone0_0").material_id == "oak"
        assert project.find_component("shelf_zone0_1").material_id is None

    def test_unknown_component(self, project: FurnitureProject) -> None:
        with pytest.raises(KeyError):
            project.set_component_material("drawer_front_zone9_0", "oak")

    def test_project_material_resets_structural_overrides(
        self, project: FurnitureProject
    ) -> None:
        project.set_component_material("side_left", "oak")
        project.set_component_material("shelf_zone0_0", "cherry")

        count = project.set_project_material("walnut")

        assert count == 6
        assert all(c.material_id == "walnut" for c in project.structural_components)
        assert project.find_component("shelf_zone0_0").material_id == "cherry"
        assert project.find_component("wardrobe_rail_zone1_0").material_id == "chrome_steel"


class TestHistory:
    """Tests for undo and redo on the project."""

    def test_undo_restores_previous_state(self, project: FurnitureProject) -> None:
        before = project.snapshot()
        project.add_divider(1500)

        assert project.undo()
        assert project.snapshot() == before

    def test_undo_then_redo_is_identity(self, project: FurnitureProject) -> None:
        project.set_zone_content(0, "drawers")
        project.add_divider(1500)
        project.set_has_back(False)
        after = project.snapshot()

        for _ in range(3):
            assert project.undo()
        for _ in range(3):
            assert project.redo()

        assert project.snapshot() == after

    def test_undo_with_empty_history(self, project: FurnitureProject) -> None:
        assert not project.undo()
        assert not project.redo()

    def test_new_change_clears_redo(self, project: FurnitureProject) -> None:
        project.add_divider(1500)
        project.undo()
        project.rename("Other")

        assert not project.can_redo

    def test_history_limit(self) -> None:
        project = FurnitureProject.create(history_limit=2)
        project.rename("One")
        project.rename("Two")
        project.rename("Three")

        assert project.undo()
        assert project.undo()
        assert not project.undo()
        assert project.name == "One"

    def test_reset_history(self, project: FurnitureProject) -> None:
        project.rename("One")
        project.undo()

        project.reset_history(limit=5)

        assert not project.can_undo
        assert not project.can_redo
        assert project.history_limit == 5

    def test_clone_is_independent(self, project: FurnitureProject) -> None:
        project.add_divider(1500)

        copy = project.clone("Copy")
        copy.rename("Renamed")

        assert copy.id != project.id
        assert copy.components == project.components
        assert project.name == "Test wardrobe"
        assert copy.undo()
        assert copy.name == "Copy"
        assert copy.dividers == project.dividers


class TestDeterminism:
    """Regeneration is a pure function of the parameters."""

    def _build(self) -> FurnitureProject:
        project = FurnitureProject.create(name="Determinism")
        project.add_divider(1500)
        project.set_zone_content(2, "horizontal_separation", {"separation_height": 900})
        project.set_sub_zone_content(2, "lower", "drawers", {"drawer_type": "custom"})
        return project

    def test_same_edits_give_same_components(self) -> None:
        assert self._build().components == self._build().components

    def test_regenerate_is_stable(self) -> None:
        project = self._build()
        before = project.components

        project.regenerate()

        assert project.components == before

    def test_rename_and_empty_name(self, project: FurnitureProject) -> None:
        with pytest.raises(ValueError):
            project.rename("   ")
        project.rename("Hall")
        assert project.name == "Hall"
