"""Unit tests for the zone content generators."""

import pytest

from wardrobes.domain import (
    DrawerBack,
    DrawerBottom,
    DrawerFront,
    DrawerSide,
    GenerationError,
    HorizontalSeparator,
    Shelf,
    WardrobeRail,
    Zone,
    ZoneContentGenerator,
)
from wardrobes.domain.content import (
    ContentContext,
    DrawerSettings,
    SeparationSettings,
    ShelfSettings,
    SubZoneContent,
    WardrobeSettings,
    content_registry,
)
from wardrobes.domain.content.drawers import DrawersContent
from wardrobes.domain.content.separation import SeparationContent
from wardrobes.domain.content.shelves import ShelvesContent
from wardrobes.domain.content.wardrobe import WardrobeContent
from wardrobes.domain.value_objects import (
    ContentType,
    Dimensions,
    DrawerType,
    SubZoneName,
    ThicknessProfile,
)


def make_context(
    width: float = 962,
    height: float = 2000,
    bottom: float = 0,
    cabinet: Dimensions | None = None,
    has_back: bool = True,
    sub_zone: SubZoneName | None = None,
) -> ContentContext:
    return ContentContext(
        zone_index=0,
        x=19,
        width=width,
        bottom=bottom,
        height=height,
        cabinet=cabinet or Dimensions(1000, 2400, 600),
        thickness=ThicknessProfile(),
        has_back=has_back,
        material_id="oak",
        sub_zone=sub_zone,
    )


class TestContentRegistry:
    """Tests for the content generator registry."""

    def test_every_content_type_has_a_generator(self) -> None:
        assert content_registry.list() == sorted(ct.value for ct in ContentType)

    def test_lookup(self) -> None:
        assert content_registry.get("shelves") is ShelvesContent
        assert content_registry.get(ContentType.HORIZONTAL_SEPARATION) is SeparationContent

    def test_duplicate_registration_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @content_registry.register(ContentType.SHELVES)
            class OtherShelves:
                pass


class TestShelvesContent:
    """Tests for shelf stack generation."""

    def test_even_spacing(self) -> None:
        result = ShelvesContent().generate(ShelfSettings(shelf_count=3), make_context())

        assert [s.position.y for s in result.components] == [500, 1000, 1500]
        assert all(isinstance(s, Shelf) for s in result.components)
        assert result.warnings == ()

    def test_even_spacing_inside_a_zone(self) -> None:
        zone = Zone(index=0, position=0, width=1000, height=2000).with_content(
            "shelves", {"shelf_count": 3}
        )

        result = ZoneContentGenerator().generate(
            zone, ThicknessProfile(), Dimensions(1000, 2000, 600)
        )

        heights = [s.position.y for s in result.components]
        assert heights == pytest.approx([509.5, 1000, 1490.5])
        for actual, nominal in zip(heights, [500, 1000, 1500]):
            assert abs(actual - nominal) <= 19 / 2 + 0.01

    def test_ids_and_dimensions(self) -> None:
        result = ShelvesContent().generate(ShelfSettings(shelf_count=2), make_context())
        first = result.components[0]

        assert [s.id for s in result.components] == ["shelf_zone0_0", "shelf_zone0_1"]
        assert first.width == 962
        assert first.length == 592
        assert first.thickness == 19
        assert first.material_id == "oak"
        assert not first.structural

    def test_retraction_and_missing_back_change_depth(self) -> None:
        retracted = ShelvesContent().generate(
            ShelfSettings(shelf_count=1, retraction=20), make_context()
        )
        backless = ShelvesContent().generate(
            ShelfSettings(shelf_count=1), make_context(has_back=False)
        )

        assert retracted.components[0].length == 572
        assert retracted.components[0].position.z == 20
        assert backless.components[0].length == 600

    def test_zero_shelves(self) -> None:
        result = ShelvesContent().generate(ShelfSettings(shelf_count=0), make_context())

        assert result.components == ()

    def test_custom_positions(self) -> None:
        settings = ShelfSettings(
            shelf_count=2, shelf_spacing="custom", custom_positions=(300, 1200)
        )

        result = ShelvesContent().generate(settings, make_context(bottom=19))

        assert [s.position.y for s in result.components] == [319, 1219]

    def test_custom_position_above_usable_space_is_clamped(self) -> None:
        settings = ShelfSettings(
            shelf_count=2, shelf_spacing="custom", custom_positions=(300, 5000)
        )

        result = ShelvesContent().generate(settings, make_context(bottom=19))

        assert [s.position.y for s in result.components] == [319, 2000]
        assert len(result.warnings) == 1
        assert "clamped" in result.warnings[0]

    def test_mismatched_custom_positions_fall_back_to_even(self) -> None:
        settings = ShelfSettings(
            shelf_count=3, shelf_spacing="custom", custom_positions=(300,)
        )

        result = ShelvesContent().generate(settings, make_context())

        assert [s.position.y for s in result.components] == [500, 1000, 1500]

    def test_retraction_deeper_than_cabinet_fails_validation(self) -> None:
        result = ShelvesContent().validate(ShelfSettings(retraction=700), make_context())

        assert not result.is_valid
        assert "leaves no shelf depth" in result.errors[0]

    def test_retraction_deeper_than_cabinet_generates_nothing(self) -> None:
        result = ShelvesContent().generate(ShelfSettings(retraction=700), make_context())

        assert result.components == ()
        assert len(result.warnings) == 1

    def test_wide_shelves_warn_about_support(self) -> None:
        result = ShelvesContent().validate(ShelfSettings(), make_context(width=962))

        assert result.is_valid
        assert any("central support" in w for w in result.warnings)


class TestDrawersContent:
    """Tests for drawer bank generation."""

    def test_fronts_stack_from_the_bottom(self) -> None:
        settings = DrawerSettings(drawer_count=3, face_height=150, operational_gap=3)

        result = DrawersContent().generate(settings, make_context(bottom=19))

        fronts = result.components
        assert all(isinstance(f, DrawerFront) for f in fronts)
        assert [f.position.y for f in fronts] == [19, 172, 325]
        assert [f.id for f in fronts] == [
            "drawer_front_zone0_0",
            "drawer_front_zone0_1",
            "drawer_front_zone0_2",
        ]
        assert fronts[0].width == 956
        assert fronts[0].length == 150
        assert result.metadata["face_height"] == 150
        assert result.warnings == ()

    def test_oversized_stack_is_shrunk_uniformly(self) -> None:
        zone = Zone(index=0, position=0, width=1000, height=400).with_content(
            "drawers", {"drawer_count": 4, "face_height": 150}
        )

        result = ZoneContentGenerator().generate(
            zone, ThicknessProfile(), Dimensions(1000, 400, 600)
        )

        assert len(result.components) == 4
        assert all(f.length == pytest.approx(88.25) for f in result.components)
        assert result.metadata["face_height"] == pytest.approx(88.25)
        assert len(result.warnings) == 1
        top = result.components[-1]
        assert top.position.y + top.length == pytest.approx(19 + 362)

    def test_shrunk_stack_is_reported_by_validation(self) -> None:
        settings = DrawerSettings(drawer_count=4, face_height=150)

        result = DrawersContent().validate(settings, make_context(height=362))

        assert result.is_valid
        assert "reduced" in result.warnings[0]

    def test_no_room_for_drawers(self) -> None:
        settings = DrawerSettings(drawer_count=10, operational_gap=20)

        validation = DrawersContent().validate(settings, make_context(height=150))
        result = DrawersContent().generate(settings, make_context(height=150))

        assert not validation.is_valid
        assert result.components == ()
        assert len(result.warnings) == 1

    def test_standard_drawers_have_fronts_only(self) -> None:
        result = DrawersContent().generate(DrawerSettings(drawer_count=2), make_context())

        assert len(result.components) == 2

    def test_custom_drawers_include_box_parts(self) -> None:
        settings = DrawerSettings(drawer_count=2, drawer_type=DrawerType.CUSTOM)

        result = DrawersContent().generate(settings, make_context(bottom=19))

        assert len(result.components) == 10
        kinds = [type(c) for c in result.components[:5]]
        assert kinds == [DrawerFront, DrawerSide, DrawerSide, DrawerBack, DrawerBottom]
        side = result.components[1]
        bottom = result.components[4]
        assert side.id == "drawer_side_left_zone0_0"
        assert side.length == 120
        assert side.width == 500
        assert side.thickness == 12
        assert bottom.width == 962 - 6 - 24
        assert bottom.thickness == 8

    def test_custom_drawer_depth_is_limited_by_cabinet(self) -> None:
        settings = DrawerSettings(drawer_count=1, drawer_type="custom", drawer_depth=700)

        result = DrawersContent().generate(settings, make_context())
        validation = DrawersContent().validate(settings, make_context())

        assert result.components[1].width == 520
        assert any("limited" in w for w in validation.warnings)

    def test_bar_handle_gets_two_holes(self) -> None:
        result = DrawersContent().generate(DrawerSettings(drawer_count=1), make_context())

        holes = result.components[0].drill_holes
        assert len(holes) == 2
        assert all(h.purpose == "handle" for h in holes)

    def test_push_to_open_has_no_holes(self) -> None:
        result = DrawersContent().generate(
            DrawerSettings(drawer_count=1, handle_type="push"), make_context()
        )

        assert result.components[0].drill_holes == ()


class TestWardrobeContent:
    """Tests for hanging rail generation."""

    def test_rail_below_top(self) -> None:
        result = WardrobeContent().generate(
            WardrobeSettings(), make_context(bottom=19, height=2362)
        )

        (rail,) = result.components
        assert isinstance(rail, WardrobeRail)
        assert rail.id == "wardrobe_rail_zone0_0"
        assert rail.position.y == 2321
        assert rail.position.x == 49
        assert rail.position.z == 296
        assert rail.length == 902
        assert rail.diameter == 25
        assert rail.material_id == "chrome_steel"

    def test_rail_type_sets_diameter(self) -> None:
        result = WardrobeContent().generate(
            WardrobeSettings(rail_type="heavy_duty"), make_context()
        )

        assert result.components[0].diameter == 32

    def test_rail_height_above_space_places_rail_at_bottom(self) -> None:
        result = WardrobeContent().generate(
            WardrobeSettings(rail_height=3000), make_context(bottom=19, height=2362)
        )

        assert result.components[0].position.y == 19
        assert len(result.warnings) == 1

    def test_narrow_zone_has_no_rail(self) -> None:
        result = WardrobeContent().generate(WardrobeSettings(), make_context(width=50))
        validation = WardrobeContent().validate(WardrobeSettings(), make_context(width=50))

        assert result.components == ()
        assert not validation.is_valid

    def test_short_sub_zone_has_no_rail(self) -> None:
        result = WardrobeContent().generate(
            WardrobeSettings(), make_context(height=250, sub_zone=SubZoneName.UPPER)
        )

        assert result.components == ()
        assert "too short" in result.warnings[0]

    def test_short_zone_warns(self) -> None:
        result = WardrobeContent().validate(WardrobeSettings(), make_context(height=800))

        assert result.is_valid
        assert len(result.warnings) == 1


class TestSeparationContent:
    """Tests for horizontal separations and sub-zone content."""

    def _zone(self, settings: SeparationSettings) -> Zone:
        return Zone(
            index=0,
            position=0,
            width=1000,
            height=2400,
            content_type=ContentType.HORIZONTAL_SEPARATION,
            settings=settings,
        )

    def _generate(self, settings: SeparationSettings):
        return ZoneContentGenerator().generate(
            self._zone(settings), ThicknessProfile(), Dimensions(1000, 2400, 600)
        )

    def test_separator_with_sub_zone_content(self) -> None:
        settings = SeparationSettings(
            separation_height=1200,
            sub_zones={
                SubZoneName.LOWER: SubZoneContent(
                    ContentType.DRAWERS, DrawerSettings(drawer_count=2)
                ),
                SubZoneName.UPPER: SubZoneContent(ContentType.WARDROBE, WardrobeSettings()),
            },
        )

        result = self._generate(settings)

        separators = [c for c in result.components if isinstance(c, HorizontalSeparator)]
        fronts = [c for c in result.components if isinstance(c, DrawerFront)]
        rails = [c for c in result.components if isinstance(c, WardrobeRail)]
        assert len(separators) == 1
        assert separators[0].id == "h_separator_zone0_1"
        assert separators[0].structural
        assert separators[0].position.y == 1190.5
        assert [f.id for f in fronts] == ["drawer_front_lower_zone0_0", "drawer_front_lower_zone0_1"]
        assert all(f.sub_zone == SubZoneName.LOWER for f in fronts)
        assert fronts[0].position.y == 19
        assert rails[0].sub_zone == SubZoneName.UPPER
        assert rails[0].position.y == 2321

    def test_lower_sub_zone_content_stays_below_separator(self) -> None:
        settings = SeparationSettings(
            separation_height=800,
            sub_zones={
                SubZoneName.LOWER: SubZoneContent(
                    ContentType.DRAWERS, DrawerSettings(drawer_count=6, face_height=200)
                ),
            },
        )

        result = self._generate(settings)

        fronts = [c for c in result.components if isinstance(c, DrawerFront)]
        top = max(f.position.y + f.length for f in fronts)
        assert top <= 800 - 9.5 + 1e-9
        assert result.warnings

    def test_two_separators_and_middle_sub_zone(self) -> None:
        settings = SeparationSettings(
            separation_height=800,
            has_second_separation=True,
            second_separation_height=1600,
            sub_zones={
                SubZoneName.MIDDLE: SubZoneContent(ContentType.SHELVES, ShelfSettings(shelf_count=1)),
            },
        )

        result = self._generate(settings)

        separators = [c for c in result.components if isinstance(c, HorizontalSeparator)]
        shelves = [c for c in result.components if isinstance(c, Shelf)]
        assert [s.separation_index for s in separators] == [1, 2]
        assert shelves[0].id == "shelf_middle_zone0_0"
        assert shelves[0].position.y == pytest.approx(1200)

    def test_inverted_second_separator_is_ignored(self) -> None:
        settings = SeparationSettings(
            separation_height=1200, has_second_separation=True, second_separation_height=1000
        )

        result = self._generate(settings)
        validation = ZoneContentGenerator().validate(
            self._zone(settings), ThicknessProfile(), Dimensions(1000, 2400, 600)
        )

        separators = [c for c in result.components if isinstance(c, HorizontalSeparator)]
        assert len(separators) == 1
        assert len(result.warnings) == 1
        assert validation.is_valid
        assert any("ignored" in w for w in validation.warnings)

    def test_out_of_range_separation_is_clamped(self) -> None:
        settings = SeparationSettings(separation_height=5000)

        result = self._generate(settings)
        validation = ZoneContentGenerator().validate(
            self._zone(settings), ThicknessProfile(), Dimensions(1000, 2400, 600)
        )

        assert result.components[0].position.y == pytest.approx(2381 - 19)
        assert not validation.is_valid

    def test_sub_zone_errors_are_prefixed(self) -> None:
        settings = SeparationSettings(
            separation_height=1200,
            sub_zones={
                SubZoneName.LOWER: SubZoneContent(
                    ContentType.SHELVES, ShelfSettings(retraction=700)
                ),
            },
        )

        validation = ZoneContentGenerator().validate(
            self._zone(settings), ThicknessProfile(), Dimensions(1000, 2400, 600)
        )

        assert validation.errors[0].startswith("lower sub-zone: ")


class TestZoneContentGenerator:
    """Tests for the zone-level dispatcher."""

    def test_edge_zones_exclude_side_panels(self) -> None:
        generator = ZoneContentGenerator()
        zones = [
            Zone(index=0, position=0, width=990.5, height=2400),
            Zone(index=1, position=1009.5, width=990.5, height=2400),
        ]

        left = generator.context_for(zones[0], ThicknessProfile(), Dimensions(), True, None)
        right = generator.context_for(zones[1], ThicknessProfile(), Dimensions(), True, None)

        assert (left.x, left.width) == (19, 971.5)
        assert (right.x, right.width) == (1009.5, 971.5)
        assert (left.bottom, left.height) == (19, 2362)

    def test_zone_material_overrides_project_material(self) -> None:
        zone = Zone(index=0, position=0, width=1000, height=2400, material_id="walnut")

        context = ZoneContentGenerator().context_for(
            zone, ThicknessProfile(), Dimensions(1000, 2400, 600), True, "oak"
        )

        assert context.material_id == "walnut"

    def test_empty_zone_generates_nothing(self) -> None:
        zone = Zone(index=0, position=0, width=1000, height=2400)

        result = ZoneContentGenerator().generate(zone, ThicknessProfile(), Dimensions())

        assert result.components == ()

    def test_unexpected_failure_becomes_generation_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def boom(self, settings, context):
            raise RuntimeError("boom")

        monkeypatch.setattr(ShelvesContent, "generate", boom)
        zone = Zone(index=0, position=0, width=1000, height=2400).with_content("shelves")

        with pytest.raises(GenerationError, match="boom") as exc_info:
            ZoneContentGenerator().generate(zone, ThicknessProfile(), Dimensions())

        assert exc_info.value.zone_index == 0
