"""Unit tests for the material catalog, estimator and project validator."""

import pytest

from wardrobes.domain import (
    Complexity,
    Dimensions,
    DrawerFront,
    FurnitureProject,
    HorizontalSeparator,
    InMemoryMaterialCatalog,
    Material,
    Panel,
    ProjectEstimator,
    ProjectValidator,
    ThicknessProfile,
)
from wardrobes.domain.value_objects import DrawerType, EdgeBanding


def make_panel(
    id: str,
    width: float = 1000,
    length: float = 500,
    thickness: float = 19,
    material_id: str | None = None,
    **kwargs,
) -> Panel:
    return Panel(
        id=id,
        name=id.title(),
        material_id=material_id,
        width=width,
        length=length,
        thickness=thickness,
        **kwargs,
    )


class TestMaterial:
    """Tests for Material records."""

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValueError, match="price"):
            Material("bad", "Bad", -1.0)

    def test_thickness_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="thickness"):
            Material("bad", "Bad", 10.0, min_thickness=30, max_thickness=10)

    def test_usage_issues(self, catalog: InMemoryMaterialCatalog) -> None:
        glass = catalog.get("clear_glass")

        assert glass.usage_issues(8) == []
        assert len(glass.usage_issues(19, structural=True)) == 2

    def test_rail_material_accepts_tube_diameter(self, catalog: InMemoryMaterialCatalog) -> None:
        assert catalog.get("chrome_steel").usage_issues(25) == []


class TestMaterialCatalog:
    """Tests for InMemoryMaterialCatalog."""

    def test_default_material(self, catalog: InMemoryMaterialCatalog) -> None:
        default = catalog.default

        assert default.id == "white_melamine"
        assert default.price_per_m2 == 25.0
        assert default.density == 720.0

    def test_unknown_id_resolves_to_default(self, catalog: InMemoryMaterialCatalog) -> None:
        assert catalog.get("mystery") is None
        assert catalog.resolve("mystery").id == "white_melamine"
        assert catalog.resolve(None).id == "white_melamine"

    def test_add_and_list(self, catalog: InMemoryMaterialCatalog) -> None:
        catalog.add(Material("ash", "Ash", 48.0, 690.0))

        assert "ash" in catalog
        assert [m.id for m in catalog.list()] == sorted(m.id for m in catalog.list())

    def test_default_must_exist(self) -> None:
        with pytest.raises(ValueError, match="not in the catalog"):
            InMemoryMaterialCatalog([Material("ash", "Ash", 48.0)], default_id="oak")


class TestProjectEstimator:
    """Tests for cost and weight aggregation."""

    def test_cost_and_weight(self) -> None:
        estimator = ProjectEstimator()
        components = [
            make_panel("a"),
            make_panel("b", width=1000, length=1000, thickness=20, material_id="oak"),
        ]

        assert estimator.total_cost(components) == pytest.approx(57.5)
        assert estimator.total_weight(components) == pytest.approx(20.44)

    def test_quantity_multiplies(self) -> None:
        estimator = ProjectEstimator()

        assert estimator.total_cost([make_panel("a", quantity=2)]) == pytest.approx(25.0)

    def test_unknown_material_uses_default_price(self) -> None:
        estimator = ProjectEstimator()

        assert estimator.total_cost([make_panel("a", material_id="mystery")]) == pytest.approx(
            12.5
        )

    def test_zero_sized_parts_have_no_weight(self) -> None:
        estimator = ProjectEstimator()

        assert estimator.total_weight([make_panel("a", width=0)]) == 0.0

    def test_estimate_groups_by_material(self) -> None:
        estimator = ProjectEstimator()
        components = [
            make_panel("a", edge_banding=EdgeBanding(top=True, bottom=True)),
            make_panel("b", material_id="oak"),
            make_panel("c", material_id="mystery"),
        ]

        estimate = estimator.estimate(components)

        assert estimate.component_count == 3
        assert estimate.total_area == pytest.approx(1.5)
        assert estimate.edge_banding_length == pytest.approx(2.0)
        assert [u.material_id for u in estimate.by_material] == ["oak", "white_melamine"]
        melamine = estimate.by_material[1]
        assert melamine.component_count == 2
        assert melamine.cost == pytest.approx(25.0)

    def test_project_estimate(self, project: FurnitureProject) -> None:
        estimate = ProjectEstimator().estimate(project.components)

        assert estimate.component_count == len(project.components)
        assert estimate.total_cost > 0
        assert estimate.total_weight > 0


class TestComplexity:
    """Tests for the complexity buckets."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (10, Complexity.LOW),
            (16, Complexity.MEDIUM),
            (31, Complexity.HIGH),
            (51, Complexity.VERY_HIGH),
        ],
    )
    def test_component_count(
        self, project: FurnitureProject, count: int, expected: Complexity
    ) -> None:
        components = [make_panel(f"p{i}") for i in range(count)]

        assert ProjectEstimator().complexity(components, project.zones) == expected

    def test_zone_count(self, project: FurnitureProject) -> None:
        project.add_divider(1500)

        assert ProjectEstimator().complexity([], project.zones) == Complexity.MEDIUM

    def test_custom_drawers(self, project: FurnitureProject) -> None:
        front = DrawerFront(
            id="f",
            name="Front",
            material_id=None,
            width=400,
            length=150,
            thickness=19,
            drawer_type=DrawerType.CUSTOM,
        )

        assert ProjectEstimator().complexity([front], project.zones) == Complexity.HIGH

    def test_separation(self, project: FurnitureProject) -> None:
        separator = HorizontalSeparator(
            id="s", name="Separator", material_id=None, width=900, length=580, thickness=19
        )

        assert ProjectEstimator().complexity([separator], project.zones) == Complexity.HIGH


class TestProjectValidator:
    """Tests for advisory project validation."""

    def test_default_project_is_valid(self, project: FurnitureProject) -> None:
        status = ProjectValidator().validate(
            project.dimensions, project.thickness, project.zones, project.components
        )

        assert status.is_valid
        assert any("needs a central support" in w for w in status.warnings)

    def test_out_of_bounds_dimensions(self, project: FurnitureProject) -> None:
        status = ProjectValidator().validate(
            Dimensions(5000, 2400, 600), project.thickness, project.zones, project.components
        )

        assert not status.is_valid
        assert any("exceeds the maximum" in issue for issue in status.issues)

    def test_empty_project(self, empty_project: FurnitureProject) -> None:
        status = ProjectValidator().validate(
            empty_project.dimensions, empty_project.thickness, (), ()
        )

        assert "The project has no zones" in status.issues
        assert "The project has no components" in status.issues

    def test_zero_sized_component(self, project: FurnitureProject) -> None:
        status = ProjectValidator().validate(
            project.dimensions, project.thickness, project.zones, [make_panel("a", length=0)]
        )

        assert "A: length must be greater than zero" in status.issues

    def test_thickness_warnings(self, project: FurnitureProject) -> None:
        thickness = ThicknessProfile(drawer_sides=25)

        status = ProjectValidator().validate(
            project.dimensions, thickness, project.zones, project.components
        )

        assert status.warnings
