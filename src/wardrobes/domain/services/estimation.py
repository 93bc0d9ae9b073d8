"""Cost, weight and complexity estimation for generated components."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..components import Component, DrawerFront, HorizontalSeparator, Panel
from ..entities import Zone
from ..value_objects import Complexity, ContentType, DrawerType
from .materials import InMemoryMaterialCatalog, MaterialCatalog


@dataclass(frozen=True)
class MaterialUsage:
    """Aggregated usage of one material.

    Attributes:
        material_id: Resolved catalog material id.
        area: Face area in square meters.
        volume: Volume in cubic meters.
        cost: Cost in currency units.
        weight: Weight in kilograms.
        component_count: Number of parts (quantities included).
    """

    material_id: str
    area: float
    volume: float
    cost: float
    weight: float
    component_count: int


@dataclass(frozen=True)
class ProjectEstimate:
    """Derived aggregates for a component list."""

    total_cost: float
    total_weight: float
    total_area: float
    edge_banding_length: float
    component_count: int
    by_material: tuple[MaterialUsage, ...] = field(default_factory=tuple)


class ProjectEstimator:
    """Prices and weighs components using a material catalog.

    Unknown material ids fall back to the catalog's default material.
    """

    # Complexity thresholds on component count
    VERY_HIGH_COMPONENTS = 50
    HIGH_COMPONENTS = 30
    MEDIUM_COMPONENTS = 15
    # Zone count above which a separated project is very complex
    VERY_HIGH_SEPARATED_ZONES = 4
    MEDIUM_ZONES = 2

    def __init__(self, catalog: MaterialCatalog | None = None) -> None:
        self.catalog = catalog or InMemoryMaterialCatalog()

    def total_cost(self, components: Iterable[Component]) -> float:
        """Sum of surface area x material price (quantities included)."""
        return round(
            sum(c.cost(self.catalog.resolve(c.material_id).price_per_m2) for c in components),
            2,
        )

    def total_weight(self, components: Iterable[Component]) -> float:
        """Sum of volume x material density for parts with known dimensions."""
        total = 0.0
        for component in components:
            if component.width <= 0 or component.length <= 0 or component.thickness <= 0:
                continue
            total += component.weight(self.catalog.resolve(component.material_id).density)
        return round(total, 2)

    def estimate(self, components: Sequence[Component]) -> ProjectEstimate:
        groups: dict[str, list[Component]] = defaultdict(list)
        for component in components:
            groups[self.catalog.resolve(component.material_id).id].append(component)

        usages = []
        for material_id, parts in sorted(groups.items()):
            usages.append(
                MaterialUsage(
                    material_id=material_id,
                    area=round(sum(p.surface_area for p in parts), 4),
                    volume=round(sum(p.volume for p in parts), 6),
                    cost=self.total_cost(parts),
                    weight=self.total_weight(parts),
                    component_count=sum(p.quantity for p in parts),
                )
            )

        return ProjectEstimate(
            total_cost=self.total_cost(components),
            total_weight=self.total_weight(components),
            total_area=round(sum(c.surface_area for c in components), 4),
            edge_banding_length=round(
                sum(c.edge_banding_length for c in components if isinstance(c, Panel)), 3
            ),
            component_count=sum(c.quantity for c in components),
            by_material=tuple(usages),
        )

    def complexity(
        self, components: Sequence[Component], zones: Sequence[Zone]
    ) -> Complexity:
        """Coarse complexity bucket, for display only."""
        count = len(components)
        separated = any(
            z.content_type == ContentType.HORIZONTAL_SEPARATION for z in zones
        ) or any(isinstance(c, HorizontalSeparator) for c in components)
        custom_drawers = any(
            isinstance(c, DrawerFront) and c.drawer_type == DrawerType.CUSTOM
            for c in components
        )

        if count > self.VERY_HIGH_COMPONENTS or (
            separated and len(zones) > self.VERY_HIGH_SEPARATED_ZONES
        ):
            return Complexity.VERY_HIGH
        if count > self.HIGH_COMPONENTS or custom_drawers or separated:
            return Complexity.HIGH
        if count > self.MEDIUM_COMPONENTS or len(zones) > self.MEDIUM_ZONES:
            return Complexity.MEDIUM
        return Complexity.LOW
