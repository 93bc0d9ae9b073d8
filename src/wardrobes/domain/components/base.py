"""Base component shared by every generated part."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar

from ..value_objects import SubZoneName
from .registry import ComponentTypeRegistry

DEFAULT_DENSITY = 650.0


def make_component_id(
    kind: str,
    zone_index: int,
    index: int,
    sub_zone: SubZoneName | None = None,
) -> str:
    """Deterministic id from (type, zone, local index).

    Regenerating a project with unchanged inputs reproduces the same ids,
    which lets renderers diff component lists between regenerations.

    Example:
        make_component_id("shelf", 1, 0) -> "shelf_zone1_0"
        make_component_id("shelf", 1, 0, SubZoneName.LOWER) -> "shelf_lower_zone1_0"
    """
    prefix = f"{kind}_{SubZoneName(sub_zone).value}" if sub_zone else kind
    return f"{prefix}_zone{zone_index}_{index}"


@ComponentTypeRegistry.register("component")
@dataclass
class Component:
    """A single physical part in the bill of materials.

    Components are produced by regeneration and treated as read-only values
    afterwards. Dimensions are in millimeters.

    Attributes:
        id: Stable identifier derived from type, zone and local index.
        name: Human-readable label.
        material_id: Catalog material, or None for the catalog default.
        width: First in-plane extent.
        length: Second in-plane extent.
        thickness: Extent through the part.
        quantity: Number of identical parts.
        structural: True for carcass parts (sides, top, bottom, dividers, back).
        zone_index: Owning zone, None for carcass parts.
        sub_zone: Owning sub-zone inside a horizontally separated zone.
        tags: Free-form labels.
        metadata: Extra renderer or exporter data.
    """

    kind: ClassVar[str] = "component"

    id: str
    name: str
    material_id: str | None
    width: float
    length: float
    thickness: float
    quantity: int = 1
    structural: bool = False
    zone_index: int | None = None
    sub_zone: SubZoneName | None = None
    tags: tuple[str, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width < 0 or self.length < 0 or self.thickness < 0:
            raise ValueError(f"Component '{self.id}' dimensions must be non-negative")
        if self.quantity < 1:
            raise ValueError(f"Component '{self.id}' quantity must be at least 1")

    @property
    def volume(self) -> float:
        """Total volume in cubic meters."""
        return (self.width * self.length * self.thickness * self.quantity) / 1_000_000_000

    @property
    def surface_area(self) -> float:
        """Total face area (width x length) in square meters."""
        return (self.width * self.length * self.quantity) / 1_000_000

    def weight(self, density: float = DEFAULT_DENSITY) -> float:
        """Weight in kilograms for a material of ``density`` kg/m3."""
        return self.volume * density

    def cost(self, price_per_m2: float) -> float:
        return self.surface_area * price_per_m2

    def dimension_issues(self) -> list[str]:
        """Report zero-sized extents that would make the part unbuildable."""
        issues = []
        for name in ("width", "length", "thickness"):
            if getattr(self, name) <= 0:
                issues.append(f"{self.name}: {name} must be greater than zero")
        return issues

    def scaled(self, factor: float) -> Component:
        """Copy with width and length scaled by ``factor``."""
        return replace(self, width=self.width * factor, length=self.length * factor)

    def with_material(self, material_id: str | None) -> Component:
        return replace(self, material_id=material_id)

    def describe(self) -> str:
        size = f"{self.width:g} x {self.length:g} x {self.thickness:g} mm"
        qty = f" (x{self.quantity})" if self.quantity > 1 else ""
        return f"{self.name}: {size}{qty}"
