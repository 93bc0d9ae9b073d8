"""Shelf component."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..value_objects import EdgeBanding, FixationType
from .panel import Panel
from .registry import ComponentTypeRegistry

CENTRAL_SUPPORT_SPAN = 800.0


@ComponentTypeRegistry.register("shelf")
@dataclass
class Shelf(Panel):
    """A horizontal shelf inside a zone or sub-zone.

    Attributes:
        retraction: Setback from the cabinet front in millimeters.
        shelf_index: Position of the shelf in its stack, from the bottom.
        adjustable: Whether the shelf rests on movable pins.
        fixation_type: How the shelf is held.
        min_load: Baseline load in kilograms for a 19mm, 1000mm shelf.
    """

    kind: ClassVar[str] = "shelf"

    # Relative strength by material kind
    MATERIAL_FACTORS: ClassVar[dict[str, float]] = {
        "wood": 1.5,
        "hardwood": 1.5,
        "plywood": 1.2,
        "melamine": 1.0,
        "mdf": 0.9,
        "particle_board": 0.8,
        "glass": 0.7,
        "metal": 2.5,
    }

    edge_banding: EdgeBanding = EdgeBanding(top=True, right=False, bottom=False, left=True)
    retraction: float = 0.0
    shelf_index: int = 0
    adjustable: bool = True
    fixation_type: FixationType = FixationType.PIN
    min_load: float = 20.0

    def max_load(self, material_kind: str | None = None) -> float:
        """Estimated maximum load in kilograms for the shelf material."""
        factor = self.MATERIAL_FACTORS.get(material_kind or "", 1.0)
        if self.width <= 0:
            return 0.0
        return self.min_load * factor * (self.thickness / 19.0) ** 2 * (1000.0 / self.width)

    @property
    def needs_central_support(self) -> bool:
        return self.width > CENTRAL_SUPPORT_SPAN

    @property
    def visible_surface_area(self) -> float:
        """Top face plus front edge in square meters."""
        return (self.width * self.length + self.width * self.thickness) * self.quantity / 1_000_000
