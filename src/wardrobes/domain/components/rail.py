"""Hanging rail for wardrobe sections."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from ..value_objects import HangerType, Position3D, RailType
from .base import Component
from .registry import ComponentTypeRegistry

BASE_CAPACITY = 50.0
REFERENCE_DIAMETER = 25.0
REFERENCE_LENGTH = 1000.0


@ComponentTypeRegistry.register("wardrobe_rail")
@dataclass
class WardrobeRail(Component):
    """A cylindrical rail. ``width`` and ``thickness`` both equal the diameter."""

    kind: ClassVar[str] = "wardrobe_rail"

    # Diameter range (min, max) accepted by each hanger type
    HANGER_DIAMETERS: ClassVar[dict[HangerType, tuple[float, float]]] = {
        HangerType.SLIM: (0.0, 25.0),
        HangerType.STANDARD: (20.0, 30.0),
        HangerType.WIDE: (25.0, math.inf),
        HangerType.HEAVY_DUTY: (30.0, math.inf),
    }

    rail_type: RailType = RailType.STANDARD
    position: Position3D = Position3D()

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.width != self.thickness:
            raise ValueError("Rail width and thickness must both equal its diameter")

    @property
    def diameter(self) -> float:
        return self.width

    @property
    def volume(self) -> float:
        radius = self.diameter / 2
        return math.pi * radius**2 * self.length * self.quantity / 1_000_000_000

    @property
    def surface_area(self) -> float:
        """Lateral surface of the cylinder in square meters."""
        return math.pi * self.diameter * self.length * self.quantity / 1_000_000

    @property
    def capacity(self) -> int:
        """Rough hanging capacity in kilograms."""
        if self.length <= 0:
            return 0
        base = (self.diameter / REFERENCE_DIAMETER) * BASE_CAPACITY
        return round(base * min(1.0, REFERENCE_LENGTH / self.length))

    def is_compatible_with_hanger(self, hanger: HangerType | str) -> bool:
        low, high = self.HANGER_DIAMETERS[HangerType(hanger)]
        return low <= self.diameter <= high

    def can_accommodate(self, item_count: int, item_width: float = 50.0) -> bool:
        """Whether ``item_count`` hangers of ``item_width`` fit on the rail."""
        return item_count * item_width <= self.length
