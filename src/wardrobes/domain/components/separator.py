"""Horizontal separator splitting a zone into sub-zones."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..value_objects import EdgeBanding
from .panel import Panel
from .registry import ComponentTypeRegistry

MIN_SUB_ZONE_HEIGHT = 300.0


@ComponentTypeRegistry.register("horizontal_separator")
@dataclass
class HorizontalSeparator(Panel):
    """A structural shelf-like panel dividing a zone vertically.

    Attributes:
        separation_index: 1 for the first separator, 2 for the second.
    """

    kind: ClassVar[str] = "horizontal_separator"

    edge_banding: EdgeBanding = EdgeBanding(top=True, right=True, bottom=False, left=True)
    separation_index: int = 1

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.separation_index not in (1, 2):
            raise ValueError("Separation index must be 1 or 2")

    @property
    def center_height(self) -> float:
        return self.position.y + self.thickness / 2

    def sub_zone_heights(self, floor: float, ceiling: float) -> tuple[float, float]:
        """Clear heights below and above the separator.

        Args:
            floor: y of the surface the space below starts from.
            ceiling: y of the surface the space above ends at.
        """
        below = max(0.0, self.position.y - floor)
        above = max(0.0, ceiling - (self.position.y + self.thickness))
        return below, above

    def validate_position(
        self, floor: float, ceiling: float, min_height: float = MIN_SUB_ZONE_HEIGHT
    ) -> list[str]:
        """Advisory check that both sides leave usable space."""
        below, above = self.sub_zone_heights(floor, ceiling)
        issues = []
        if below < min_height:
            issues.append(
                f"{self.name}: space below is {below:g}mm, less than {min_height:g}mm"
            )
        if above < min_height:
            issues.append(
                f"{self.name}: space above is {above:g}mm, less than {min_height:g}mm"
            )
        return issues
