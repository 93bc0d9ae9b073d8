"""Generation context for zone content."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..value_objects import Dimensions, SubZoneName, ThicknessProfile, VerticalWindow


@dataclass(frozen=True)
class ContentContext:
    """Immutable context describing the space a content generator fills.

    The space is the usable interior of a zone (or of a sub-zone window):
    side panels at the cabinet edges and the top and bottom panels are
    already excluded.

    Attributes:
        zone_index: Index of the owning zone.
        x: Left edge of the usable space in cabinet coordinates.
        width: Usable width in millimeters.
        bottom: y of the usable space's lower bound.
        height: Usable height in millimeters.
        cabinet: Overall cabinet dimensions.
        thickness: Panel thickness profile.
        has_back: Whether the cabinet has a back panel.
        material_id: Material for generated parts.
        sub_zone: Set when generating inside a horizontal separation.
    """

    zone_index: int
    x: float
    width: float
    bottom: float
    height: float
    cabinet: Dimensions
    thickness: ThicknessProfile
    has_back: bool = True
    material_id: str | None = None
    sub_zone: SubZoneName | None = None

    @property
    def top(self) -> float:
        return self.bottom + self.height

    @property
    def back_depth(self) -> float:
        """Depth taken by the back panel, zero without one."""
        return self.thickness.back if self.has_back else 0.0

    @property
    def inner_depth(self) -> float:
        return max(0.0, self.cabinet.depth - self.back_depth)

    def label(self, name: str) -> str:
        """Prefix ``name`` with the zone (and sub-zone) it belongs to."""
        if self.sub_zone is not None:
            return f"{name} (zone {self.zone_index + 1}, {self.sub_zone.value})"
        return f"{name} (zone {self.zone_index + 1})"

    def for_window(self, sub_zone: SubZoneName, window: VerticalWindow) -> ContentContext:
        """Context for a sub-zone occupying ``window``."""
        return replace(self, bottom=window.bottom, height=window.height, sub_zone=sub_zone)
