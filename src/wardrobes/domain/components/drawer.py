"""Drawer parts: front, sides, back and bottom."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from ..value_objects import (
    DrawerType,
    EdgeBanding,
    HandlePosition,
    HandleType,
    PanelOrientation,
)
from .panel import Panel
from .registry import ComponentTypeRegistry

HANDLE_EDGE_OFFSET = 30.0


@ComponentTypeRegistry.register("drawer_front")
@dataclass
class DrawerFront(Panel):
    """Visible drawer face.

    ``width`` runs across the zone and ``length`` is the face height.
    """

    kind: ClassVar[str] = "drawer_front"

    orientation: PanelOrientation = PanelOrientation.FRONTAL
    edge_banding: EdgeBanding = EdgeBanding.all_edges()
    drawer_index: int = 0
    drawer_type: DrawerType = DrawerType.STANDARD
    handle_type: HandleType = HandleType.BAR
    handle_position: HandlePosition = HandlePosition.CENTER
    gap: float = 3.0

    @property
    def face_height(self) -> float:
        return self.length

    @property
    def handle_offset(self) -> float | None:
        """Height of the handle above the bottom edge of the front."""
        if self.handle_type in (HandleType.NONE, HandleType.PUSH):
            return None
        if self.handle_position == HandlePosition.TOP:
            return max(0.0, self.length - HANDLE_EDGE_OFFSET)
        if self.handle_position == HandlePosition.BOTTOM:
            return min(self.length, HANDLE_EDGE_OFFSET)
        return self.length / 2


@ComponentTypeRegistry.register("drawer_side")
@dataclass
class DrawerSide(Panel):
    """Side of a custom drawer box; ``width`` is depth, ``length`` height."""

    kind: ClassVar[str] = "drawer_side"

    orientation: PanelOrientation = PanelOrientation.VERTICAL
    drawer_index: int = 0
    side: str = "left"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.side not in ("left", "right"):
            raise ValueError("Drawer side must be 'left' or 'right'")

    @staticmethod
    def banding_for(side: str) -> EdgeBanding:
        """Top and bottom edges plus the exposed outer edge."""
        return EdgeBanding(top=True, right=side == "right", bottom=True, left=side == "left")


@ComponentTypeRegistry.register("drawer_back")
@dataclass
class DrawerBack(Panel):
    kind: ClassVar[str] = "drawer_back"

    orientation: PanelOrientation = PanelOrientation.FRONTAL
    edge_banding: EdgeBanding = EdgeBanding(top=True)
    drawer_index: int = 0


@ComponentTypeRegistry.register("drawer_bottom")
@dataclass
class DrawerBottom(Panel):
    """Drawer floor, with a load heuristic for the unsupported span."""

    kind: ClassVar[str] = "drawer_bottom"

    # kg carried by an 8mm bottom spanning 500mm
    REFERENCE_LOAD: ClassVar[float] = 30.0
    REFERENCE_THICKNESS: ClassVar[float] = 8.0
    REFERENCE_SPAN: ClassVar[float] = 500.0

    drawer_index: int = 0

    @property
    def span(self) -> float:
        return max(self.width, self.length)

    @property
    def max_load(self) -> float:
        if self.span <= 0:
            return 0.0
        return (
            self.REFERENCE_LOAD
            * (self.thickness / self.REFERENCE_THICKNESS)
            * (self.REFERENCE_SPAN / self.span)
        )

    def can_support_load(self, load_kg: float = 10.0) -> bool:
        return self.max_load >= load_kg

    def suggest_min_thickness(self, load_kg: float = 10.0) -> float:
        """Smallest whole-millimeter thickness carrying ``load_kg``."""
        if self.span <= 0:
            return self.REFERENCE_THICKNESS
        needed = (
            load_kg
            * self.REFERENCE_THICKNESS
            * self.span
            / (self.REFERENCE_LOAD * self.REFERENCE_SPAN)
        )
        return float(max(math.ceil(needed), 3))
