"""Placement and machining metadata attached to panels.

These objects are descriptive: renderers and exporters consume them, but
the core never checks them for physical feasibility.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class PanelFace(str, Enum):
    """Face or edge of a panel a feature is machined into."""

    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class CutoutShape(str, Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    POLYGON = "polygon"
    CUSTOM = "custom"


class FixationType(str, Enum):
    SCREW = "screw"
    DOWEL = "dowel"
    CAM_LOCK = "cam_lock"
    PIN = "pin"
    GLUE = "glue"


@dataclass(frozen=True)
class Position3D:
    """Minimum corner of a component in cabinet space.

    x runs left to right, y bottom to top, z front to back, all in
    millimeters from the cabinet's bottom-left-front corner.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


@dataclass(frozen=True)
class DrillHole:
    """A hole drilled into one face of a panel."""

    x: float
    y: float
    face: PanelFace = PanelFace.TOP
    diameter: float = 5.0
    depth: float = 0.0
    countersink: bool = False
    countersink_diameter: float = 0.0
    purpose: str = "fixation"

    def __post_init__(self) -> None:
        if self.diameter <= 0:
            raise ValueError("Drill hole diameter must be positive")
        if self.depth < 0:
            raise ValueError("Drill hole depth must be non-negative")


@dataclass(frozen=True)
class Cutout:
    """A shape removed from a panel.

    Rectangles use ``width``/``height`` from ``(x, y)``; circles use
    ``radius`` around ``(x, y)``; polygons use ``points`` relative to the
    panel. Custom cutouts carry free-form ``parameters`` and have no
    computable area.
    """

    shape: CutoutShape
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0
    points: tuple[tuple[float, float], ...] = ()
    depth: float | None = None
    parameters: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        if self.shape == CutoutShape.RECTANGLE and (self.width <= 0 or self.height <= 0):
            raise ValueError("Rectangular cutouts need a positive width and height")
        if self.shape == CutoutShape.CIRCLE and self.radius <= 0:
            raise ValueError("Circular cutouts need a positive radius")
        if self.shape == CutoutShape.POLYGON and len(self.points) < 3:
            raise ValueError("Polygon cutouts need at least three points")

    @property
    def area(self) -> float:
        """Removed area in square millimeters."""
        if self.shape == CutoutShape.RECTANGLE:
            return self.width * self.height
        if self.shape == CutoutShape.CIRCLE:
            return math.pi * self.radius**2
        if self.shape == CutoutShape.POLYGON:
            # Shoelace formula
            total = 0.0
            for (x1, y1), (x2, y2) in zip(self.points, self.points[1:] + self.points[:1]):
                total += x1 * y2 - x2 * y1
            return abs(total) / 2
        return 0.0


@dataclass(frozen=True)
class FixationPoint:
    """Where a panel is fastened to another component, referenced by id."""

    target_id: str
    x: float
    y: float
    face: PanelFace = PanelFace.TOP
    fixation_type: FixationType = FixationType.SCREW
    diameter: float = 5.0
    depth: float = 0.0


@dataclass(frozen=True)
class EdgeBanding:
    """Which edges of a panel receive edge banding.

    Edges are named as seen from the front of the panel: ``top`` is the
    front edge for horizontal panels.
    """

    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    @classmethod
    def all_edges(cls) -> EdgeBanding:
        return cls(True, True, True, True)

    @classmethod
    def none(cls) -> EdgeBanding:
        return cls()

    @classmethod
    def from_sequence(cls, flags: Any) -> EdgeBanding:
        top, right, bottom, left = (bool(flag) for flag in flags)
        return cls(top, right, bottom, left)

    def as_tuple(self) -> tuple[bool, bool, bool, bool]:
        return (self.top, self.right, self.bottom, self.left)

    @property
    def count(self) -> int:
        return sum(self.as_tuple())


@dataclass(frozen=True)
class VerticalWindow:
    """A vertical span inside a zone, in absolute cabinet y coordinates."""

    bottom: float
    top: float

    @property
    def height(self) -> float:
        return max(0.0, self.top - self.bottom)
