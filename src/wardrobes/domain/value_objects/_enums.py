"""Enumerations shared across zones, content settings and components."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """What a zone (or sub-zone) contains.

    Attributes:
        EMPTY: No content, only the surrounding carcass.
        SHELVES: A stack of shelves.
        DRAWERS: A bank of drawers.
        WARDROBE: A hanging rail section.
        HORIZONTAL_SEPARATION: One or two horizontal separators splitting the
            zone into independently configured sub-zones.
    """

    EMPTY = "empty"
    SHELVES = "shelves"
    DRAWERS = "drawers"
    WARDROBE = "wardrobe"
    HORIZONTAL_SEPARATION = "horizontal_separation"


class SubZoneName(str, Enum):
    """Names of the sub-zones created by horizontal separators."""

    LOWER = "lower"
    MIDDLE = "middle"
    UPPER = "upper"


class ShelfSpacing(str, Enum):
    """How shelf heights are derived."""

    EQUAL = "equal"
    CUSTOM = "custom"


class DrawerType(str, Enum):
    """Drawer construction.

    Only ``CUSTOM`` drawers have their box (sides, back, bottom) modeled;
    the other types are bought prefabricated and contribute a front only.
    """

    STANDARD = "standard"
    SUPPLIER = "supplier"
    CUSTOM = "custom"


class HandleType(str, Enum):
    BAR = "bar"
    KNOB = "knob"
    RECESSED = "recessed"
    PUSH = "push"
    NONE = "none"


class HandlePosition(str, Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class RailType(str, Enum):
    """Hanging rail profiles, each with a fixed diameter."""

    SLIM = "slim"
    STANDARD = "standard"
    HEAVY_DUTY = "heavy_duty"

    @property
    def diameter(self) -> float:
        """Rail diameter in millimeters."""
        return {
            RailType.SLIM: 20.0,
            RailType.STANDARD: 25.0,
            RailType.HEAVY_DUTY: 32.0,
        }[self]


class HangerType(str, Enum):
    SLIM = "slim"
    STANDARD = "standard"
    WIDE = "wide"
    HEAVY_DUTY = "heavy_duty"


class GrainDirection(str, Enum):
    LENGTH = "length"
    WIDTH = "width"
    NONE = "none"


class PanelOrientation(str, Enum):
    """Plane a panel lies in.

    Attributes:
        HORIZONTAL: Lies in the width/depth plane (shelves, top, bottom).
        VERTICAL: Lies in the height/depth plane (sides, dividers).
        FRONTAL: Lies in the width/height plane (back, drawer fronts).
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FRONTAL = "frontal"


class Complexity(str, Enum):
    """Coarse complexity rating of a project."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"
