"""Value objects for the wardrobe domain.

This module provides immutable data types used throughout the configurator.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Overall dimensions and units
from ._dimensions import DimensionBounds, Dimensions, LengthUnit

# Enumerations
from ._enums import (
    Complexity,
    ContentType,
    DrawerType,
    GrainDirection,
    HandlePosition,
    HandleType,
    HangerType,
    PanelOrientation,
    RailType,
    ShelfSpacing,
    SubZoneName,
)

# Placement and machining
from ._machining import (
    Cutout,
    CutoutShape,
    DrillHole,
    EdgeBanding,
    FixationPoint,
    FixationType,
    PanelFace,
    Position3D,
    VerticalWindow,
)

# Thickness profile
from ._thickness import PanelRole, ThicknessProfile

__all__ = [
    "Complexity",
    "ContentType",
    "Cutout",
    "CutoutShape",
    "DimensionBounds",
    "Dimensions",
    "DrawerType",
    "DrillHole",
    "EdgeBanding",
    "FixationPoint",
    "FixationType",
    "GrainDirection",
    "HandlePosition",
    "HandleType",
    "HangerType",
    "LengthUnit",
    "PanelFace",
    "PanelOrientation",
    "PanelRole",
    "Position3D",
    "RailType",
    "ShelfSpacing",
    "SubZoneName",
    "ThicknessProfile",
    "VerticalWindow",
]
