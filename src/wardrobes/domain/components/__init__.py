"""Component hierarchy for generated wardrobe parts.

Every component class registers itself with ``ComponentTypeRegistry`` under
its ``kind`` so serialized projects can be rebuilt.
"""

from .base import Component, make_component_id
from .drawer import DrawerBack, DrawerBottom, DrawerFront, DrawerSide
from .panel import Panel
from .rail import WardrobeRail
from .registry import ComponentTypeRegistry
from .separator import HorizontalSeparator
from .shelf import Shelf

__all__ = [
    "Component",
    "ComponentTypeRegistry",
    "DrawerBack",
    "DrawerBottom",
    "DrawerFront",
    "DrawerSide",
    "HorizontalSeparator",
    "Panel",
    "Shelf",
    "WardrobeRail",
    "make_component_id",
]
