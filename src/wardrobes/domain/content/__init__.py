"""Zone content generation.

Importing this package registers a generator for every content type with
``content_registry``.
"""

from . import drawers, separation, shelves, wardrobe  # noqa: F401 - registration
from .context import ContentContext
from .generator import EmptyContent, ZoneContentGenerator
from .protocol import ContentGenerator
from .registry import ContentRegistry, content_registry
from .results import GenerationResult, ValidationResult
from .settings import (
    SETTINGS_TYPES,
    ContentSettings,
    DrawerSettings,
    EmptySettings,
    SeparationSettings,
    ShelfSettings,
    SubZoneContent,
    WardrobeSettings,
    build_settings,
    build_sub_zone_content,
    default_settings,
    sub_zone_windows,
)

__all__ = [
    "SETTINGS_TYPES",
    "ContentContext",
    "ContentGenerator",
    "ContentRegistry",
    "ContentSettings",
    "DrawerSettings",
    "EmptyContent",
    "EmptySettings",
    "GenerationResult",
    "SeparationSettings",
    "ShelfSettings",
    "SubZoneContent",
    "ValidationResult",
    "WardrobeSettings",
    "ZoneContentGenerator",
    "build_settings",
    "build_sub_zone_content",
    "content_registry",
    "default_settings",
    "sub_zone_windows",
]
