"""Domain records owned by a furniture project: dividers and zones."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .content.settings import (
    SETTINGS_TYPES,
    ContentSettings,
    EmptySettings,
    SeparationSettings,
    SubZoneContent,
    build_settings,
    build_sub_zone_content,
    sub_zone_windows,
)
from .errors import SettingsError
from .value_objects import ContentType, SubZoneName, VerticalWindow


@dataclass(frozen=True)
class Divider:
    """A vertical divider panel.

    ``index`` equals the divider's rank in the project's sorted divider list
    and is reassigned on every insert, move and removal; it is not a stable
    identity.

    Attributes:
        index: Rank among dividers, left to right.
        position: Distance of the divider's left face from the cabinet's left
            edge, in millimeters.
        thickness: Divider thickness in millimeters.
    """

    index: int
    position: float
    thickness: float = 19.0

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("Divider position must be non-negative")
        if self.thickness <= 0:
            raise ValueError("Divider thickness must be positive")

    @property
    def end(self) -> float:
        return self.position + self.thickness


@dataclass(frozen=True)
class Zone:
    """A horizontal interval of the cabinet carrying one content configuration.

    Zones are derived by partitioning the cabinet width; their content type
    and settings are configured by the caller. Generated components are not
    stored on the zone.

    Attributes:
        index: Position among zones, left to right.
        position: x of the zone's left edge in millimeters.
        width: Zone width in millimeters.
        height: Zone height in millimeters (the cabinet height).
        content_type: What the zone contains.
        settings: Settings record matching ``content_type``.
        material_id: Material for content parts, None to use the project's.
        custom_name: Display name override.
        visible: Whether renderers should draw the zone's content.
        locked: Whether the zone is protected from edits.
        tags: Free-form labels.
    """

    index: int
    position: float
    width: float
    height: float
    content_type: ContentType = ContentType.EMPTY
    settings: ContentSettings = EmptySettings()
    material_id: str | None = None
    custom_name: str | None = None
    visible: bool = True
    locked: bool = False
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_type", ContentType(self.content_type))
        object.__setattr__(self, "tags", tuple(self.tags))
        if self.width < 0 or self.height < 0:
            raise ValueError("Zone dimensions must be non-negative")
        expected = SETTINGS_TYPES[self.content_type]
        if not isinstance(self.settings, expected):
            raise ValueError(
                f"Zone {self.index} with '{self.content_type.value}' content needs "
                f"{expected.__name__}, got {type(self.settings).__name__}"
            )

    @property
    def end(self) -> float:
        return self.position + self.width

    @property
    def display_name(self) -> str:
        if self.custom_name:
            return self.custom_name
        return f"Zone {self.index + 1}"

    def with_content(
        self,
        content_type: ContentType | str,
        overrides: Mapping[str, Any] | None = None,
    ) -> Zone:
        """Copy with new content, merging ``overrides`` onto current or default settings.

        Raises:
            SettingsError: If the settings are invalid.
        """
        settings = build_settings(content_type, overrides, self.height, self.settings)
        return replace(self, content_type=ContentType(content_type), settings=settings)

    def with_sub_zone(
        self,
        name: SubZoneName | str,
        content_type: ContentType | str,
        overrides: Mapping[str, Any] | None = None,
        separator_thickness: float = 19.0,
    ) -> Zone:
        """Copy with one sub-zone of a horizontal separation reconfigured.

        Raises:
            SettingsError: If the zone is not separated, the sub-zone does not
                exist in the current separator configuration, or the settings
                are invalid.
        """
        if not isinstance(self.settings, SeparationSettings):
            raise SettingsError(f"Zone {self.index} has no horizontal separation")
        name = SubZoneName(name)
        if name not in self.settings.active_sub_zones():
            raise SettingsError(
                f"Sub-zone '{name.value}' requires a second horizontal separation"
            )
        window = self.sub_zone_window(name, separator_thickness)
        current = self.settings.sub_zone(name)
        content = build_sub_zone_content(
            content_type,
            overrides,
            window.height,
            current if ContentType(content_type) == current.content_type else None,
        )
        return replace(self, settings=self.settings.with_sub_zone(name, content))

    def sub_zone_content(self, name: SubZoneName | str) -> SubZoneContent | None:
        if not isinstance(self.settings, SeparationSettings):
            return None
        return self.settings.sub_zone(name)

    def sub_zone_window(
        self,
        name: SubZoneName | str,
        separator_thickness: float = 19.0,
        floor: float = 0.0,
        ceiling: float | None = None,
    ) -> VerticalWindow:
        """Vertical window of a sub-zone, offset by half a separator thickness.

        Args:
            name: Sub-zone to compute.
            separator_thickness: Thickness of the horizontal separators.
            floor: Lowest usable y (top of the bottom panel).
            ceiling: Highest usable y, defaults to the zone height.

        Raises:
            SettingsError: If the zone is not separated.
        """
        if not isinstance(self.settings, SeparationSettings):
            raise SettingsError(f"Zone {self.index} has no horizontal separation")
        ceiling = self.height if ceiling is None else ceiling
        windows = sub_zone_windows(self.settings, separator_thickness, floor, ceiling)
        name = SubZoneName(name)
        if name not in windows:
            raise SettingsError(
                f"Sub-zone '{name.value}' requires a second horizontal separation"
            )
        return windows[name]

    def max_shelves(self, min_spacing: float = 300.0, shelf_thickness: float = 19.0) -> int:
        """Most shelves that keep at least ``min_spacing`` between them."""
        available = self.height - shelf_thickness
        if available <= 0:
            return 0
        return math.floor(available / (min_spacing + shelf_thickness))

    def can_fit_wardrobe(self, min_height: float = 1000.0) -> bool:
        return self.height >= min_height


@dataclass(frozen=True)
class ProjectMetadata:
    """Descriptive project information carried through serialization."""

    category: str = "wardrobe"
    description: str = ""
    notes: str = ""
    tags: tuple[str, ...] = ()
    version: int = 1
