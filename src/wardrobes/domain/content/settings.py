"""Content-specific settings for zones and sub-zones.

Each content type has an immutable settings record. ``build_settings``
merges caller overrides onto either the current settings (same content
type) or the defaults for the new content type.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Union

from ..errors import SettingsError
from ..value_objects import (
    ContentType,
    DrawerType,
    HandlePosition,
    HandleType,
    RailType,
    ShelfSpacing,
    SubZoneName,
    VerticalWindow,
)


@dataclass(frozen=True)
class EmptySettings:
    """Settings for a zone without content."""


@dataclass(frozen=True)
class ShelfSettings:
    """Shelf stack settings.

    Attributes:
        shelf_count: Number of shelves.
        retraction: Setback from the cabinet front in millimeters.
        shelf_spacing: Even spacing or explicit positions.
        custom_positions: Heights above the usable bottom, used only with
            custom spacing when their count equals ``shelf_count``.
        adjustable: Whether shelves rest on movable pins.
    """

    shelf_count: int = 3
    retraction: float = 0.0
    shelf_spacing: ShelfSpacing = ShelfSpacing.EQUAL
    custom_positions: tuple[float, ...] = ()
    adjustable: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "shelf_count", int(self.shelf_count))
        object.__setattr__(self, "shelf_spacing", ShelfSpacing(self.shelf_spacing))
        object.__setattr__(
            self, "custom_positions", tuple(float(p) for p in self.custom_positions)
        )
        if self.shelf_count < 0:
            raise ValueError("shelf_count must be non-negative")
        if self.retraction < 0:
            raise ValueError("retraction must be non-negative")
        if any(p < 0 for p in self.custom_positions):
            raise ValueError("custom_positions must be non-negative")

    @property
    def uses_custom_positions(self) -> bool:
        return (
            self.shelf_spacing == ShelfSpacing.CUSTOM
            and len(self.custom_positions) == self.shelf_count
        )


@dataclass(frozen=True)
class DrawerSettings:
    """Drawer bank settings. Lengths are in millimeters."""

    drawer_count: int = 3
    face_height: float = 150.0
    operational_gap: float = 3.0
    drawer_type: DrawerType = DrawerType.STANDARD
    drawer_depth: float = 500.0
    handle_type: HandleType = HandleType.BAR
    handle_position: HandlePosition = HandlePosition.CENTER

    def __post_init__(self) -> None:
        object.__setattr__(self, "drawer_count", int(self.drawer_count))
        object.__setattr__(self, "drawer_type", DrawerType(self.drawer_type))
        object.__setattr__(self, "handle_type", HandleType(self.handle_type))
        object.__setattr__(self, "handle_position", HandlePosition(self.handle_position))
        if self.drawer_count < 0:
            raise ValueError("drawer_count must be non-negative")
        if self.face_height <= 0:
            raise ValueError("face_height must be positive")
        if self.operational_gap < 0:
            raise ValueError("operational_gap must be non-negative")
        if self.drawer_depth <= 0:
            raise ValueError("drawer_depth must be positive")

    def stack_height(self, face_height: float | None = None) -> float:
        """Height of all fronts plus the gaps between them."""
        face = self.face_height if face_height is None else face_height
        if self.drawer_count == 0:
            return 0.0
        return self.drawer_count * face + (self.drawer_count - 1) * self.operational_gap


@dataclass(frozen=True)
class WardrobeSettings:
    """Hanging rail settings.

    Attributes:
        rail_height: Distance from the top of the usable space down to the rail.
        rail_type: Rail profile, which fixes the diameter.
    """

    rail_height: float = 60.0
    rail_type: RailType = RailType.STANDARD

    def __post_init__(self) -> None:
        object.__setattr__(self, "rail_type", RailType(self.rail_type))
        if self.rail_height < 0:
            raise ValueError("rail_height must be non-negative")


@dataclass(frozen=True)
class SubZoneContent:
    """Content of one sub-zone: a content type and its settings.

    Sub-zones reuse the zone content generators but cannot themselves hold
    a horizontal separation.
    """

    content_type: ContentType = ContentType.EMPTY
    settings: ContentSettings = EmptySettings()

    def __post_init__(self) -> None:
        object.__setattr__(self, "content_type", ContentType(self.content_type))
        if self.content_type == ContentType.HORIZONTAL_SEPARATION:
            raise ValueError("Sub-zones cannot contain a horizontal separation")
        expected = SETTINGS_TYPES[self.content_type]
        if not isinstance(self.settings, expected):
            raise ValueError(
                f"Sub-zone with '{self.content_type.value}' content needs "
                f"{expected.__name__}, got {type(self.settings).__name__}"
            )

    @property
    def is_empty(self) -> bool:
        return self.content_type == ContentType.EMPTY


def _empty_sub_zones() -> dict[SubZoneName, SubZoneContent]:
    return {name: SubZoneContent() for name in SubZoneName}


@dataclass(frozen=True)
class SeparationSettings:
    """One or two horizontal separators and the sub-zones they create.

    Heights are measured from the bottom of the cabinet to the separator's
    center line. The middle sub-zone only exists with a second separator.
    """

    separation_height: float = 1200.0
    has_second_separation: bool = False
    second_separation_height: float = 1800.0
    sub_zones: dict[SubZoneName, SubZoneContent] = field(default_factory=_empty_sub_zones)

    def __post_init__(self) -> None:
        if self.separation_height <= 0:
            raise ValueError("separation_height must be positive")
        if self.second_separation_height <= 0:
            raise ValueError("second_separation_height must be positive")
        sub_zones = _empty_sub_zones()
        for name, content in self.sub_zones.items():
            sub_zones[SubZoneName(name)] = content
        object.__setattr__(self, "sub_zones", sub_zones)

    @classmethod
    def defaults_for(cls, zone_height: float) -> SeparationSettings:
        """Separator at half height, optional second at three quarters.

        Falls back to the fixed defaults when ``zone_height`` is unknown or
        too small to place a separator.
        """
        first = float(round(zone_height * 0.5))
        second = float(round(zone_height * 0.75))
        if first <= 0 or second <= 0:
            return cls()
        return cls(separation_height=first, second_separation_height=second)

    @property
    def second_separation_valid(self) -> bool:
        return self.second_separation_height > self.separation_height

    def active_sub_zones(self) -> list[SubZoneName]:
        """Sub-zones that exist given the separator configuration."""
        if self.has_second_separation and self.second_separation_valid:
            return [SubZoneName.LOWER, SubZoneName.MIDDLE, SubZoneName.UPPER]
        return [SubZoneName.LOWER, SubZoneName.UPPER]

    def sub_zone(self, name: SubZoneName | str) -> SubZoneContent:
        return self.sub_zones[SubZoneName(name)]

    def with_sub_zone(self, name: SubZoneName | str, content: SubZoneContent) -> SeparationSettings:
        sub_zones = dict(self.sub_zones)
        sub_zones[SubZoneName(name)] = content
        return replace(self, sub_zones=sub_zones)


ContentSettings = Union[
    EmptySettings, ShelfSettings, DrawerSettings, WardrobeSettings, SeparationSettings
]

SETTINGS_TYPES: dict[ContentType, type] = {
    ContentType.EMPTY: EmptySettings,
    ContentType.SHELVES: ShelfSettings,
    ContentType.DRAWERS: DrawerSettings,
    ContentType.WARDROBE: WardrobeSettings,
    ContentType.HORIZONTAL_SEPARATION: SeparationSettings,
}


def default_settings(content_type: ContentType | str, height: float) -> ContentSettings:
    """Default settings for ``content_type`` in a space ``height`` tall."""
    content_type = ContentType(content_type)
    if content_type == ContentType.HORIZONTAL_SEPARATION:
        return SeparationSettings.defaults_for(height)
    return SETTINGS_TYPES[content_type]()


def _merge(settings: Any, overrides: Mapping[str, Any]) -> Any:
    names = {f.name for f in fields(settings)}
    unknown = sorted(set(overrides) - names)
    if unknown:
        raise SettingsError(
            f"Unknown setting(s) for {type(settings).__name__}: {', '.join(unknown)}"
        )
    try:
        return replace(settings, **dict(overrides))
    except (TypeError, ValueError) as exc:
        raise SettingsError(str(exc)) from exc


def build_sub_zone_content(
    content_type: ContentType | str,
    overrides: Mapping[str, Any] | None = None,
    height: float = 0.0,
    current: SubZoneContent | None = None,
) -> SubZoneContent:
    """Sub-zone content with ``overrides`` merged onto current or default settings.

    Raises:
        SettingsError: If the content type is not allowed in a sub-zone or
            the overrides are invalid.
    """
    try:
        content_type = ContentType(content_type)
    except ValueError:
        raise SettingsError(f"Unknown content type '{content_type}'") from None
    if content_type == ContentType.HORIZONTAL_SEPARATION:
        raise SettingsError("Sub-zones cannot contain a horizontal separation")
    settings = build_settings(
        content_type,
        overrides,
        height,
        current.settings if current is not None else None,
    )
    return SubZoneContent(content_type=content_type, settings=settings)


def _separation_from(
    base: SeparationSettings, overrides: Mapping[str, Any], height: float
) -> SeparationSettings:
    overrides = dict(overrides)
    raw_sub_zones = overrides.pop("sub_zones", None) or {}
    merged = _merge(base, overrides)
    for raw_name, raw_content in raw_sub_zones.items():
        try:
            name = SubZoneName(raw_name)
        except ValueError:
            raise SettingsError(f"Unknown sub-zone '{raw_name}'") from None
        if isinstance(raw_content, SubZoneContent):
            content = raw_content
        elif isinstance(raw_content, str):
            content = build_sub_zone_content(raw_content, None, height)
        else:
            current = merged.sub_zone(name)
            content_type = raw_content.get("content_type", current.content_type)
            content = build_sub_zone_content(
                content_type,
                raw_content.get("settings"),
                height,
                current if ContentType(content_type) == current.content_type else None,
            )
        merged = merged.with_sub_zone(name, content)
    return merged


def build_settings(
    content_type: ContentType | str,
    overrides: Mapping[str, Any] | None = None,
    height: float = 0.0,
    current: ContentSettings | None = None,
) -> ContentSettings:
    """Merge ``overrides`` onto ``current`` or the content type's defaults.

    Args:
        content_type: Target content type.
        overrides: Setting values keyed by field name. Separation settings
            accept a nested ``sub_zones`` mapping of
            ``{name: {"content_type": ..., "settings": {...}}}``.
        height: Height of the space, used for height-relative defaults.
        current: Existing settings, reused when they match ``content_type``.

    Raises:
        SettingsError: On unknown keys or out-of-range values.
    """
    try:
        content_type = ContentType(content_type)
    except ValueError:
        raise SettingsError(f"Unknown content type '{content_type}'") from None
    expected = SETTINGS_TYPES[content_type]
    base = current if isinstance(current, expected) else default_settings(content_type, height)
    if not overrides:
        return base
    if isinstance(base, SeparationSettings):
        return _separation_from(base, overrides, height)
    return _merge(base, overrides)


def sub_zone_windows(
    settings: SeparationSettings,
    separator_thickness: float,
    floor: float,
    ceiling: float,
) -> dict[SubZoneName, VerticalWindow]:
    """Vertical windows of the active sub-zones.

    Each window stops half a separator thickness short of the separator
    center lines and is clipped to ``[floor, ceiling]``.
    """
    half = separator_thickness / 2
    active = settings.active_sub_zones()
    first = settings.separation_height
    last = settings.second_separation_height if SubZoneName.MIDDLE in active else first

    def clipped(bottom: float, top: float) -> VerticalWindow:
        bottom = min(max(bottom, floor), ceiling)
        return VerticalWindow(bottom, min(max(top, bottom), ceiling))

    windows = {SubZoneName.LOWER: clipped(floor, first - half)}
    if SubZoneName.MIDDLE in active:
        windows[SubZoneName.MIDDLE] = clipped(first + half, last - half)
    windows[SubZoneName.UPPER] = clipped(last + half, ceiling)
    return windows
