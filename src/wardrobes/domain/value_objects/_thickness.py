"""Panel roles and the thickness profile that governs them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from ._dimensions import Dimensions

logger = logging.getLogger(__name__)

FALLBACK_THICKNESS = 19.0
MIN_LOAD_BEARING_THICKNESS = 12.0


class PanelRole(str, Enum):
    """Named panel roles, each mapped to a thickness in the profile."""

    SIDES = "sides"
    TOP = "top"
    BOTTOM = "bottom"
    SHELVES = "shelves"
    VERTICAL_DIVIDERS = "vertical_dividers"
    HORIZONTAL_DIVIDERS = "horizontal_dividers"
    BACK = "back"
    DRAWER_FRONT = "drawer_front"
    DRAWER_SIDES = "drawer_sides"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOTTOM = "drawer_bottom"


@dataclass(frozen=True)
class ThicknessProfile:
    """Thickness in millimeters for every panel role.

    The profile never rejects a combination outright; ``validate`` reports
    advisory issues and callers decide whether to enforce them.
    """

    sides: float = 19.0
    top: float = 19.0
    bottom: float = 19.0
    shelves: float = 19.0
    vertical_dividers: float = 19.0
    horizontal_dividers: float = 19.0
    back: float = 8.0
    drawer_front: float = 19.0
    drawer_sides: float = 12.0
    drawer_back: float = 12.0
    drawer_bottom: float = 8.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value <= 0:
                raise ValueError(f"Thickness for '{f.name}' must be positive")
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def standard(cls) -> ThicknessProfile:
        """Standard 19mm carcass with an 8mm back."""
        return cls()

    @classmethod
    def lightweight(cls) -> ThicknessProfile:
        """16mm carcass for light-duty units."""
        return cls(
            sides=16.0,
            top=16.0,
            bottom=16.0,
            shelves=16.0,
            vertical_dividers=16.0,
            horizontal_dividers=16.0,
            back=6.0,
            drawer_front=16.0,
            drawer_sides=10.0,
            drawer_back=10.0,
            drawer_bottom=6.0,
        )

    @classmethod
    def heavy_duty(cls) -> ThicknessProfile:
        """25mm carcass for heavy loads."""
        return cls(
            sides=25.0,
            top=25.0,
            bottom=25.0,
            shelves=25.0,
            vertical_dividers=25.0,
            horizontal_dividers=25.0,
            back=10.0,
            drawer_front=25.0,
            drawer_sides=16.0,
            drawer_back=16.0,
            drawer_bottom=10.0,
        )

    @classmethod
    def preset(cls, name: str) -> ThicknessProfile:
        """Look up a named preset.

        Raises:
            ValueError: If ``name`` is not a known preset.
        """
        presets = {
            "standard": cls.standard,
            "lightweight": cls.lightweight,
            "heavy_duty": cls.heavy_duty,
        }
        if name not in presets:
            raise ValueError(
                f"Unknown thickness preset '{name}'. "
                f"Available presets: {', '.join(sorted(presets))}"
            )
        return presets[name]()

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ThicknessProfile:
        return cls().with_updates(values)

    def for_role(self, role: PanelRole | str) -> float:
        """Thickness for ``role``, falling back to 19mm for unknown roles."""
        try:
            return getattr(self, PanelRole(role).value)
        except ValueError:
            logger.warning(f"Unknown panel role '{role}', using {FALLBACK_THICKNESS}mm")
            return FALLBACK_THICKNESS

    def with_updates(self, values: Mapping[str, Any]) -> ThicknessProfile:
        """Return a copy with the given roles replaced.

        Raises:
            ValueError: If a key is not a panel role or a value is not positive.
        """
        updates: dict[str, float] = {}
        for key, value in values.items():
            try:
                role = PanelRole(key)
            except ValueError:
                raise ValueError(f"Unknown panel role '{key}'") from None
            updates[role.value] = float(value)
        return replace(self, **updates)

    def validate(self) -> list[str]:
        """Advisory consistency checks between roles."""
        issues: list[str] = []
        if self.drawer_sides > self.drawer_front:
            issues.append("Drawer side thickness should not exceed drawer front thickness")
        if self.drawer_bottom > self.drawer_sides:
            issues.append("Drawer bottom thickness should not exceed drawer side thickness")
        if self.sides < MIN_LOAD_BEARING_THICKNESS:
            issues.append(
                f"Side thickness below {MIN_LOAD_BEARING_THICKNESS:g}mm may not be load-bearing"
            )
        if self.shelves < MIN_LOAD_BEARING_THICKNESS:
            issues.append(
                f"Shelf thickness below {MIN_LOAD_BEARING_THICKNESS:g}mm may sag under load"
            )
        return issues

    def inner_dimensions(self, outer: Dimensions, has_back: bool = True) -> Dimensions:
        """Interior space of a carcass with these panel thicknesses."""
        return Dimensions(
            max(0.0, outer.width - 2 * self.sides),
            max(0.0, outer.height - self.top - self.bottom),
            max(0.0, outer.depth - (self.back if has_back else 0.0)),
        )

    def to_dict(self) -> dict[str, float]:
        return {role.value: getattr(self, role.value) for role in PanelRole}
