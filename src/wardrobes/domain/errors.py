"""Domain exceptions."""

from __future__ import annotations


class WardrobeError(Exception):
    """Base class for configurator domain errors."""


class SettingsError(WardrobeError, ValueError):
    """Raised when zone content settings are malformed or out of range."""


class GenerationError(WardrobeError):
    """Raised when components cannot be regenerated from project state.

    Attributes:
        zone_index: Zone being generated when the failure happened, if any.
    """

    def __init__(self, message: str, zone_index: int | None = None) -> None:
        super().__init__(message)
        self.zone_index = zone_index
