"""Result types for content validation and generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from ..components import Component


@dataclass(frozen=True)
class ValidationResult:
    """Result of content settings validation.

    Settings are valid when there are no errors, even if there are warnings.

    Attributes:
        errors: Tuple of error messages (validation failures).
        warnings: Tuple of warning messages (non-fatal issues).
    """

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def ok(cls, warnings: list[str] | None = None) -> ValidationResult:
        return cls(warnings=tuple(warnings or []))

    @classmethod
    def fail(cls, errors: list[str], warnings: list[str] | None = None) -> ValidationResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings or []))

    @classmethod
    def from_lists(cls, errors: list[str], warnings: list[str]) -> ValidationResult:
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    def merged(self, other: ValidationResult, prefix: str = "") -> ValidationResult:
        """Combine with ``other``, optionally prefixing its messages."""
        return ValidationResult(
            errors=self.errors + tuple(f"{prefix}{e}" for e in other.errors),
            warnings=self.warnings + tuple(f"{prefix}{w}" for w in other.warnings),
        )


@dataclass(frozen=True)
class GenerationResult:
    """Output of generating one zone's (or sub-zone's) content.

    Attributes:
        components: Generated components in placement order.
        warnings: Advisories about sizes the generator had to adjust.
        metadata: Additional structured data, such as the effective drawer
            face height after resizing.
    """

    components: tuple[Component, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_components(
        cls, components: Iterable[Component], warnings: Iterable[str] = ()
    ) -> GenerationResult:
        return cls(components=tuple(components), warnings=tuple(warnings))

    @classmethod
    def empty(cls, warnings: Iterable[str] = ()) -> GenerationResult:
        return cls(warnings=tuple(warnings))

    def merged(self, other: GenerationResult) -> GenerationResult:
        metadata = dict(self.metadata)
        metadata.update(other.metadata)
        return GenerationResult(
            components=self.components + other.components,
            warnings=self.warnings + other.warnings,
            metadata=metadata,
        )
