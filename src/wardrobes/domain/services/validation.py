"""Advisory structural validation of a project."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..components import Component, Shelf
from ..content import ZoneContentGenerator
from ..entities import Zone
from ..value_objects import DimensionBounds, Dimensions, ThicknessProfile


@dataclass(frozen=True)
class ValidationStatus:
    """Outcome of project validation.

    ``issues`` decide ``is_valid``; ``warnings`` are informational.
    """

    issues: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.issues


class ProjectValidator:
    """Checks overall bounds and that the project produced something buildable."""

    def __init__(
        self,
        bounds: DimensionBounds | None = None,
        content: ZoneContentGenerator | None = None,
    ) -> None:
        self.bounds = bounds or DimensionBounds()
        self.content = content or ZoneContentGenerator()

    def validate(
        self,
        dimensions: Dimensions,
        thickness: ThicknessProfile,
        zones: Sequence[Zone],
        components: Sequence[Component],
        has_back: bool = True,
    ) -> ValidationStatus:
        issues = list(dimensions.validate(self.bounds))
        if not zones:
            issues.append("The project has no zones")
        if not components:
            issues.append("The project has no components")

        warnings = list(thickness.validate())
        for zone in zones:
            result = self.content.validate(zone, thickness, dimensions, has_back)
            prefix = f"{zone.display_name}: "
            issues.extend(prefix + error for error in result.errors)
            warnings.extend(prefix + warning for warning in result.warnings)
        for component in components:
            issues.extend(component.dimension_issues())
            if isinstance(component, Shelf) and component.needs_central_support:
                warnings.append(f"{component.name} needs a central support")

        return ValidationStatus(issues=tuple(issues), warnings=tuple(dict.fromkeys(warnings)))
