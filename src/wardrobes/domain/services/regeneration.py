"""Full regeneration of a project's component list."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..components import Component
from ..content import ZoneContentGenerator
from ..entities import Divider, Zone
from ..value_objects import Dimensions, ThicknessProfile
from .carcass import CarcassBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """Components of a regeneration plus the advisories raised along the way."""

    components: tuple[Component, ...] = ()
    warnings: tuple[str, ...] = field(default_factory=tuple)


class ComponentBuilder:
    """Pure function from project parameters to the complete component list.

    Carcass panels come first, followed by each zone's content in zone
    order. Material overrides keyed by component id are applied last so
    they survive regeneration as long as the id is still produced.
    """

    def __init__(
        self,
        carcass: CarcassBuilder | None = None,
        content: ZoneContentGenerator | None = None,
    ) -> None:
        self.carcass = carcass or CarcassBuilder()
        self.content = content or ZoneContentGenerator()

    def build(
        self,
        dimensions: Dimensions,
        thickness: ThicknessProfile,
        dividers: Sequence[Divider],
        zones: Sequence[Zone],
        has_back: bool = True,
        material_id: str | None = None,
        material_overrides: Mapping[str, str] | None = None,
    ) -> BuildResult:
        """Regenerate every component.

        Raises:
            GenerationError: If a zone's content cannot be generated.
        """
        components: list[Component] = list(
            self.carcass.build(dimensions, thickness, dividers, has_back, material_id)
        )
        warnings: list[str] = []
        for zone in zones:
            result = self.content.generate(zone, thickness, dimensions, has_back, material_id)
            components.extend(result.components)
            warnings.extend(result.warnings)

        if material_overrides:
            components = [
                component.with_material(material_overrides[component.id])
                if component.id in material_overrides
                else component
                for component in components
            ]

        logger.debug(
            f"Regenerated {len(components)} components across {len(zones)} zones"
        )
        return BuildResult(components=tuple(components), warnings=tuple(warnings))
