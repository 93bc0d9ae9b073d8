"""Entry point for generating a zone's content components."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..errors import GenerationError
from ..value_objects import ContentType, Dimensions, ThicknessProfile
from .context import ContentContext
from .registry import content_registry
from .results import GenerationResult, ValidationResult

if TYPE_CHECKING:
    from ..entities import Zone

logger = logging.getLogger(__name__)

EDGE_TOLERANCE = 0.01


@content_registry.register(ContentType.EMPTY)
class EmptyContent:
    """Generates nothing; the zone only shows the surrounding carcass."""

    def validate(self, settings: Any, context: ContentContext) -> ValidationResult:
        return ValidationResult.ok()

    def generate(self, settings: Any, context: ContentContext) -> GenerationResult:
        return GenerationResult.empty()


class ZoneContentGenerator:
    """Generates the content components of whole zones.

    Builds the zone's usable space (excluding the cabinet side panels for
    the outermost zones and the top and bottom panels) and dispatches to
    the generator registered for the zone's content type.
    """

    def context_for(
        self,
        zone: Zone,
        thickness: ThicknessProfile,
        dimensions: Dimensions,
        has_back: bool,
        material_id: str | None,
    ) -> ContentContext:
        left_inset = thickness.sides if zone.position <= EDGE_TOLERANCE else 0.0
        right_inset = (
            thickness.sides if zone.end >= dimensions.width - EDGE_TOLERANCE else 0.0
        )
        return ContentContext(
            zone_index=zone.index,
            x=zone.position + left_inset,
            width=max(0.0, zone.width - left_inset - right_inset),
            bottom=thickness.bottom,
            height=max(0.0, zone.height - thickness.top - thickness.bottom),
            cabinet=dimensions,
            thickness=thickness,
            has_back=has_back,
            material_id=zone.material_id or material_id,
        )

    def validate(
        self,
        zone: Zone,
        thickness: ThicknessProfile,
        dimensions: Dimensions,
        has_back: bool = True,
    ) -> ValidationResult:
        context = self.context_for(zone, thickness, dimensions, has_back, None)
        generator = content_registry.get(zone.content_type)()
        return generator.validate(zone.settings, context)

    def generate(
        self,
        zone: Zone,
        thickness: ThicknessProfile,
        dimensions: Dimensions,
        has_back: bool = True,
        material_id: str | None = None,
    ) -> GenerationResult:
        """Generate every content component of ``zone``.

        Raises:
            GenerationError: If no generator handles the content type or a
                generator fails unexpectedly.
        """
        context = self.context_for(zone, thickness, dimensions, has_back, material_id)
        try:
            generator = content_registry.get(zone.content_type)()
        except KeyError as exc:
            raise GenerationError(str(exc), zone_index=zone.index) from exc
        try:
            result = generator.generate(zone.settings, context)
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(
                f"Failed to generate {zone.content_type.value} content for zone "
                f"{zone.index}: {exc}",
                zone_index=zone.index,
            ) from exc
        logger.debug(
            f"Zone {zone.index} ({zone.content_type.value}): "
            f"{len(result.components)} components, {len(result.warnings)} warnings"
        )
        return result
