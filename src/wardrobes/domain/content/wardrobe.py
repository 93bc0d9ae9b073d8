"""Hanging rail generator."""

from __future__ import annotations

import logging

from ..components import WardrobeRail, make_component_id
from ..value_objects import ContentType, Position3D
from .context import ContentContext
from .registry import content_registry
from .results import GenerationResult, ValidationResult
from .settings import WardrobeSettings

logger = logging.getLogger(__name__)

RAIL_CLEARANCE = 60.0
RAIL_MATERIAL_ID = "chrome_steel"
MIN_HANGING_HEIGHT = 1000.0
MIN_SUB_ZONE_HANGING_HEIGHT = 300.0


@content_registry.register(ContentType.WARDROBE)
class WardrobeContent:
    """A single rail hung ``rail_height`` below the top of the usable space.

    The rail is ``RAIL_CLEARANCE`` shorter than the space is wide, centered,
    and sits halfway into the usable depth.
    """

    def validate(self, settings: WardrobeSettings, context: ContentContext) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        if context.width - RAIL_CLEARANCE <= 0:
            errors.append(f"Zone is too narrow for a rail ({context.width:g}mm)")
        minimum = MIN_SUB_ZONE_HANGING_HEIGHT if context.sub_zone else MIN_HANGING_HEIGHT
        if context.height < minimum:
            warnings.append(
                f"{context.height:g}mm of height is short for hanging clothes "
                f"(recommended at least {minimum:g}mm)"
            )
        if settings.rail_height > context.height:
            warnings.append(
                f"Rail height {settings.rail_height:g}mm exceeds the available "
                f"{context.height:g}mm; the rail will sit at the bottom"
            )
        return ValidationResult.from_lists(errors, warnings)

    def generate(self, settings: WardrobeSettings, context: ContentContext) -> GenerationResult:
        if context.sub_zone is not None and context.height < MIN_SUB_ZONE_HANGING_HEIGHT:
            message = (
                f"Sub-zone too short for a rail ({context.height:g}mm) in "
                f"{context.label('wardrobe')}"
            )
            logger.warning(message)
            return GenerationResult.empty([message])

        length = context.width - RAIL_CLEARANCE
        if length <= 0:
            message = f"Zone too narrow for a rail in {context.label('wardrobe')}"
            logger.warning(message)
            return GenerationResult.empty([message])

        warnings: list[str] = []
        y = context.top - settings.rail_height
        if y < context.bottom:
            message = (
                f"Rail height {settings.rail_height:g}mm exceeds the available space in "
                f"{context.label('wardrobe')}; rail placed at the bottom"
            )
            logger.warning(message)
            warnings.append(message)
            y = context.bottom

        diameter = settings.rail_type.diameter
        rail = WardrobeRail(
            id=make_component_id("wardrobe_rail", context.zone_index, 0, context.sub_zone),
            name=context.label("Hanging rail"),
            material_id=RAIL_MATERIAL_ID,
            width=diameter,
            length=length,
            thickness=diameter,
            zone_index=context.zone_index,
            sub_zone=context.sub_zone,
            rail_type=settings.rail_type,
            position=Position3D(
                context.x + RAIL_CLEARANCE / 2,
                y,
                context.inner_depth / 2,
            ),
        )
        return GenerationResult.from_components([rail], warnings)
