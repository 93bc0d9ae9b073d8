"""Shelf stack generator."""

from __future__ import annotations

import logging

from ..components import Shelf, make_component_id
from ..value_objects import ContentType, PanelRole, Position3D, ShelfSpacing
from .context import ContentContext
from .registry import content_registry
from .results import GenerationResult, ValidationResult
from .settings import ShelfSettings

logger = logging.getLogger(__name__)

MIN_SHELF_SPACING = 100.0


@content_registry.register(ContentType.SHELVES)
class ShelvesContent:
    """Shelves spread evenly over the usable height, or at custom heights.

    Even spacing divides the usable height into ``shelf_count + 1`` equal
    gaps. Custom positions (measured from the bottom of the usable space)
    are used only when ``shelf_spacing`` is custom and exactly
    ``shelf_count`` positions are given.
    """

    def validate(self, settings: ShelfSettings, context: ContentContext) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        depth = self._shelf_depth(settings, context)
        if settings.shelf_count > 0 and depth <= 0:
            errors.append(
                f"Retraction of {settings.retraction:g}mm leaves no shelf depth"
            )

        if settings.shelf_count > 0:
            spacing = context.height / (settings.shelf_count + 1)
            if spacing < MIN_SHELF_SPACING:
                warnings.append(
                    f"{settings.shelf_count} shelves leave only {spacing:.0f}mm between shelves"
                )

        if settings.shelf_spacing == ShelfSpacing.CUSTOM and not settings.uses_custom_positions:
            warnings.append(
                f"{len(settings.custom_positions)} custom positions given for "
                f"{settings.shelf_count} shelves; even spacing will be used"
            )
        if settings.uses_custom_positions:
            limit = context.height - context.thickness.shelves
            outside = [p for p in settings.custom_positions if p > limit]
            if outside:
                warnings.append(
                    f"Custom shelf positions above {limit:g}mm will be clamped: "
                    f"{', '.join(f'{p:g}' for p in outside)}"
                )

        if context.width > 800:
            warnings.append(
                f"Shelves {context.width:g}mm wide may need a central support"
            )

        return ValidationResult.from_lists(errors, warnings)

    def generate(self, settings: ShelfSettings, context: ContentContext) -> GenerationResult:
        count = settings.shelf_count
        if count == 0:
            return GenerationResult.empty()

        warnings: list[str] = []
        depth = self._shelf_depth(settings, context)
        if depth <= 0 or context.width <= 0:
            message = f"No room for shelves in {context.label('shelves')}"
            logger.warning(message)
            return GenerationResult.empty([message])

        thickness = context.thickness.shelves
        heights = self._shelf_heights(settings, context, warnings)

        shelves = []
        for index, y in enumerate(heights):
            shelves.append(
                Shelf(
                    id=make_component_id("shelf", context.zone_index, index, context.sub_zone),
                    name=context.label(f"Shelf {index + 1}"),
                    material_id=context.material_id,
                    width=context.width,
                    length=depth,
                    thickness=thickness,
                    zone_index=context.zone_index,
                    sub_zone=context.sub_zone,
                    role=PanelRole.SHELVES,
                    position=Position3D(context.x, y, settings.retraction),
                    retraction=settings.retraction,
                    shelf_index=index,
                    adjustable=settings.adjustable,
                )
            )

        logger.debug(
            f"Generated {len(shelves)} shelves for zone {context.zone_index}"
            f"{f' ({context.sub_zone.value})' if context.sub_zone else ''}"
        )
        return GenerationResult.from_components(shelves, warnings)

    def _shelf_depth(self, settings: ShelfSettings, context: ContentContext) -> float:
        return context.cabinet.depth - settings.retraction - context.back_depth

    def _shelf_heights(
        self,
        settings: ShelfSettings,
        context: ContentContext,
        warnings: list[str],
    ) -> list[float]:
        count = settings.shelf_count
        if settings.uses_custom_positions:
            limit = max(0.0, context.height - context.thickness.shelves)
            heights = []
            for position in settings.custom_positions:
                if position > limit:
                    message = (
                        f"Shelf position {position:g}mm clamped to {limit:g}mm in "
                        f"{context.label('shelves')}"
                    )
                    logger.warning(message)
                    warnings.append(message)
                heights.append(context.bottom + min(position, limit))
            return heights

        if settings.shelf_spacing == ShelfSpacing.CUSTOM:
            logger.debug(
                f"Custom shelf positions do not match shelf count in zone "
                f"{context.zone_index}, using even spacing"
            )
        spacing = context.height / (count + 1)
        return [context.bottom + spacing * (i + 1) for i in range(count)]
