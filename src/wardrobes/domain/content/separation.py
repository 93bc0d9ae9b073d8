"""Horizontal separation generator with recursive sub-zone content."""

from __future__ import annotations

import logging

from ..components import HorizontalSeparator, make_component_id
from ..value_objects import ContentType, PanelRole, Position3D, SubZoneName
from .context import ContentContext
from .registry import content_registry
from .results import GenerationResult, ValidationResult
from .settings import SeparationSettings, sub_zone_windows

logger = logging.getLogger(__name__)

MIN_SUB_ZONE_HEIGHT = 300.0


@content_registry.register(ContentType.HORIZONTAL_SEPARATION)
class SeparationContent:
    """One or two separators, then each configured sub-zone's content.

    Sub-zone content is produced by the generator registered for its content
    type, run against the sub-zone's vertical window. A second separator
    whose height does not exceed the first is ignored, leaving two
    sub-zones.
    """

    def validate(
        self, settings: SeparationSettings, context: ContentContext
    ) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []
        half = context.thickness.horizontal_dividers / 2

        if not context.bottom + half <= settings.separation_height <= context.top - half:
            errors.append(
                f"Separation height {settings.separation_height:g}mm is outside the "
                f"usable range {context.bottom:g}-{context.top:g}mm"
            )
        if settings.has_second_separation:
            if not settings.second_separation_valid:
                warnings.append(
                    f"Second separation height {settings.second_separation_height:g}mm "
                    f"must exceed the first ({settings.separation_height:g}mm); "
                    "the second separator is ignored"
                )
            elif settings.second_separation_height > context.top - half:
                errors.append(
                    f"Second separation height {settings.second_separation_height:g}mm "
                    f"is above the usable top {context.top:g}mm"
                )
        elif not settings.sub_zone(SubZoneName.MIDDLE).is_empty:
            warnings.append("Middle sub-zone content is ignored without a second separation")

        result = ValidationResult.from_lists(errors, warnings)
        windows = sub_zone_windows(
            settings, context.thickness.horizontal_dividers, context.bottom, context.top
        )
        for name, window in windows.items():
            if window.height < MIN_SUB_ZONE_HEIGHT:
                result = result.merged(
                    ValidationResult.ok(
                        [f"{name.value} sub-zone is only {window.height:g}mm high"]
                    )
                )
            content = settings.sub_zone(name)
            if content.is_empty:
                continue
            generator = content_registry.get(content.content_type)()
            result = result.merged(
                generator.validate(content.settings, context.for_window(name, window)),
                prefix=f"{name.value} sub-zone: ",
            )
        return result

    def generate(
        self, settings: SeparationSettings, context: ContentContext
    ) -> GenerationResult:
        warnings: list[str] = []
        thickness = context.thickness.horizontal_dividers
        half = thickness / 2

        heights = [self._clamped(settings.separation_height, context, half, warnings)]
        if settings.has_second_separation:
            if settings.second_separation_valid:
                heights.append(
                    self._clamped(settings.second_separation_height, context, half, warnings)
                )
            else:
                message = (
                    f"Second separation at {settings.second_separation_height:g}mm is not "
                    f"above the first at {settings.separation_height:g}mm in "
                    f"{context.label('separation')}; ignored"
                )
                logger.warning(message)
                warnings.append(message)

        separators = [
            HorizontalSeparator(
                id=make_component_id("h_separator", context.zone_index, number),
                name=context.label(f"Horizontal separator {number}"),
                material_id=context.material_id,
                width=context.width,
                length=context.inner_depth,
                thickness=thickness,
                structural=True,
                zone_index=context.zone_index,
                role=PanelRole.HORIZONTAL_DIVIDERS,
                position=Position3D(context.x, height - half, 0.0),
                separation_index=number,
            )
            for number, height in enumerate(heights, start=1)
        ]
        result = GenerationResult.from_components(separators, warnings)

        windows = sub_zone_windows(settings, thickness, context.bottom, context.top)
        for name, window in windows.items():
            content = settings.sub_zone(name)
            if content.is_empty:
                continue
            generator = content_registry.get(content.content_type)()
            sub_result = generator.generate(content.settings, context.for_window(name, window))
            result = result.merged(
                GenerationResult(
                    components=sub_result.components,
                    warnings=sub_result.warnings,
                    metadata={f"{name.value}_metadata": sub_result.metadata}
                    if sub_result.metadata
                    else {},
                )
            )
        return result

    def _clamped(
        self,
        height: float,
        context: ContentContext,
        half: float,
        warnings: list[str],
    ) -> float:
        low, high = context.bottom + half, context.top - half
        if low <= height <= high:
            return height
        clamped = min(max(height, low), high)
        message = (
            f"Separation height {height:g}mm outside {context.label('separation')}; "
            f"moved to {clamped:g}mm"
        )
        logger.warning(message)
        warnings.append(message)
        return clamped
