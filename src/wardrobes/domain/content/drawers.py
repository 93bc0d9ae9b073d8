"""Drawer bank generator."""

from __future__ import annotations

import logging

from ..components import (
    Component,
    DrawerBack,
    DrawerBottom,
    DrawerFront,
    DrawerSide,
    make_component_id,
)
from ..value_objects import (
    ContentType,
    DrawerType,
    FixationType,
    HandleType,
    PanelFace,
    PanelRole,
    Position3D,
)
from .context import ContentContext
from .registry import content_registry
from .results import GenerationResult, ValidationResult
from .settings import DrawerSettings

logger = logging.getLogger(__name__)

# Custom box is this much lower than its front
BOX_HEIGHT_CLEARANCE = 30.0
# Space kept behind the box for runners and the back panel
BOX_DEPTH_CLEARANCE = 80.0
# Distance from the cabinet front to the front of the box
BOX_FRONT_OFFSET = 40.0
BAR_HANDLE_HOLE_SPACING = 128.0
MIN_FACE_HEIGHT = 60.0


@content_registry.register(ContentType.DRAWERS)
class DrawersContent:
    """Stack of drawer fronts, plus the box parts for custom drawers.

    Fronts are stacked from the bottom of the usable space with
    ``operational_gap`` between them. When the stack does not fit, the face
    height is reduced uniformly until it does.
    """

    def validate(self, settings: DrawerSettings, context: ContentContext) -> ValidationResult:
        errors: list[str] = []
        warnings: list[str] = []

        if settings.drawer_count == 0:
            return ValidationResult.ok()

        face = self.fitted_face_height(settings, context.height)
        if face <= 0:
            errors.append(
                f"{settings.drawer_count} drawers cannot fit in {context.height:g}mm"
            )
        elif face < settings.face_height:
            warnings.append(
                f"Drawer fronts will be reduced from {settings.face_height:g}mm "
                f"to {face:.1f}mm to fit"
            )
            if face < MIN_FACE_HEIGHT:
                warnings.append(f"Drawer fronts of {face:.1f}mm are very shallow")

        if context.width - 2 * settings.operational_gap <= 0:
            errors.append("Zone is too narrow for drawer fronts")

        if settings.drawer_type == DrawerType.CUSTOM:
            max_depth = context.cabinet.depth - BOX_DEPTH_CLEARANCE
            if settings.drawer_depth > max_depth:
                warnings.append(
                    f"Drawer depth {settings.drawer_depth:g}mm will be limited to {max_depth:g}mm"
                )

        return ValidationResult.from_lists(errors, warnings)

    @staticmethod
    def fitted_face_height(settings: DrawerSettings, available: float) -> float:
        """Face height after shrinking the stack to fit ``available``."""
        if settings.drawer_count == 0:
            return settings.face_height
        if settings.stack_height() <= available:
            return settings.face_height
        gaps = (settings.drawer_count - 1) * settings.operational_gap
        return (available - gaps) / settings.drawer_count

    def generate(self, settings: DrawerSettings, context: ContentContext) -> GenerationResult:
        count = settings.drawer_count
        if count == 0:
            return GenerationResult.empty()

        warnings: list[str] = []
        gap = settings.operational_gap
        face = self.fitted_face_height(settings, context.height)
        if face <= 0:
            message = f"No room for {count} drawers in {context.label('drawers')}"
            logger.warning(message)
            return GenerationResult.empty([message])
        if face < settings.face_height:
            message = (
                f"Drawer stack of {settings.stack_height():g}mm exceeds "
                f"{context.height:g}mm in {context.label('drawers')}; "
                f"face height reduced to {face:.1f}mm"
            )
            logger.warning(message)
            warnings.append(message)

        front_width = context.width - 2 * gap
        if front_width <= 0:
            message = f"Zone too narrow for drawer fronts in {context.label('drawers')}"
            logger.warning(message)
            return GenerationResult.empty(warnings + [message])

        components: list[Component] = []
        for index in range(count):
            y = context.bottom + index * (face + gap)
            front = self._front(settings, context, index, face, front_width, y)
            components.append(front)
            if settings.drawer_type == DrawerType.CUSTOM:
                components.extend(self._box(settings, context, index, face, y, front, warnings))

        return GenerationResult(
            components=tuple(components),
            warnings=tuple(warnings),
            metadata={"face_height": face},
        )

    def _front(
        self,
        settings: DrawerSettings,
        context: ContentContext,
        index: int,
        face: float,
        width: float,
        y: float,
    ) -> DrawerFront:
        front = DrawerFront(
            id=make_component_id("drawer_front", context.zone_index, index, context.sub_zone),
            name=context.label(f"Drawer front {index + 1}"),
            material_id=context.material_id,
            width=width,
            length=face,
            thickness=context.thickness.drawer_front,
            zone_index=context.zone_index,
            sub_zone=context.sub_zone,
            role=PanelRole.DRAWER_FRONT,
            position=Position3D(context.x + settings.operational_gap, y, 0.0),
            drawer_index=index,
            drawer_type=settings.drawer_type,
            handle_type=settings.handle_type,
            handle_position=settings.handle_position,
            gap=settings.operational_gap,
        )
        self._drill_handle_holes(front)
        return front

    def _drill_handle_holes(self, front: DrawerFront) -> None:
        offset = front.handle_offset
        if offset is None or front.handle_type == HandleType.RECESSED:
            return
        center = front.width / 2
        if front.handle_type == HandleType.BAR and front.width > BAR_HANDLE_HOLE_SPACING:
            half = BAR_HANDLE_HOLE_SPACING / 2
            for x in (center - half, center + half):
                front.add_drill_hole(x, offset, face=PanelFace.FRONT, purpose="handle")
        else:
            front.add_drill_hole(center, offset, face=PanelFace.FRONT, purpose="handle")

    def _box(
        self,
        settings: DrawerSettings,
        context: ContentContext,
        index: int,
        face: float,
        y: float,
        front: DrawerFront,
        warnings: list[str],
    ) -> list[Component]:
        thickness = context.thickness
        gap = settings.operational_gap
        height = face - BOX_HEIGHT_CLEARANCE
        width = context.width - 2 * gap - 2 * thickness.drawer_sides
        depth = min(settings.drawer_depth, context.cabinet.depth - BOX_DEPTH_CLEARANCE)
        if height <= 0 or width <= 0 or depth <= 0:
            message = f"No room for drawer box {index + 1} in {context.label('drawers')}"
            logger.warning(message)
            warnings.append(message)
            return []

        zone = context.zone_index
        sub = context.sub_zone
        box_y = y + BOX_HEIGHT_CLEARANCE / 2
        left_x = context.x + gap
        inner_x = left_x + thickness.drawer_sides

        parts: list[Component] = []
        for side, x in (("left", left_x), ("right", inner_x + width)):
            part = DrawerSide(
                id=make_component_id(f"drawer_side_{side}", zone, index, sub),
                name=context.label(f"Drawer {index + 1} {side} side"),
                material_id=context.material_id,
                width=depth,
                length=height,
                thickness=thickness.drawer_sides,
                zone_index=zone,
                sub_zone=sub,
                role=PanelRole.DRAWER_SIDES,
                position=Position3D(x, box_y, BOX_FRONT_OFFSET),
                edge_banding=DrawerSide.banding_for(side),
                drawer_index=index,
                side=side,
            )
            part.add_fixation_point(front.id, 0.0, height / 2, face=PanelFace.FRONT)
            parts.append(part)

        back = DrawerBack(
            id=make_component_id("drawer_back", zone, index, sub),
            name=context.label(f"Drawer {index + 1} back"),
            material_id=context.material_id,
            width=width,
            length=height,
            thickness=thickness.drawer_back,
            zone_index=zone,
            sub_zone=sub,
            role=PanelRole.DRAWER_BACK,
            position=Position3D(inner_x, box_y, BOX_FRONT_OFFSET + depth - thickness.drawer_back),
            drawer_index=index,
        )
        for side_part in parts:
            back.add_fixation_point(
                side_part.id, 0.0, height / 2, face=PanelFace.LEFT, fixation_type=FixationType.DOWEL
            )
        bottom = DrawerBottom(
            id=make_component_id("drawer_bottom", zone, index, sub),
            name=context.label(f"Drawer {index + 1} bottom"),
            material_id=context.material_id,
            width=width,
            length=depth,
            thickness=thickness.drawer_bottom,
            zone_index=zone,
            sub_zone=sub,
            role=PanelRole.DRAWER_BOTTOM,
            position=Position3D(inner_x, box_y, BOX_FRONT_OFFSET),
            drawer_index=index,
        )
        return parts + [back, bottom]
