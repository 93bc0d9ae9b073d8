"""Structural carcass panels: sides, top, bottom, dividers and back."""

from __future__ import annotations

from collections.abc import Sequence

from ..components import Panel
from ..entities import Divider
from ..value_objects import (
    Dimensions,
    EdgeBanding,
    FixationType,
    PanelFace,
    PanelOrientation,
    PanelRole,
    Position3D,
    ThicknessProfile,
)

FRONT_EDGE = EdgeBanding(top=True)
# Fixation points are inset this far from the front and back edges
FIXATION_INSET = 50.0


class CarcassBuilder:
    """Builds the structural panels of a cabinet.

    Sides, dividers, top and bottom stop in front of the back panel when
    the cabinet has one. The back covers the full width and height.
    """

    def build(
        self,
        dimensions: Dimensions,
        thickness: ThicknessProfile,
        dividers: Sequence[Divider],
        has_back: bool = True,
        material_id: str | None = None,
    ) -> list[Panel]:
        width, height, depth = dimensions.width, dimensions.height, dimensions.depth
        inner_depth = max(0.0, depth - (thickness.back if has_back else 0.0))
        inner_width = max(0.0, width - 2 * thickness.sides)
        inner_height = max(0.0, height - thickness.top - thickness.bottom)

        def panel(
            id: str,
            name: str,
            role: PanelRole,
            orientation: PanelOrientation,
            size: tuple[float, float, float],
            position: Position3D,
            banding: EdgeBanding = FRONT_EDGE,
        ) -> Panel:
            panel_width, panel_length, panel_thickness = size
            return Panel(
                id=id,
                name=name,
                material_id=material_id,
                width=panel_width,
                length=panel_length,
                thickness=panel_thickness,
                structural=True,
                role=role,
                orientation=orientation,
                position=position,
                edge_banding=banding,
            )

        left = panel(
            "side_left", "Left side", PanelRole.SIDES, PanelOrientation.VERTICAL,
            (inner_depth, height, thickness.sides), Position3D(0.0, 0.0, 0.0),
        )
        right = panel(
            "side_right", "Right side", PanelRole.SIDES, PanelOrientation.VERTICAL,
            (inner_depth, height, thickness.sides),
            Position3D(width - thickness.sides, 0.0, 0.0),
        )
        top = panel(
            "top", "Top", PanelRole.TOP, PanelOrientation.HORIZONTAL,
            (inner_width, inner_depth, thickness.top),
            Position3D(thickness.sides, height - thickness.top, 0.0),
        )
        bottom = panel(
            "bottom", "Bottom", PanelRole.BOTTOM, PanelOrientation.HORIZONTAL,
            (inner_width, inner_depth, thickness.bottom),
            Position3D(thickness.sides, 0.0, 0.0),
        )
        for horizontal in (top, bottom):
            self._fix_between(horizontal, (left, right), inner_depth)

        panels = [left, right, top, bottom]
        for divider in dividers:
            vertical = panel(
                f"divider_v_{divider.index}",
                f"Vertical divider {divider.index + 1}",
                PanelRole.VERTICAL_DIVIDERS,
                PanelOrientation.VERTICAL,
                (inner_depth, inner_height, divider.thickness),
                Position3D(divider.position, thickness.bottom, 0.0),
            )
            self._fix_between(vertical, (top, bottom), inner_depth)
            panels.append(vertical)

        if has_back:
            panels.append(
                panel(
                    "back", "Back", PanelRole.BACK, PanelOrientation.FRONTAL,
                    (width, height, thickness.back),
                    Position3D(0.0, 0.0, depth - thickness.back),
                    banding=EdgeBanding.none(),
                )
            )
        return panels

    def _fix_between(self, panel: Panel, targets: Sequence[Panel], depth: float) -> None:
        """Record cam-lock fixations near the front and back of each joint."""
        points = [FIXATION_INSET, depth - FIXATION_INSET] if depth > 2 * FIXATION_INSET else [depth / 2]
        for target, face in zip(targets, (PanelFace.LEFT, PanelFace.RIGHT)):
            for z in points:
                panel.add_fixation_point(
                    target.id, z, panel.thickness / 2, face=face,
                    fixation_type=FixationType.CAM_LOCK, diameter=15.0,
                )
