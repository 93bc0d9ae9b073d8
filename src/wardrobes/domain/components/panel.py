"""Flat sheet panels with placement, edge banding and machining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..value_objects import (
    Cutout,
    CutoutShape,
    DrillHole,
    EdgeBanding,
    FixationPoint,
    FixationType,
    GrainDirection,
    PanelFace,
    PanelOrientation,
    PanelRole,
    Position3D,
)
from .base import Component
from .registry import ComponentTypeRegistry

REFERENCE_THICKNESS = 19.0
REFERENCE_SPAN = 1000.0


@ComponentTypeRegistry.register("panel")
@dataclass
class Panel(Component):
    """A flat panel cut from sheet material.

    For horizontal panels ``width`` runs left to right and ``length`` runs
    front to back. For vertical panels ``width`` is the depth and ``length``
    the height. Frontal panels use ``width`` across and ``length`` up.
    """

    kind: ClassVar[str] = "panel"
    base_load: ClassVar[float] = 20.0

    role: PanelRole | None = None
    orientation: PanelOrientation = PanelOrientation.HORIZONTAL
    position: Position3D = Position3D()
    edge_banding: EdgeBanding = EdgeBanding()
    cut_angle: float = 0.0
    corner_radius: float = 0.0
    grain: GrainDirection = GrainDirection.LENGTH
    drill_holes: tuple[DrillHole, ...] = ()
    cutouts: tuple[Cutout, ...] = ()
    fixations: tuple[FixationPoint, ...] = ()

    def add_drill_hole(
        self,
        x: float,
        y: float,
        face: PanelFace = PanelFace.TOP,
        diameter: float = 5.0,
        depth: float | None = None,
        countersink: bool = False,
        purpose: str = "fixation",
    ) -> DrillHole:
        """Attach a drill hole. Depth defaults to a through hole."""
        hole = DrillHole(
            x=x,
            y=y,
            face=face,
            diameter=diameter,
            depth=self.thickness if depth is None else depth,
            countersink=countersink,
            countersink_diameter=diameter * 2 if countersink else 0.0,
            purpose=purpose,
        )
        self.drill_holes = self.drill_holes + (hole,)
        return hole

    def add_cutout(self, cutout: Cutout) -> Cutout:
        self.cutouts = self.cutouts + (cutout,)
        return cutout

    def add_fixation_point(
        self,
        target_id: str,
        x: float,
        y: float,
        face: PanelFace = PanelFace.TOP,
        fixation_type: FixationType = FixationType.SCREW,
        diameter: float = 5.0,
        depth: float = 0.0,
    ) -> FixationPoint:
        """Record that this panel is fastened to component ``target_id``."""
        point = FixationPoint(
            target_id=target_id,
            x=x,
            y=y,
            face=face,
            fixation_type=fixation_type,
            diameter=diameter,
            depth=depth,
        )
        self.fixations = self.fixations + (point,)
        return point

    @property
    def net_surface_area(self) -> float:
        """Face area in square meters minus cutouts with a computable area."""
        removed = sum(cutout.area for cutout in self.cutouts) * self.quantity / 1_000_000
        return max(0.0, self.surface_area - removed)

    @property
    def edge_banding_length(self) -> float:
        """Total banded edge length in meters."""
        banding = self.edge_banding
        along_width = self.width * (banding.top + banding.bottom)
        along_length = self.length * (banding.left + banding.right)
        return (along_width + along_length) * self.quantity / 1000

    @property
    def needs_angled_cut(self) -> bool:
        return self.cut_angle != 0.0

    @property
    def span(self) -> float:
        """Unsupported span used by the load heuristic."""
        return self.width

    def estimated_load_capacity(self, material_factor: float = 1.0) -> float:
        """Rough load capacity in kilograms.

        Scales with thickness squared and inversely with span. Intended
        only as a soft recommendation.
        """
        if self.span <= 0:
            return 0.0
        thickness_factor = (self.thickness / REFERENCE_THICKNESS) ** 2
        return self.base_load * material_factor * thickness_factor * (REFERENCE_SPAN / self.span)

    def technical_drawing_data(self) -> dict[str, Any]:
        """Flat description of the panel for 2D drawing renderers."""
        return {
            "id": self.id,
            "name": self.name,
            "outline": {"width": self.width, "length": self.length},
            "thickness": self.thickness,
            "edge_banding": list(self.edge_banding.as_tuple()),
            "cut_angle": self.cut_angle,
            "corner_radius": self.corner_radius,
            "grain": self.grain.value,
            "drill_holes": [
                {
                    "x": hole.x,
                    "y": hole.y,
                    "face": hole.face.value,
                    "diameter": hole.diameter,
                    "depth": hole.depth,
                }
                for hole in self.drill_holes
            ],
            "cutouts": [
                {
                    "shape": cutout.shape.value,
                    "x": cutout.x,
                    "y": cutout.y,
                    "width": cutout.width,
                    "height": cutout.height,
                    "radius": cutout.radius,
                    "points": [list(point) for point in cutout.points],
                }
                for cutout in self.cutouts
                if cutout.shape != CutoutShape.CUSTOM
            ],
        }
