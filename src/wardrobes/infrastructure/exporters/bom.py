"""Bill of materials (parts list) for a project's generated components.

The bill of materials is a flattened view derived on demand from the
component list; it is never stored on the project. One line is produced
per component, in generation order, with the material resolved through
the catalog and cost priced per square meter.

Output formats: csv, json, text
"""

from __future__ import annotations

import csv
import io
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from wardrobes.domain import InMemoryMaterialCatalog, MaterialCatalog, Panel
from wardrobes.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from wardrobes.domain import Component, FurnitureProject


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BomLine:
    """One part of the bill of materials.

    Attributes:
        component_id: Id of the generated component.
        name: Part description.
        kind: Component type key.
        zone: Zone index, None for carcass parts.
        sub_zone: Sub-zone name for parts inside a separated zone.
        width: Width in millimeters.
        length: Length in millimeters.
        thickness: Thickness in millimeters.
        quantity: Number of identical parts.
        material_id: Resolved catalog material id.
        material_name: Display name of the material.
        area: Face area in square meters.
        volume: Volume in cubic decimeters.
        edge_banding: Banded edge length in meters.
        cost: Cost in currency units.
    """

    component_id: str
    name: str
    kind: str
    zone: int | None
    sub_zone: str | None
    width: float
    length: float
    thickness: float
    quantity: int
    material_id: str
    material_name: str
    area: float
    volume: float
    edge_banding: float
    cost: float


@dataclass(frozen=True)
class BillOfMaterials:
    """Parts list for a project with totals."""

    project_name: str
    lines: tuple[BomLine, ...] = field(default_factory=tuple)

    @property
    def part_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total_area(self) -> float:
        return round(sum(line.area for line in self.lines), 4)

    @property
    def total_edge_banding(self) -> float:
        return round(sum(line.edge_banding for line in self.lines), 3)

    @property
    def total_cost(self) -> float:
        return round(sum(line.cost for line in self.lines), 2)

    def by_material(self) -> dict[str, list[BomLine]]:
        grouped: dict[str, list[BomLine]] = {}
        for line in self.lines:
            grouped.setdefault(line.material_name, []).append(line)
        return grouped


def _bom_line(component: Component, catalog: MaterialCatalog) -> BomLine:
    material = catalog.resolve(component.material_id)
    edge_banding = component.edge_banding_length if isinstance(component, Panel) else 0.0
    return BomLine(
        component_id=component.id,
        name=component.name,
        kind=component.kind,
        zone=component.zone_index,
        sub_zone=component.sub_zone.value if component.sub_zone else None,
        width=component.width,
        length=component.length,
        thickness=component.thickness,
        quantity=component.quantity,
        material_id=material.id,
        material_name=material.name,
        area=round(component.surface_area, 4),
        volume=round(component.volume * 1000, 3),
        edge_banding=round(edge_banding, 3),
        cost=round(component.cost(material.price_per_m2), 2),
    )


def build_bill_of_materials(
    project: FurnitureProject, catalog: MaterialCatalog | None = None
) -> BillOfMaterials:
    """Flatten the project's components into a bill of materials."""
    catalog = catalog or InMemoryMaterialCatalog()
    lines = tuple(_bom_line(component, catalog) for component in project.components)
    return BillOfMaterials(project_name=project.name, lines=lines)


class _BomExporter:
    """Shared export plumbing; subclasses render a ``BillOfMaterials``."""

    format_name: ClassVar[str] = ""
    file_extension: ClassVar[str] = ""

    def __init__(self, catalog: MaterialCatalog | None = None) -> None:
        self.catalog = catalog or InMemoryMaterialCatalog()

    def render(self, bom: BillOfMaterials) -> str:
        raise NotImplementedError

    def export_string(self, project: FurnitureProject) -> str:
        return self.render(build_bill_of_materials(project, self.catalog))

    def export(self, project: FurnitureProject, path: Path) -> None:
        content = self.export_string(project)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {self.format_name} bill of materials to {path}")


CSV_HEADER = [
    "Id",
    "Description",
    "Zone",
    "Sub-zone",
    "Width (mm)",
    "Length (mm)",
    "Thickness (mm)",
    "Quantity",
    "Material",
    "Area (m2)",
    "Volume (dm3)",
    "Edge banding (m)",
    "Cost",
]


@ExporterRegistry.register("csv")  # type: ignore[arg-type]
class CsvBomExporter(_BomExporter):
    """Bill of materials as CSV, one row per part."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def render(self, bom: BillOfMaterials) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(CSV_HEADER)
        for line in bom.lines:
            writer.writerow(
                [
                    line.component_id,
                    line.name,
                    "" if line.zone is None else line.zone,
                    line.sub_zone or "",
                    f"{line.width:g}",
                    f"{line.length:g}",
                    f"{line.thickness:g}",
                    line.quantity,
                    line.material_name,
                    f"{line.area:.4f}",
                    f"{line.volume:.3f}",
                    f"{line.edge_banding:.3f}",
                    f"{line.cost:.2f}",
                ]
            )
        return output.getvalue()


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class JsonBomExporter(_BomExporter):
    """Bill of materials as a JSON document with totals."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def to_dict(self, bom: BillOfMaterials) -> dict[str, Any]:
        return {
            "project": bom.project_name,
            "parts": [asdict(line) for line in bom.lines],
            "totals": {
                "part_count": bom.part_count,
                "area_m2": bom.total_area,
                "edge_banding_m": bom.total_edge_banding,
                "cost": bom.total_cost,
            },
        }

    def render(self, bom: BillOfMaterials) -> str:
        return json.dumps(self.to_dict(bom), indent=2)


@ExporterRegistry.register("text")  # type: ignore[arg-type]
class TextBomExporter(_BomExporter):
    """Human-readable parts list grouped by material."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"

    def render(self, bom: BillOfMaterials) -> str:
        lines = [
            f"BILL OF MATERIALS: {bom.project_name}",
            "=" * 60,
        ]
        for material_name, parts in bom.by_material().items():
            lines.append("")
            lines.append(material_name.upper())
            lines.append("-" * 60)
            for part in parts:
                size = f"{part.width:g} x {part.length:g} x {part.thickness:g} mm"
                qty = f" x{part.quantity}" if part.quantity > 1 else ""
                lines.append(f"  {part.name:<28} {size}{qty}")
        lines.append("")
        lines.append("=" * 60)
        lines.append(f"Parts: {bom.part_count}")
        lines.append(f"Area: {bom.total_area:.2f} m2")
        lines.append(f"Edge banding: {bom.total_edge_banding:.2f} m")
        lines.append(f"Estimated cost: {bom.total_cost:.2f}")
        return "\n".join(lines)
