"""Exporter framework and bill of materials exporters."""

from wardrobes.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from wardrobes.infrastructure.exporters.bom import (
    BillOfMaterials,
    BomLine,
    CsvBomExporter,
    JsonBomExporter,
    TextBomExporter,
    build_bill_of_materials,
)

__all__ = [
    "BillOfMaterials",
    "BomLine",
    "CsvBomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonBomExporter",
    "TextBomExporter",
    "build_bill_of_materials",
]
