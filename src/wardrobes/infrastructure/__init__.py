"""Infrastructure layer - persistence, exporters and formatters."""

from .exporters import (
    BillOfMaterials,
    BomLine,
    Exporter,
    ExporterRegistry,
    ExportManager,
    build_bill_of_materials,
)
from .formatters import (
    EstimateFormatter,
    LayoutDiagramFormatter,
    ProjectSummaryFormatter,
    ValidationFormatter,
)
from .serialization import (
    SerializationError,
    dumps,
    loads,
    project_from_dict,
    project_to_dict,
)
from .storage import FileProjectStore

__all__ = [
    "BillOfMaterials",
    "BomLine",
    "EstimateFormatter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "FileProjectStore",
    "LayoutDiagramFormatter",
    "ProjectSummaryFormatter",
    "SerializationError",
    "ValidationFormatter",
    "build_bill_of_materials",
    "dumps",
    "loads",
    "project_from_dict",
    "project_to_dict",
]
