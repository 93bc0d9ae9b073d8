"""Domain services: partitioning, regeneration, estimation and validation."""

from .carcass import CarcassBuilder
from .estimation import MaterialUsage, ProjectEstimate, ProjectEstimator
from .materials import (
    DEFAULT_MATERIAL_ID,
    DEFAULT_MATERIALS,
    InMemoryMaterialCatalog,
    Material,
    MaterialCatalog,
    MaterialKind,
)
from .partitioner import MIN_ZONE_WIDTH, ZonePartitioner
from .regeneration import BuildResult, ComponentBuilder
from .validation import ProjectValidator, ValidationStatus

__all__ = [
    "DEFAULT_MATERIALS",
    "DEFAULT_MATERIAL_ID",
    "MIN_ZONE_WIDTH",
    "BuildResult",
    "CarcassBuilder",
    "ComponentBuilder",
    "InMemoryMaterialCatalog",
    "Material",
    "MaterialCatalog",
    "MaterialKind",
    "MaterialUsage",
    "ProjectEstimate",
    "ProjectEstimator",
    "ProjectValidator",
    "ValidationStatus",
    "ZonePartitioner",
]
