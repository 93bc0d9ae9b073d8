"""Domain layer - core business logic."""

from .components import (
    Component,
    ComponentTypeRegistry,
    DrawerBack,
    DrawerBottom,
    DrawerFront,
    DrawerSide,
    HorizontalSeparator,
    Panel,
    Shelf,
    WardrobeRail,
)
from .content import (
    DrawerSettings,
    EmptySettings,
    SeparationSettings,
    ShelfSettings,
    SubZoneContent,
    WardrobeSettings,
    ZoneContentGenerator,
)
from .entities import Divider, ProjectMetadata, Zone
from .errors import GenerationError, SettingsError, WardrobeError
from .history import SnapshotHistory
from .project import FurnitureProject, ProjectSnapshot, ProjectView
from .services import (
    InMemoryMaterialCatalog,
    Material,
    MaterialCatalog,
    ProjectEstimator,
    ProjectValidator,
    ValidationStatus,
    ZonePartitioner,
)
from .value_objects import (
    Complexity,
    ContentType,
    DimensionBounds,
    Dimensions,
    PanelRole,
    SubZoneName,
    ThicknessProfile,
)

__all__ = [
    "Complexity",
    "Component",
    "ComponentTypeRegistry",
    "ContentType",
    "DimensionBounds",
    "Dimensions",
    "Divider",
    "DrawerBack",
    "DrawerBottom",
    "DrawerFront",
    "DrawerSettings",
    "DrawerSide",
    "EmptySettings",
    "FurnitureProject",
    "GenerationError",
    "HorizontalSeparator",
    "InMemoryMaterialCatalog",
    "Material",
    "MaterialCatalog",
    "Panel",
    "PanelRole",
    "ProjectEstimator",
    "ProjectMetadata",
    "ProjectSnapshot",
    "ProjectValidator",
    "ProjectView",
    "SeparationSettings",
    "SettingsError",
    "Shelf",
    "ShelfSettings",
    "SnapshotHistory",
    "SubZoneContent",
    "SubZoneName",
    "ThicknessProfile",
    "ValidationStatus",
    "WardrobeError",
    "WardrobeRail",
    "WardrobeSettings",
    "Zone",
    "ZoneContentGenerator",
    "ZonePartitioner",
]
