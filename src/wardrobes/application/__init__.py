"""Application layer - orchestration of project edits."""

from .configurator import (
    Configurator,
    DerivedValues,
    LockAspect,
    OperationResult,
    ProjectChanged,
    ProjectListener,
    ReasonCode,
)
from .settings import ConfiguratorSettings, DimensionsConfig

__all__ = [
    "Configurator",
    "ConfiguratorSettings",
    "DerivedValues",
    "DimensionsConfig",
    "LockAspect",
    "OperationResult",
    "ProjectChanged",
    "ProjectListener",
    "ReasonCode",
]
