"""JSON configuration files for wardrobe projects.

Example:
    >>> from pathlib import Path
    >>> from wardrobes.application.config import apply_config, load_config, ConfigError
    >>>
    >>> try:
    ...     configurator = apply_config(load_config(Path("bedroom.json")))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobes.application.config.adapter import (
    apply_config,
    config_to_project,
    config_to_thickness,
)
from wardrobes.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from wardrobes.application.config.schema import (
    SUPPORTED_VERSIONS,
    ProjectConfig,
    ProjectConfiguration,
    SubZoneConfig,
    ThicknessConfig,
    ZoneConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ProjectConfig",
    "ProjectConfiguration",
    "SubZoneConfig",
    "ThicknessConfig",
    "ZoneConfig",
    "apply_config",
    "config_to_project",
    "config_to_thickness",
    "load_config",
    "load_config_from_dict",
]
