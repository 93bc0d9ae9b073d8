"""Builds projects from configurations by replaying them through a Configurator.

Applying a configuration goes through the same checks as interactive
edits, so a configuration can never produce a project the configurator
would refuse to build.
"""

from __future__ import annotations

import logging

from wardrobes.application.config.loader import ConfigError
from wardrobes.application.config.schema import (
    ProjectConfiguration,
    SubZoneConfig,
    ThicknessConfig,
    ZoneConfig,
)
from wardrobes.application.configurator import Configurator, OperationResult
from wardrobes.domain import ContentType, FurnitureProject, MaterialCatalog, ThicknessProfile

logger = logging.getLogger(__name__)


def config_to_thickness(config: ThicknessConfig) -> ThicknessProfile:
    """Resolve a thickness preset and its overrides.

    Raises:
        ConfigError: If the preset is unknown.
    """
    try:
        profile = ThicknessProfile.preset(config.preset)
        return profile.with_updates({role.value: value for role, value in config.overrides.items()})
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid thickness configuration: {e}",
            error_type="validation",
            details=[{"path": "project.thickness", "message": str(e)}],
        ) from e


def _check(result: OperationResult, path: str) -> None:
    if not result.success:
        raise ConfigError(
            message=f"Cannot apply {path}: {result.message}",
            error_type="apply",
            details=[
                {
                    "path": path,
                    "message": result.message,
                    "code": result.code.value if result.code else None,
                }
            ],
        )
    for warning in result.warnings:
        logger.warning(f"{path}: {warning}")


def _apply_zone(configurator: Configurator, zone: ZoneConfig, path: str) -> None:
    if zone.content_type != ContentType.EMPTY or zone.settings:
        _check(
            configurator.update_zone_content(zone.index, zone.content_type, zone.settings),
            path,
        )
    for name, sub_zone in zone.sub_zones.items():
        _apply_sub_zone(configurator, zone.index, name.value, sub_zone, f"{path}.sub_zones.{name.value}")

    changes: dict[str, object] = {}
    if zone.material_id is not None:
        changes["material_id"] = zone.material_id
    if zone.custom_name is not None:
        changes["custom_name"] = zone.custom_name
    if not zone.visible:
        changes["visible"] = False
    if changes:
        _check(configurator.update_zone(zone.index, **changes), path)


def _apply_sub_zone(
    configurator: Configurator, index: int, name: str, sub_zone: SubZoneConfig, path: str
) -> None:
    _check(
        configurator.update_sub_zone_content(index, name, sub_zone.content_type, sub_zone.settings),
        path,
    )


def apply_config(
    config: ProjectConfiguration,
    configurator: Configurator | None = None,
    catalog: MaterialCatalog | None = None,
) -> Configurator:
    """Build the configured project as the configurator's current project.

    Undo history is cleared once the project is built.

    Args:
        config: A validated configuration.
        configurator: Configurator to build into. A new one using the
            configuration's settings is created when omitted.
        catalog: Material catalog for a newly created configurator.

    Returns:
        The configurator holding the built project.

    Raises:
        ConfigError: If any step of the configuration is rejected.
    """
    if configurator is None:
        configurator = Configurator(settings=config.settings, catalog=catalog)

    project_config = config.project
    _check(
        configurator.create_project(
            name=project_config.name,
            dimensions=project_config.dimensions.to_domain(),
            thickness=config_to_thickness(project_config.thickness),
            has_back=project_config.has_back,
            material_id=project_config.material_id,
            default_structure=False,
        ),
        "project",
    )

    for i, position in enumerate(config.dividers):
        _check(configurator.add_divider(position), f"dividers[{i}]")

    for i, zone in enumerate(config.zones):
        _apply_zone(configurator, zone, f"zones[{i}]")

    project = configurator.project
    assert project is not None
    if project_config.description:
        project.set_metadata(description=project_config.description)
    configurator.load_project(project)
    logger.info(
        f"Built '{project.name}' from configuration: {len(project.zones)} zones, "
        f"{len(project.components)} components"
    )
    return configurator


def config_to_project(
    config: ProjectConfiguration, catalog: MaterialCatalog | None = None
) -> FurnitureProject:
    """Build a standalone project from ``config``.

    Raises:
        ConfigError: If any step of the configuration is rejected.
    """
    project = apply_config(config, catalog=catalog).project
    assert project is not None
    return project
