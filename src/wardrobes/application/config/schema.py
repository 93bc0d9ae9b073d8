"""Pydantic models for wardrobe project configuration files.

A configuration describes a project as the sequence of edits that builds
it: overall parameters, divider positions, then zone content. Zone settings
are kept as plain mappings here and validated by the domain when the
configuration is applied.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from wardrobes.application.settings import ConfiguratorSettings, DimensionsConfig
from wardrobes.domain.value_objects import ContentType, PanelRole, SubZoneName

# Version 1.0: Initial project configuration
# Version 1.1: Added sub-zone content and zone display options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class ThicknessConfig(BaseModel):
    """Panel thickness preset plus per-role overrides in millimeters."""

    model_config = ConfigDict(extra="forbid")

    preset: str = Field(default="standard", description="standard, lightweight or heavy_duty")
    overrides: dict[PanelRole, float] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def validate_positive(cls, v: dict[PanelRole, float]) -> dict[PanelRole, float]:
        for role, value in v.items():
            if value <= 0:
                raise ValueError(f"Thickness for {role.value} must be positive")
        return v


class ProjectConfig(BaseModel):
    """Overall project parameters.

    Attributes:
        name: Display name of the project.
        dimensions: Overall width, height and depth in millimeters.
        material_id: Default material, None for the catalog default.
        has_back: Whether the cabinet has a back panel.
        thickness: Panel thickness configuration.
        description: Free-form description stored in project metadata.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="New wardrobe", min_length=1, max_length=200)
    dimensions: DimensionsConfig = Field(
        default_factory=lambda: DimensionsConfig(width=2000, height=2400, depth=600)
    )
    material_id: str | None = None
    has_back: bool = True
    thickness: ThicknessConfig = Field(default_factory=ThicknessConfig)
    description: str = ""


class SubZoneConfig(BaseModel):
    """Content of one sub-zone of a horizontally separated zone."""

    model_config = ConfigDict(extra="forbid")

    content_type: ContentType = ContentType.EMPTY
    settings: dict[str, Any] = Field(default_factory=dict)

    @field_validator("content_type")
    @classmethod
    def validate_not_nested(cls, v: ContentType) -> ContentType:
        if v == ContentType.HORIZONTAL_SEPARATION:
            raise ValueError("Sub-zones cannot contain another horizontal separation")
        return v


class ZoneConfig(BaseModel):
    """Content and display options of one zone.

    Attributes:
        index: Zone index, left to right, after dividers are placed.
        content_type: What the zone contains.
        settings: Overrides merged onto the content type's defaults.
        material_id: Material for the zone's content parts.
        custom_name: Display name override.
        visible: Whether renderers draw the zone's content.
        sub_zones: Sub-zone content, only for horizontal separations.
    """

    model_config = ConfigDict(extra="forbid")

    index: int = Field(..., ge=0)
    content_type: ContentType = ContentType.EMPTY
    settings: dict[str, Any] = Field(default_factory=dict)
    material_id: str | None = None
    custom_name: str | None = None
    visible: bool = True
    sub_zones: dict[SubZoneName, SubZoneConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_sub_zones(self) -> ZoneConfig:
        if self.sub_zones and self.content_type != ContentType.HORIZONTAL_SEPARATION:
            raise ValueError("sub_zones require content_type 'horizontal_separation'")
        if "sub_zones" in self.settings:
            raise ValueError("Give sub-zone content in 'sub_zones', not in 'settings'")
        return self


class ProjectConfiguration(BaseModel):
    """Root model of a wardrobe project configuration file.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     dividers=[990.5],
        ...     zones=[ZoneConfig(index=0, content_type="shelves")],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    dividers: list[float] = Field(default_factory=list, max_length=50)
    zones: list[ZoneConfig] = Field(default_factory=list)
    settings: ConfiguratorSettings | None = Field(
        default=None, description="Configurator policy (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept listed versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("dividers")
    @classmethod
    def validate_dividers(cls, v: list[float]) -> list[float]:
        if any(position <= 0 for position in v):
            raise ValueError("Divider positions must be positive")
        if len(set(v)) != len(v):
            raise ValueError("Divider positions must be unique")
        return sorted(v)

    @model_validator(mode="after")
    def validate_zone_indices(self) -> ProjectConfiguration:
        indices = [zone.index for zone in self.zones]
        if len(set(indices)) != len(indices):
            raise ValueError("Each zone index may only be configured once")
        limit = len(self.dividers)
        for index in indices:
            if index > limit:
                raise ValueError(
                    f"Zone index {index} is out of range for {limit} divider(s)"
                )
        return self
