"""JSON-compatible encoding of projects and their records.

Encoding walks ``dataclasses.fields``. Decoding validates each record with a
pydantic ``TypeAdapter``, which builds the frozen dataclasses directly and
runs their ``__post_init__`` checks. Two fields need outside information:

- components are polymorphic and carry a ``type`` key resolved through
  ``ComponentTypeRegistry``;
- zone and sub-zone ``settings`` are validated against the settings record
  of the sibling ``content_type`` before the enclosing record is built.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from wardrobes.domain import (
    Component,
    ComponentTypeRegistry,
    Dimensions,
    Divider,
    FurnitureProject,
    ProjectMetadata,
    ThicknessProfile,
    Zone,
)
from wardrobes.domain.content import SETTINGS_TYPES, SeparationSettings, SubZoneContent
from wardrobes.domain.value_objects import ContentType

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class SerializationError(ValueError):
    """Raised when stored data cannot be decoded into project records."""


def encode(value: Any) -> Any:
    """Convert records, enums and containers to JSON-compatible values."""
    if isinstance(value, Component):
        return {"type": value.kind, **_encode_fields(value)}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_fields(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(encode(k)): encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    return value


def _encode_fields(record: Any) -> dict[str, Any]:
    return {f.name: encode(getattr(record, f.name)) for f in dataclasses.fields(record) if f.init}


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _validate(tp: Any, data: Any, label: str) -> Any:
    try:
        return _adapter(tp).validate_python(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or label}: {err['msg']}" for err in e.errors()
        )
        raise SerializationError(f"Invalid {label}: {details}") from e
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Invalid {label}: {e}") from e


def _content_type(data: dict[str, Any]) -> ContentType:
    try:
        return ContentType(data.get("content_type", ContentType.EMPTY))
    except ValueError as e:
        raise SerializationError(str(e)) from e


def decode_settings(content_type: ContentType | str, data: Any) -> Any:
    """Validate zone settings against the record for ``content_type``.

    Sub-zones of a separation are decoded first so that each nested
    ``settings`` value reaches the separation record already typed.
    """
    settings_type = SETTINGS_TYPES[ContentType(content_type)]
    if settings_type is SeparationSettings and isinstance(data, dict):
        sub_zones = data.get("sub_zones", {})
        if not isinstance(sub_zones, dict):
            raise SerializationError(f"Expected an object for sub_zones, got {sub_zones!r}")
        data = {
            **data,
            "sub_zones": {
                name: _decode_with_settings(SubZoneContent, sub) for name, sub in sub_zones.items()
            },
        }
    return _validate(settings_type, data, settings_type.__name__)


def _decode_with_settings(record_type: type, data: Any) -> Any:
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object for {record_type.__name__}, got {data!r}")
    content_type = _content_type(data)
    fields = {**data, "settings": decode_settings(content_type, data.get("settings", {}))}
    return _validate(record_type, fields, record_type.__name__)


def decode_zone(data: Any) -> Zone:
    """Rebuild a zone, typing its settings by ``content_type``.

    Raises:
        SerializationError: If the content type is unknown or a value is invalid.
    """
    return _decode_with_settings(Zone, data)


def decode_component(data: dict[str, Any]) -> Component:
    """Rebuild a component using its ``type`` key.

    Raises:
        SerializationError: If the type is unknown or the fields are invalid.
    """
    fields = dict(data)
    kind = fields.pop("type", "component")
    try:
        component_class = ComponentTypeRegistry.get(kind)
    except KeyError as e:
        raise SerializationError(str(e)) from e
    return _validate(component_class, fields, component_class.__name__)


def project_to_dict(project: FurnitureProject) -> dict[str, Any]:
    """Encode a project, including its generated components."""
    return {
        "format_version": FORMAT_VERSION,
        "id": project.id,
        "name": project.name,
        "created_at": encode(project.created_at),
        "updated_at": encode(project.updated_at),
        "dimensions": encode(project.dimensions),
        "thickness": encode(project.thickness),
        "has_back": project.has_back,
        "material_id": project.material_id,
        "dividers": encode(project.dividers),
        "zones": encode(project.zones),
        "material_overrides": dict(project.material_overrides),
        "metadata": encode(project.metadata),
        "components": encode(project.components),
    }


def project_from_dict(data: dict[str, Any], regenerate: bool = False) -> FurnitureProject:
    """Decode a project.

    Args:
        data: Output of ``project_to_dict``.
        regenerate: Rebuild components from the decoded parameters instead
            of using the stored ones.

    Raises:
        SerializationError: If the data is malformed or from a newer format.
    """
    version = data.get("format_version", FORMAT_VERSION)
    if version > FORMAT_VERSION:
        raise SerializationError(f"Unsupported project format version {version}")
    try:
        project = FurnitureProject(
            name=data["name"],
            dimensions=_validate(Dimensions, data["dimensions"], "dimensions"),
            thickness=_validate(ThicknessProfile, data.get("thickness", {}), "thickness"),
            has_back=data.get("has_back", True),
            material_id=data.get("material_id"),
            dividers=_validate(tuple[Divider, ...], data.get("dividers", []), "dividers"),
            zones=tuple(decode_zone(zone) for zone in data.get("zones", [])),
            components=tuple(decode_component(c) for c in data.get("components", [])),
            material_overrides=dict(data.get("material_overrides", {})),
            metadata=_validate(ProjectMetadata, data.get("metadata", {}), "metadata"),
            id=data["id"],
            created_at=_validate(datetime, data["created_at"], "created_at"),
            updated_at=_validate(datetime, data["updated_at"], "updated_at"),
        )
    except KeyError as e:
        raise SerializationError(f"Missing project field {e}") from e

    if regenerate or not project.components:
        project.regenerate()
    logger.debug(f"Decoded project '{project.name}' with {len(project.components)} components")
    return project


def dumps(project: FurnitureProject, indent: int | None = 2) -> str:
    return json.dumps(project_to_dict(project), indent=indent)


def loads(text: str, regenerate: bool = False) -> FurnitureProject:
    """Decode a project from JSON text.

    Raises:
        SerializationError: If the text is not valid JSON or not a project.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid project JSON (line {e.lineno}): {e.msg}") from e
    return project_from_dict(data, regenerate=regenerate)
