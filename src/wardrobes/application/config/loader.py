"""Reading wardrobe configuration files.

Every failure, from a missing file to a zone with an unknown content type,
surfaces as ``ConfigError`` so the CLI can report it in one place.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.schema import ProjectConfiguration


class ConfigError(Exception):
    """A wardrobe configuration could not be read, validated or applied.

    Attributes:
        message: Human readable summary.
        error_type: One of ``file_not_found``, ``permission_denied``,
            ``file_read_error``, ``json_parse``, ``validation`` or ``apply``.
        path: Configuration file, when the error came from one.
        details: One mapping per problem. JSON syntax errors carry
            ``line``/``column``; schema and apply errors carry ``path``
            (e.g. ``zones[1].settings``) and ``message``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the JSON file.

    Examples:
        >>> _format_json_path(("project", "dimensions", "width"))
        'project.dimensions.width'
        >>> _format_json_path(("zones", 1, "content_type"))
        'zones[1].content_type'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _describe(detail: dict[str, Any]) -> str:
    value = detail.get("value")
    line = f"  - {detail['path']}: {detail['message']}"
    if value is None or isinstance(value, (dict, list)):
        return line
    return f"{line} (got: {value!r})"


def _validate(data: Any, path: Path | None = None) -> ProjectConfiguration:
    try:
        return ProjectConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in e.errors()
        ]
        summary = "\n".join(["Wardrobe configuration is invalid:", *map(_describe, details)])
        raise ConfigError(summary, "validation", path, details) from e


def load_config(path: Path) -> ProjectConfiguration:
    """Read and validate a wardrobe configuration file.

    Raises:
        ConfigError: With ``error_type`` naming the stage that failed.

    Example:
        >>> try:
        ...     config = load_config(Path("bedroom.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    if not path.exists():
        raise ConfigError(f"Wardrobe configuration not found: {path}", "file_not_found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(f"No permission to read {path}", "permission_denied", path) from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}", "file_read_error", path) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> ProjectConfiguration:
    """Validate an already parsed configuration, e.g. a bundled template.

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
