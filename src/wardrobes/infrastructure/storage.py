"""File-based project persistence."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from wardrobes.domain import FurnitureProject
from wardrobes.infrastructure.serialization import dumps, loads

logger = logging.getLogger(__name__)

PROJECT_SUFFIX = ".wardrobe.json"


def _slug(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "project"


class FileProjectStore:
    """Stores projects as JSON files in a directory.

    Files are named from the project name and id so that duplicated
    projects never overwrite their source.

    Example:
        store = FileProjectStore(Path("~/wardrobes").expanduser())
        path = store.save(project)
        same = store.load(path)
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, project: FurnitureProject) -> Path:
        return self.directory / f"{_slug(project.name)}-{project.id[:8]}{PROJECT_SUFFIX}"

    def save(self, project: FurnitureProject, path: Path | None = None) -> Path:
        """Write ``project`` and return the file path."""
        target = path or self.path_for(project)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(dumps(project), encoding="utf-8")
        logger.info(f"Saved project '{project.name}' to {target}")
        return target

    def load(self, path: Path, regenerate: bool = False) -> FurnitureProject:
        """Read a project file.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            SerializationError: If the file is not a valid project.
        """
        if not path.exists():
            raise FileNotFoundError(f"Project file not found: {path}")
        project = loads(path.read_text(encoding="utf-8"), regenerate=regenerate)
        logger.info(f"Loaded project '{project.name}' from {path}")
        return project

    def list(self) -> list[Path]:
        if not self.directory.exists():
            return []
        return sorted(self.directory.glob(f"*{PROJECT_SUFFIX}"))

    def delete(self, path: Path) -> None:
        path.unlink()
        logger.info(f"Deleted project file {path}")
