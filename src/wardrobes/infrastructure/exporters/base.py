"""Pluggable output formats for a wardrobe's parts list.

Each format is a class registered under a short name ("csv", "json", ...).
``ExportManager`` writes one file per requested format into a directory.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wardrobes.domain import FurnitureProject, MaterialCatalog


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Renders the components of a project in one file format.

    Implementations take an optional ``catalog`` keyword so that material
    ids can be shown by name and priced.

    Attributes:
        format_name: Registry key, also used in exported file names.
        file_extension: Extension of written files, without the dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, project: FurnitureProject, path: Path) -> None: ...

    def export_string(self, project: FurnitureProject) -> str:
        """Render ``project`` for the console.

        Raises:
            NotImplementedError: For binary-only formats.
        """
        raise NotImplementedError(f"'{self.format_name}' exports can only be written to a file")


class ExporterRegistry:
    """Format name to exporter class lookup.

    Example:
        @ExporterRegistry.register("csv")
        class CsvBomExporter:
            format_name = "csv"
            file_extension = "csv"
            ...

        exporter = ExporterRegistry.create("csv", catalog)
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Class decorator adding an exporter under ``format_name``.

        A later registration for the same name replaces the earlier one.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            replaced = cls._exporters.get(format_name)
            if replaced is not None and replaced is not exporter_class:
                logger.warning(
                    f"Format '{format_name}' now exported by {exporter_class.__name__} "
                    f"instead of {replaced.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for ``format_name``.

        Raises:
            KeyError: If the format is unknown; the message lists the known ones.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}'. Available formats: {known}"
            ) from None

    @classmethod
    def create(cls, format_name: str, catalog: MaterialCatalog | None = None) -> Exporter:
        """Instantiate the exporter for ``format_name``."""
        return cls.get(format_name)(catalog=catalog)  # type: ignore[call-arg]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes a project in several formats to ``output_dir``.

    Files are named ``{project_name}_{format}.{extension}``, so exporting a
    project twice overwrites the earlier files.
    """

    def __init__(self, output_dir: Path, catalog: MaterialCatalog | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.catalog = catalog

    def target_for(self, exporter: Exporter, project_name: str) -> Path:
        return self.output_dir / f"{project_name}_{exporter.format_name}.{exporter.file_extension}"

    def export_all(
        self,
        formats: list[str],
        project: FurnitureProject,
        project_name: str = "wardrobe",
    ) -> dict[str, Path]:
        """Export ``project`` once per entry of ``formats``.

        Every format is resolved before anything is written, so an unknown
        name leaves the directory untouched.

        Returns:
            Written file per format name.

        Raises:
            KeyError: If a format is not registered.
            OSError: If the directory or a file cannot be written.
        """
        exporters = {name: ExporterRegistry.create(name, self.catalog) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            target = self.target_for(exporter, project_name)
            exporter.export(project, target)
            logger.info(f"Exported '{project.name}' as {name} to {target}")
            written[name] = target
        return written

    def export_single(
        self,
        format_name: str,
        project: FurnitureProject,
        project_name: str = "wardrobe",
    ) -> Path:
        return self.export_all([format_name], project, project_name)[format_name]
