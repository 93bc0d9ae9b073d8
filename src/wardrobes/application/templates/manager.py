"""Template manager for bundled project configuration templates."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from wardrobes.application.config import ProjectConfiguration, load_config_from_dict


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description
TEMPLATE_METADATA: dict[str, str] = {
    "standard-wardrobe": "Two-zone wardrobe with shelves and a hanging rail",
    "dressing": "Three-zone dressing with drawers under a separation",
    "drawer-chest": "Single-zone chest of six drawers",
    "walk-in": "Wide four-zone unit for a walk-in closet",
}


class TemplateManager:
    """Lists, reads and copies bundled project templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("dressing", Path("my-dressing.json"))
    """

    def __init__(self) -> None:
        self._data_package = "wardrobes.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List (name, description) for each available template."""
        return list(TEMPLATE_METADATA.items())

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)
        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def load_template(self, name: str) -> ProjectConfiguration:
        """Parse and validate a template.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            ConfigError: If the bundled template is invalid.
        """
        return load_config_from_dict(json.loads(self.get_template(name)))

    def init_template(self, name: str, output_path: Path, force: bool = False) -> None:
        """Copy a template to ``output_path``.

        Raises:
            TemplateNotFoundError: If the template does not exist.
            FileExistsError: If the output file exists and ``force`` is False.
        """
        content = self.get_template(name)
        if output_path.exists() and not force:
            raise FileExistsError(f"File already exists: {output_path}")
        output_path.write_text(content, encoding="utf-8")

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA
