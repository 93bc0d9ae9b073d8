"""Integration tests for the templates CLI commands.

This module tests the `templates list`, `templates show` and
`templates init` CLI commands end-to-end using the Typer CliRunner.
"""

import json
import os
from pathlib import Path

from typer.testing import CliRunner

from wardrobes.cli.main import app

runner = CliRunner()


class TestTemplatesListCommand:
    """Test suite for the 'templates list' command."""

    def test_list_shows_all_templates(self) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        for name in ("standard-wardrobe", "dressing", "drawer-chest", "walk-in"):
            assert name in result.output

    def test_list_shows_descriptions(self) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert "Single-zone chest of six drawers" in result.output

    def test_list_shows_usage_hint(self) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert "wardrobes templates init" in result.output


class TestTemplatesShowCommand:
    """Test suite for the 'templates show' command."""

    def test_show_prints_json(self) -> None:
        result = runner.invoke(app, ["templates", "show", "walk-in"])

        assert result.exit_code == 0
        assert json.loads(result.output)["project"]["name"] == "Walk-in closet"

    def test_show_unknown_template(self) -> None:
        result = runner.invoke(app, ["templates", "show", "attic"])

        assert result.exit_code == 1
        assert "Template not found: attic" in result.output


class TestTemplatesInitCommand:
    """Test suite for the 'templates init' command."""

    def test_init_creates_file(self, tmp_path: Path) -> None:
        output = tmp_path / "closet.json"

        result = runner.invoke(app, ["templates", "init", "dressing", "-o", str(output)])

        assert result.exit_code == 0
        assert f"Created: {output}" in result.output
        assert json.loads(output.read_text())["project"]["name"] == "Dressing"

    def test_init_default_output_name(self, tmp_path: Path) -> None:
        original_cwd = os.getcwd()
        try:
            os.chdir(tmp_path)
            result = runner.invoke(app, ["templates", "init", "drawer-chest"])
        finally:
            os.chdir(original_cwd)

        assert result.exit_code == 0
        assert (tmp_path / "drawer-chest.json").exists()

    def test_init_refuses_existing_file(self, tmp_path: Path) -> None:
        output = tmp_path / "closet.json"
        output.write_text("{}")

        result = runner.invoke(app, ["templates", "init", "dressing", "-o", str(output)])

        assert result.exit_code == 1
        assert "File already exists" in result.output
        assert "--force" in result.output
        assert output.read_text() == "{}"

    def test_init_force_overwrites(self, tmp_path: Path) -> None:
        output = tmp_path / "closet.json"
        output.write_text("{}")

        result = runner.invoke(
            app, ["templates", "init", "dressing", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert "Dressing" in output.read_text()

    def test_init_unknown_template(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "attic", "-o", str(tmp_path / "attic.json")]
        )

        assert result.exit_code == 1
        assert "Available templates:" in result.output
        assert not (tmp_path / "attic.json").exists()

    def test_initialized_template_validates(self, tmp_path: Path) -> None:
        output = tmp_path / "standard.json"
        runner.invoke(app, ["templates", "init", "standard-wardrobe", "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])

        assert result.exit_code in (0, 2)
        assert "Validation passed" in result.output
