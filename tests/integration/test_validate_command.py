"""Integration tests for the validate CLI command.

These tests verify the validate command works end-to-end, including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Structural warnings are displayed
- Exit codes are correct
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from wardrobes.cli.main import app

NARROW_SHELVES = {
    "schema_version": "1.0",
    "project": {
        "name": "Narrow",
        "dimensions": {"width": 700, "height": 2000, "depth": 500},
    },
    "zones": [{"index": 0, "content_type": "shelves", "settings": {"shelf_count": 4}}],
}


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a configuration dictionary (or raw text) to a temporary file."""

    def write(data: object, name: str = "config.json") -> Path:
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return write


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["validate", str(write_config(NARROW_SHELVES))])

        assert result.exit_code == 0
        assert "Validating" in result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_config_with_warnings(self, runner: CliRunner, write_config) -> None:
        data = {
            "schema_version": "1.0",
            "dividers": [1000],
            "zones": [{"index": 0, "content_type": "shelves"}],
        }

        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "central support" in result.output
        assert "Validation passed with" in result.output

    def test_structural_issues(self, runner: CliRunner, write_config) -> None:
        data = {
            "schema_version": "1.0",
            "settings": {"enforce_constraints": False},
            "project": {"dimensions": {"width": 7000, "height": 2400, "depth": 600}},
        }

        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        assert "exceeds the maximum" in result.output
        assert "Validation failed: 1 error(s)" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["validate", str(write_config("{ invalid json }"))])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, write_config) -> None:
        data = {**NARROW_SHELVES, "doors": 2}

        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "doors" in result.output

    def test_schema_error_shows_path_and_value(self, runner: CliRunner, write_config) -> None:
        data = {
            "schema_version": "1.0",
            "project": {"dimensions": {"width": -10, "height": 2400, "depth": 600}},
        }

        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        assert "project.dimensions.width" in result.output
        assert "Value: -10" in result.output

    def test_rejected_edit(self, runner: CliRunner, write_config) -> None:
        data = {"schema_version": "1.0", "dividers": [1000, 1050]}

        result = runner.invoke(app, ["validate", str(write_config(data))])

        assert result.exit_code == 1
        assert "dividers[1]" in result.output
        assert "within 150mm" in result.output

    @pytest.mark.parametrize(
        "name", ["standard-wardrobe", "dressing", "drawer-chest", "walk-in"]
    )
    def test_bundled_templates_pass(
        self, runner: CliRunner, tmp_path: Path, name: str
    ) -> None:
        output = tmp_path / f"{name}.json"
        runner.invoke(app, ["templates", "init", name, "-o", str(output)])

        result = runner.invoke(app, ["validate", str(output)])

        assert result.exit_code in (0, 2)
        assert "Validation passed" in result.output
