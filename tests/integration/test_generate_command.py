"""Integration tests for the generate and show CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from wardrobes.cli.main import app

runner = CliRunner()


class TestGenerateCommand:
    """Tests for console output of the generate command."""

    def test_default_project(self) -> None:
        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0
        assert result.output.startswith("PROJECT: New wardrobe")
        assert "Components: 10" in result.output

    def test_name_and_dimensions(self) -> None:
        result = runner.invoke(
            app, ["generate", "-n", "Hall", "-w", "1600", "-h", "2200", "-d", "580"]
        )

        assert result.exit_code == 0
        assert "PROJECT: Hall" in result.output
        assert "1600 x 2200 x 580 mm" in result.output

    def test_out_of_bounds_dimensions(self) -> None:
        result = runner.invoke(app, ["generate", "-w", "100"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "below the minimum" in result.output

    def test_template_all_formats(self) -> None:
        result = runner.invoke(app, ["generate", "-t", "dressing", "-f", "all"])

        assert result.exit_code == 0
        assert "PROJECT: Dressing" in result.output
        assert "LAYOUT DIAGRAM" in result.output
        assert "BILL OF MATERIALS: Dressing" in result.output
        assert "MATERIAL ESTIMATE" in result.output
        assert "Complexity: high" in result.output

    def test_validation_format(self) -> None:
        result = runner.invoke(app, ["generate", "-f", "validation"])

        assert result.exit_code == 0
        assert "WARNINGS" in result.output

    def test_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "chest.json"
        config.write_text(
            json.dumps(
                {
                    "schema_version": "1.0",
                    "project": {
                        "name": "Chest",
                        "dimensions": {"width": 600, "height": 900, "depth": 450},
                    },
                    "zones": [{"index": 0, "content_type": "drawers"}],
                }
            )
        )

        result = runner.invoke(app, ["generate", "-c", str(config), "-f", "bom"])

        assert result.exit_code == 0
        assert "BILL OF MATERIALS: Chest" in result.output
        assert "Drawer front" in result.output

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["generate", "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output

    def test_config_and_template_conflict(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["generate", "-c", str(tmp_path / "x.json"), "-t", "dressing"]
        )

        assert result.exit_code == 1
        assert "Use either --config or --template, not both" in result.output

    def test_unknown_template(self) -> None:
        result = runner.invoke(app, ["generate", "-t", "attic"])

        assert result.exit_code == 1
        assert "Template not found: attic" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["generate", "-c", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("wardrobes ")


class TestGenerateExports:
    """Tests for file exports from the generate command."""

    def test_selected_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", "--output-formats", "csv,json", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert "Exported csv:" in result.output
        assert (tmp_path / "new_wardrobe_csv.csv").exists()
        data = json.loads((tmp_path / "new_wardrobe_json.json").read_text())
        assert data["totals"]["part_count"] == 10

    def test_all_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", "-t", "walk-in", "--output-formats", "all", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "walk-in_closet_csv.csv",
            "walk-in_closet_json.json",
            "walk-in_closet_text.txt",
        ]

    def test_unknown_export_format(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["generate", "--output-formats", "csv,dxf", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "Unknown formats: dxf" in result.output
        assert not list(tmp_path.iterdir())


class TestSaveAndShow:
    """Tests for saving a project and printing it back."""

    def test_save_then_show(self, tmp_path: Path) -> None:
        path = tmp_path / "hall.wardrobe.json"

        saved = runner.invoke(app, ["generate", "-n", "Hall", "--save", str(path)])
        shown = runner.invoke(app, ["show", str(path)])

        assert saved.exit_code == 0
        assert f"Saved: {path}" in saved.output
        assert shown.exit_code == 0
        assert shown.output.startswith("PROJECT: Hall")

    def test_show_bom_after_regenerating(self, tmp_path: Path) -> None:
        path = tmp_path / "dressing.wardrobe.json"
        runner.invoke(app, ["generate", "-t", "dressing", "-s", str(path)])

        result = runner.invoke(app, ["show", str(path), "--format", "bom", "--regenerate"])

        assert result.exit_code == 0
        assert "BILL OF MATERIALS: Dressing" in result.output

    def test_show_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(tmp_path / "missing.wardrobe.json")])

        assert result.exit_code == 1
        assert "Project file not found" in result.output

    def test_show_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.wardrobe.json"
        path.write_text("not json")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert "Invalid project file" in result.output

    def test_show_unknown_format(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(tmp_path / "x.json"), "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unknown format: pdf" in result.output
