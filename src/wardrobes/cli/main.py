"""Typer CLI for wardrobe project generation."""

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import Configurator, ConfiguratorSettings
from wardrobes.application.config import ConfigError, apply_config, load_config
from wardrobes.application.templates import TemplateManager, TemplateNotFoundError
from wardrobes.cli.commands import display_config_error, templates_app, validate_command
from wardrobes.domain import Dimensions, FurnitureProject
from wardrobes.infrastructure import (
    EstimateFormatter,
    ExporterRegistry,
    ExportManager,
    FileProjectStore,
    LayoutDiagramFormatter,
    ProjectSummaryFormatter,
    SerializationError,
    ValidationFormatter,
)

OUTPUT_FORMATS = ("summary", "diagram", "bom", "estimate", "validation", "all")

app = typer.Typer(
    name="wardrobes",
    help="Design parametric wardrobes and generate their parts lists.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")


def _package_version() -> str:
    try:
        return version("wardrobes")
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wardrobes {_package_version()}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
    show_version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Design parametric wardrobes and generate their parts lists."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build(
    config: Path | None,
    template: str | None,
    name: str,
    width: float | None,
    height: float | None,
    depth: float | None,
) -> Configurator:
    """Build a configurator holding the project described by the options."""
    if config is not None and template is not None:
        typer.echo("Error: Use either --config or --template, not both", err=True)
        raise typer.Exit(code=1)

    try:
        if config is not None:
            configurator = apply_config(load_config(config))
        elif template is not None:
            configurator = apply_config(TemplateManager().load_template(template))
        else:
            configurator = Configurator(ConfiguratorSettings())
            result = configurator.create_project(name=name, dimensions=Dimensions())
            if not result.success:
                typer.echo(f"Error: {result.message}", err=True)
                raise typer.Exit(code=1)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)
    except TemplateNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if any(v is not None for v in (width, height, depth)):
        result = configurator.update_dimensions(width, height, depth)
        if not result.success:
            typer.echo(f"Error: {result.message}", err=True)
            raise typer.Exit(code=1)
    return configurator


def _render(configurator: Configurator, output_format: str) -> str:
    project = configurator.project
    assert project is not None
    derived = configurator.derived
    sections = []
    if output_format in ("summary", "all"):
        sections.append(ProjectSummaryFormatter().format(project))
    if output_format in ("diagram", "all"):
        sections.append(LayoutDiagramFormatter().format(project))
    if output_format in ("bom", "all"):
        exporter = ExporterRegistry.create("text", configurator.catalog)
        sections.append(exporter.export_string(project))
    if output_format in ("estimate", "all") and derived.estimate is not None:
        sections.append(EstimateFormatter().format(derived.estimate, configurator.catalog))
        sections.append(f"Complexity: {derived.complexity.value}")
    if output_format in ("validation", "all"):
        sections.append(ValidationFormatter().format(derived.validation))
    return "\n\n".join(sections)


@app.command()
def generate(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option("--template", "-t", help="Bundled template to start from"),
    ] = None,
    name: Annotated[
        str,
        typer.Option("--name", "-n", help="Project name when no configuration is given"),
    ] = "New wardrobe",
    width: Annotated[
        float | None,
        typer.Option("--width", "-w", help="Overall width in millimeters"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Overall height in millimeters"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-d", help="Overall depth in millimeters"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help=f"Console output: {', '.join(OUTPUT_FORMATS)}"),
    ] = "summary",
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (csv, json, text) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", help="Directory for exported files"),
    ] = Path("."),
    save: Annotated[
        Path | None,
        typer.Option("--save", "-s", help="Save the project to this file"),
    ] = None,
) -> None:
    """Generate a wardrobe project and print or export its parts.

    Examples:
        wardrobes generate --template dressing --format all
        wardrobes generate -c bedroom.json --output-formats csv,json --output-dir out
        wardrobes generate -w 1600 -h 2200 -d 580 --save bedroom.wardrobe.json
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)

    configurator = _build(config, template, name, width, height, depth)
    project = configurator.project
    assert project is not None

    typer.echo(_render(configurator, output_format))

    if output_formats:
        _export(configurator, project, output_formats, output_dir)

    if save is not None:
        try:
            path = FileProjectStore(save.parent).save(project, save)
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Saved: {path}")


def _export(
    configurator: Configurator, project: FurnitureProject, formats_str: str, output_dir: Path
) -> None:
    available = ExporterRegistry.available_formats()
    if formats_str.lower() == "all":
        formats = available
    else:
        formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]

    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir, catalog=configurator.catalog)
    project_name = project.name.lower().replace(" ", "_")
    try:
        results = manager.export_all(formats, project, project_name)
    except OSError as e:
        typer.echo(f"Error: Export failed: {e}", err=True)
        raise typer.Exit(code=1)
    for format_name, path in results.items():
        typer.echo(f"Exported {format_name}: {path}")


@app.command()
def show(
    project_file: Annotated[
        Path,
        typer.Argument(help="Saved project file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help=f"Console output: {', '.join(OUTPUT_FORMATS)}"),
    ] = "summary",
    regenerate: Annotated[
        bool,
        typer.Option("--regenerate", help="Rebuild components from the saved parameters"),
    ] = False,
) -> None:
    """Print a saved project.

    Example:
        wardrobes show bedroom.wardrobe.json --format bom
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)
    try:
        project = FileProjectStore(project_file.parent).load(project_file, regenerate=regenerate)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except SerializationError as e:
        typer.echo(f"Error: Invalid project file: {e}", err=True)
        raise typer.Exit(code=1)

    configurator = Configurator(project=project)
    typer.echo(_render(configurator, output_format))


if __name__ == "__main__":
    app()
