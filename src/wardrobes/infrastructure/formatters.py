"""Console formatters for projects, estimates and validation status."""

from __future__ import annotations

from wardrobes.domain import (
    DrawerFront,
    FurnitureProject,
    HorizontalSeparator,
    MaterialCatalog,
    Shelf,
    ValidationStatus,
    WardrobeRail,
)
from wardrobes.domain.content import SeparationSettings
from wardrobes.domain.services import ProjectEstimate


class ProjectSummaryFormatter:
    """Formats an overview of a project and its zones."""

    def format(self, project: FurnitureProject) -> str:
        dims = project.dimensions
        lines = [
            f"PROJECT: {project.name}",
            "=" * 60,
            f"Dimensions: {dims.describe()}",
            f"Back panel: {'yes' if project.has_back else 'no'}",
            f"Material: {project.material_id or 'default'}",
            f"Dividers: {', '.join(f'{d.position:g}mm' for d in project.dividers) or 'none'}",
            "",
            "ZONES",
            "-" * 60,
        ]
        for zone in project.zones:
            count = len(project.components_for_zone(zone.index))
            lines.append(
                f"  {zone.display_name:<16} x={zone.position:<8g} w={zone.width:<8g} "
                f"{zone.content_type.value:<22} {count} parts"
            )
            if isinstance(zone.settings, SeparationSettings):
                for name in zone.settings.active_sub_zones():
                    content = zone.settings.sub_zone(name)
                    lines.append(f"    {name.value:<14} {content.content_type.value}")
        lines.append("")
        lines.append(f"Components: {len(project.components)}")
        for warning in project.generation_warnings:
            lines.append(f"  ! {warning}")
        return "\n".join(lines)


class LayoutDiagramFormatter:
    """Front-view ASCII diagram drawn from component positions."""

    def format(self, project: FurnitureProject, width: int = 60, height: int = 24) -> str:
        dims = project.dimensions
        if dims.width <= 0 or dims.height <= 0:
            return "No layout to display."

        grid = [[" " for _ in range(width)] for _ in range(height)]

        def col(x: float) -> int:
            return min(width - 1, max(0, round(x / dims.width * (width - 1))))

        def row(y: float) -> int:
            # Row 0 is the top of the cabinet
            return min(height - 1, max(0, round((1 - y / dims.height) * (height - 1))))

        for x in range(width):
            grid[0][x] = grid[height - 1][x] = "-"
        for y in range(height):
            grid[y][0] = grid[y][width - 1] = "|"
        for divider in project.dividers:
            c = col(divider.position + divider.thickness / 2)
            for y in range(1, height - 1):
                grid[y][c] = "|"

        for component in project.components:
            if isinstance(component, (Shelf, HorizontalSeparator)):
                mark = "=" if isinstance(component, HorizontalSeparator) else "-"
                pos = component.position
                r = row(pos.y + component.thickness / 2)
                for x in range(col(pos.x) + 1, col(pos.x + component.width)):
                    grid[r][x] = mark
            elif isinstance(component, DrawerFront):
                pos = component.position
                r = row(pos.y + component.length)
                for x in range(col(pos.x) + 1, col(pos.x + component.width)):
                    grid[r][x] = "_"
                grid[row(pos.y + component.length / 2)][col(pos.x + component.width / 2)] = "o"
            elif isinstance(component, WardrobeRail):
                pos = component.position
                r = row(pos.y)
                for x in range(col(pos.x), col(pos.x + component.length) + 1):
                    grid[r][x] = "~"

        lines = ["LAYOUT DIAGRAM", "=" * width, ""]
        lines.extend("".join(r) for r in grid)
        lines.append("")
        lines.append(f"Dimensions: {dims.describe()}")
        lines.append(f"Zones: {len(project.zones)}")
        return "\n".join(lines)


class EstimateFormatter:
    """Formats cost and weight estimates per material."""

    def format(self, estimate: ProjectEstimate, catalog: MaterialCatalog) -> str:
        lines = ["MATERIAL ESTIMATE", "=" * 60, ""]
        for usage in estimate.by_material:
            material = catalog.resolve(usage.material_id)
            lines.append(f"{material.name} ({usage.component_count} parts)")
            lines.append(f"  Area:   {usage.area:.2f} m2")
            lines.append(f"  Weight: {usage.weight:.1f} kg")
            lines.append(f"  Cost:   {usage.cost:.2f}")
            lines.append("")
        lines.append("-" * 60)
        lines.append("TOTAL")
        lines.append(f"  Area:         {estimate.total_area:.2f} m2")
        lines.append(f"  Edge banding: {estimate.edge_banding_length:.2f} m")
        lines.append(f"  Weight:       {estimate.total_weight:.1f} kg")
        lines.append(f"  Cost:         {estimate.total_cost:.2f}")
        return "\n".join(lines)


class ValidationFormatter:
    """Formats a validation status as a list of issues and warnings."""

    def format(self, status: ValidationStatus) -> str:
        if status.is_valid and not status.warnings:
            return "Project is valid."
        lines = []
        if status.issues:
            lines.append("ISSUES")
            lines.extend(f"  x {issue}" for issue in status.issues)
        if status.warnings:
            if lines:
                lines.append("")
            lines.append("WARNINGS")
            lines.extend(f"  ! {warning}" for warning in status.warnings)
        return "\n".join(lines)
