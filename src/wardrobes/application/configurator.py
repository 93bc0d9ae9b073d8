"""Project orchestration: validated, undoable edits of the current project.

The ``Configurator`` owns the current ``FurnitureProject``. Every edit runs
synchronously to completion: preconditions are checked, the project is
mutated and regenerated, derived aggregates are recomputed, and listeners
are notified last. Listener failures are reported but never undo a
committed edit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wardrobes.application.settings import ConfiguratorSettings
from wardrobes.domain import (
    Complexity,
    ContentType,
    Dimensions,
    FurnitureProject,
    GenerationError,
    InMemoryMaterialCatalog,
    Material,
    MaterialCatalog,
    ProjectEstimator,
    ProjectValidator,
    ProjectView,
    SettingsError,
    SubZoneName,
    ThicknessProfile,
    ValidationStatus,
    Zone,
    ZoneContentGenerator,
)
from wardrobes.domain.content import SeparationSettings
from wardrobes.domain.services import ProjectEstimate

logger = logging.getLogger(__name__)


class ReasonCode(str, Enum):
    """Machine-readable reasons an operation was rejected or failed."""

    NO_PROJECT = "no_project"
    DIMENSIONS_LOCKED = "dimensions_locked"
    INVALID_DIMENSIONS = "invalid_dimensions"
    DIVIDERS_LOCKED = "dividers_locked"
    INVALID_POSITION = "invalid_position"
    DIVIDER_TOO_CLOSE = "divider_too_close"
    INVALID_DIVIDER = "invalid_divider"
    ZONE_LOCKED = "zone_locked"
    INVALID_ZONE = "invalid_zone"
    INVALID_SUB_ZONE = "invalid_sub_zone"
    INVALID_SETTINGS = "invalid_settings"
    INVALID_COMPONENT = "invalid_component"
    MATERIALS_LOCKED = "materials_locked"
    INVALID_MATERIAL = "invalid_material"
    UNSUITABLE_MATERIAL = "unsuitable_material"
    INVALID_THICKNESS = "invalid_thickness"
    INVALID_NAME = "invalid_name"
    GENERATION_ERROR = "generation_error"
    NOTHING_TO_UNDO = "nothing_to_undo"
    NOTHING_TO_REDO = "nothing_to_redo"


class LockAspect(str, Enum):
    """Parts of a project that can be protected from edits."""

    DIMENSIONS = "dimensions"
    DIVIDERS = "dividers"
    MATERIALS = "materials"
    ZONE = "zone"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a configurator operation.

    Attributes:
        success: Whether the operation was committed.
        code: Reason code when the operation did not succeed.
        message: Human-readable summary.
        warnings: Advisories raised by an operation that still succeeded,
            including listener failures.
        data: Operation-specific return value.
    """

    success: bool
    code: ReasonCode | None = None
    message: str = ""
    warnings: tuple[str, ...] = field(default_factory=tuple)
    data: Any = None

    @classmethod
    def ok(
        cls, message: str = "", data: Any = None, warnings: tuple[str, ...] | list[str] = ()
    ) -> OperationResult:
        return cls(success=True, message=message, data=data, warnings=tuple(warnings))

    @classmethod
    def fail(cls, code: ReasonCode, message: str) -> OperationResult:
        return cls(success=False, code=code, message=message)

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True)
class DerivedValues:
    """Aggregates recomputed after every committed change."""

    total_cost: float = 0.0
    total_weight: float = 0.0
    complexity: Complexity = Complexity.LOW
    validation: ValidationStatus = field(default_factory=ValidationStatus)
    estimate: ProjectEstimate | None = None


@dataclass(frozen=True)
class ProjectChanged:
    """Notification sent to listeners after a committed change.

    Attributes:
        action: Name of the operation that changed the project.
        view: Read-only project state for rendering.
        derived: Aggregates after the change.
        resolve_material: Resolves material ids for display.
    """

    action: str
    view: ProjectView
    derived: DerivedValues
    resolve_material: Callable[[str | None], Material]


ProjectListener = Callable[[ProjectChanged], None]


@dataclass
class LockState:
    dimensions: bool = False
    dividers: bool = False
    materials: bool = False


class Configurator:
    """Owns the current project and applies validated, undoable edits.

    Example:
        >>> configurator = Configurator()
        >>> configurator.create_project("Bedroom")
        >>> result = configurator.add_divider(600)
        >>> result.success
        True
        >>> configurator.undo().success
        True
    """

    def __init__(
        self,
        settings: ConfiguratorSettings | None = None,
        catalog: MaterialCatalog | None = None,
        project: FurnitureProject | None = None,
    ) -> None:
        self.settings = settings or ConfiguratorSettings()
        self.catalog = catalog or InMemoryMaterialCatalog()
        self.estimator = ProjectEstimator(self.catalog)
        self.validator = ProjectValidator(self.settings.bounds)
        self.content = ZoneContentGenerator()
        self._locks = LockState()
        self._listeners: list[ProjectListener] = []
        self._project: FurnitureProject | None = None
        self._derived = DerivedValues()
        if project is not None:
            self.load_project(project)

    # -- state -------------------------------------------------------------

    @property
    def project(self) -> FurnitureProject | None:
        return self._project

    @property
    def derived(self) -> DerivedValues:
        return self._derived

    @property
    def can_undo(self) -> bool:
        return self._project is not None and self._project.can_undo

    @property
    def can_redo(self) -> bool:
        return self._project is not None and self._project.can_redo

    def subscribe(self, listener: ProjectListener) -> Callable[[], None]:
        """Register ``listener``; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_lock(
        self, aspect: LockAspect | str, locked: bool = True, zone_index: int | None = None
    ) -> OperationResult:
        aspect = LockAspect(aspect)
        if aspect == LockAspect.ZONE:
            if zone_index is None:
                return OperationResult.fail(
                    ReasonCode.INVALID_ZONE, "A zone index is required to lock a zone"
                )
            # Stored on the zone so the lock follows it through repartitioning
            return self.update_zone(zone_index, locked=locked)
        setattr(self._locks, aspect.value, locked)
        state = "locked" if locked else "unlocked"
        return OperationResult.ok(f"{aspect.value.capitalize()} {state}")

    def is_locked(self, aspect: LockAspect | str, zone_index: int | None = None) -> bool:
        aspect = LockAspect(aspect)
        if aspect == LockAspect.ZONE:
            if zone_index is None:
                return False
            if self._project is None or not 0 <= zone_index < len(self._project.zones):
                return False
            return self._project.zones[zone_index].locked
        return bool(getattr(self._locks, aspect.value))

    # -- project lifecycle -------------------------------------------------

    def create_project(
        self,
        name: str = "New wardrobe",
        dimensions: Dimensions | None = None,
        thickness: ThicknessProfile | None = None,
        has_back: bool = True,
        material_id: str | None = None,
        default_structure: bool = True,
    ) -> OperationResult:
        """Replace the current project with a new one."""
        dimensions = dimensions or Dimensions()
        if self.settings.enforce_constraints:
            issues = dimensions.validate(self.settings.bounds)
            if issues:
                return OperationResult.fail(ReasonCode.INVALID_DIMENSIONS, "; ".join(issues))
        if material_id is not None and self.catalog.get(material_id) is None:
            return OperationResult.fail(
                ReasonCode.INVALID_MATERIAL, f"Unknown material '{material_id}'"
            )
        try:
            project = FurnitureProject.create(
                name=name,
                dimensions=dimensions,
                thickness=thickness,
                has_back=has_back,
                material_id=material_id,
                default_structure=default_structure,
            )
        except GenerationError as exc:
            logger.exception("Failed to generate new project")
            return OperationResult.fail(ReasonCode.GENERATION_ERROR, str(exc))
        return self.load_project(project, action="project_created")

    def load_project(
        self, project: FurnitureProject, action: str = "project_loaded"
    ) -> OperationResult:
        """Make ``project`` current, discarding undo history."""
        self._project = project
        project.reset_history(self.settings.max_history)
        self._locks = LockState()
        self._recompute()
        warnings = self._notify(action)
        logger.info(f"Loaded project '{project.name}' ({project.id})")
        return OperationResult.ok(f"Project '{project.name}' loaded", project, warnings)

    def duplicate_project(self, name: str | None = None) -> OperationResult:
        """Copy the current project under a new id without switching to it."""
        if self._project is None:
            return self._no_project()
        copy = self._project.clone(name or f"{self._project.name} (copy)")
        return OperationResult.ok(f"Project duplicated as '{copy.name}'", copy)

    # -- geometry ----------------------------------------------------------

    def update_dimensions(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.DIMENSIONS):
            return OperationResult.fail(ReasonCode.DIMENSIONS_LOCKED, "Dimensions are locked")
        try:
            dimensions = project.dimensions.with_changes(width, height, depth)
        except ValueError as exc:
            return OperationResult.fail(ReasonCode.INVALID_DIMENSIONS, str(exc))
        if self.settings.round_dimensions:
            dimensions = dimensions.round_to_step(self.settings.round_step)

        issues = dimensions.validate(self.settings.bounds)
        if issues and self.settings.enforce_constraints:
            return OperationResult.fail(ReasonCode.INVALID_DIMENSIONS, "; ".join(issues))

        return self._commit(
            "dimensions_updated",
            lambda p: p.set_dimensions(dimensions),
            f"Dimensions set to {dimensions.describe()}",
            issues,
        )

    def add_divider(self, position: float) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.DIVIDERS):
            return OperationResult.fail(ReasonCode.DIVIDERS_LOCKED, "Dividers are locked")
        rejection = self._check_divider_position(project, position)
        if rejection is not None:
            return rejection
        return self._commit(
            "divider_added",
            lambda p: p.add_divider(position),
            f"Divider added at {position:g}mm",
        )

    def remove_divider(self, index: int) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.DIVIDERS):
            return OperationResult.fail(ReasonCode.DIVIDERS_LOCKED, "Dividers are locked")
        if not 0 <= index < len(project.dividers):
            return OperationResult.fail(
                ReasonCode.INVALID_DIVIDER, f"Divider {index} does not exist"
            )
        return self._commit(
            "divider_removed",
            lambda p: p.remove_divider(index),
            f"Divider {index} removed",
        )

    def move_divider(self, index: int, position: float) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.DIVIDERS):
            return OperationResult.fail(ReasonCode.DIVIDERS_LOCKED, "Dividers are locked")
        if not 0 <= index < len(project.dividers):
            return OperationResult.fail(
                ReasonCode.INVALID_DIVIDER, f"Divider {index} does not exist"
            )
        rejection = self._check_divider_position(project, position, ignore=index)
        if rejection is not None:
            return rejection
        return self._commit(
            "divider_moved",
            lambda p: p.move_divider(index, position),
            f"Divider {index} moved to {position:g}mm",
        )

    def update_has_back(self, has_back: bool) -> OperationResult:
        if self._project is None:
            return self._no_project()
        return self._commit(
            "back_updated",
            lambda p: p.set_has_back(has_back),
            "Back panel added" if has_back else "Back panel removed",
        )

    def update_thickness_profile(
        self, values: ThicknessProfile | Mapping[str, float] | str
    ) -> OperationResult:
        """Replace or update panel thicknesses.

        Args:
            values: A full profile, a preset name, or a mapping of panel
                roles to thicknesses merged onto the current profile.
        """
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.MATERIALS):
            return OperationResult.fail(ReasonCode.MATERIALS_LOCKED, "Materials are locked")
        try:
            if isinstance(values, ThicknessProfile):
                profile = values
            elif isinstance(values, str):
                profile = ThicknessProfile.preset(values)
            else:
                profile = project.thickness.with_updates(values)
        except (TypeError, ValueError) as exc:
            return OperationResult.fail(ReasonCode.INVALID_THICKNESS, str(exc))

        issues = profile.validate()
        if issues and self.settings.enforce_constraints:
            return OperationResult.fail(ReasonCode.INVALID_THICKNESS, "; ".join(issues))
        return self._commit(
            "thickness_updated",
            lambda p: p.set_thickness(profile),
            "Thickness profile updated",
            issues,
        )

    # -- zones -------------------------------------------------------------

    def update_zone_content(
        self,
        zone_index: int,
        content_type: ContentType | str,
        settings: Mapping[str, Any] | None = None,
    ) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        rejection = self._check_zone(project, zone_index)
        if rejection is not None:
            return rejection
        try:
            candidate = project.zones[zone_index].with_content(content_type, settings)
        except (SettingsError, ValueError) as exc:
            return OperationResult.fail(ReasonCode.INVALID_SETTINGS, str(exc))

        rejection, warnings = self._check_content(project, candidate)
        if rejection is not None:
            return rejection
        return self._commit(
            "zone_content_updated",
            lambda p: p.set_zone_content(zone_index, content_type, settings),
            f"Zone {zone_index} set to {candidate.content_type.value}",
            warnings,
        )

    def update_sub_zone_content(
        self,
        zone_index: int,
        sub_zone: SubZoneName | str,
        content_type: ContentType | str,
        settings: Mapping[str, Any] | None = None,
    ) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        rejection = self._check_zone(project, zone_index)
        if rejection is not None:
            return rejection
        zone = project.zones[zone_index]
        if not isinstance(zone.settings, SeparationSettings):
            return OperationResult.fail(
                ReasonCode.INVALID_SUB_ZONE,
                f"Zone {zone_index} has no horizontal separation",
            )
        try:
            name = SubZoneName(sub_zone)
        except ValueError:
            return OperationResult.fail(
                ReasonCode.INVALID_SUB_ZONE, f"Unknown sub-zone '{sub_zone}'"
            )
        if name not in zone.settings.active_sub_zones():
            return OperationResult.fail(
                ReasonCode.INVALID_SUB_ZONE,
                f"Sub-zone '{name.value}' requires a second horizontal separation",
            )
        try:
            candidate = zone.with_sub_zone(
                name, content_type, settings, project.thickness.horizontal_dividers
            )
        except (SettingsError, ValueError) as exc:
            return OperationResult.fail(ReasonCode.INVALID_SETTINGS, str(exc))

        rejection, warnings = self._check_content(project, candidate)
        if rejection is not None:
            return rejection
        return self._commit(
            "sub_zone_content_updated",
            lambda p: p.set_sub_zone_content(zone_index, name, content_type, settings),
            f"Zone {zone_index} {name.value} sub-zone set to {ContentType(content_type).value}",
            warnings,
        )

    def update_zone(self, zone_index: int, **changes: Any) -> OperationResult:
        """Change a zone's material, name, visibility, lock flag or tags."""
        project = self._project
        if project is None:
            return self._no_project()
        if not 0 <= zone_index < len(project.zones):
            return OperationResult.fail(ReasonCode.INVALID_ZONE, f"Zone {zone_index} does not exist")
        unlocking_only = set(changes) == {"locked"}
        if not unlocking_only and self.is_locked(LockAspect.ZONE, zone_index):
            return OperationResult.fail(ReasonCode.ZONE_LOCKED, f"Zone {zone_index} is locked")
        if "material_id" in changes:
            if self.is_locked(LockAspect.MATERIALS):
                return OperationResult.fail(ReasonCode.MATERIALS_LOCKED, "Materials are locked")
            material_id = changes["material_id"]
            if material_id is not None and self.catalog.get(material_id) is None:
                return OperationResult.fail(
                    ReasonCode.INVALID_MATERIAL, f"Unknown material '{material_id}'"
                )
        return self._commit(
            "zone_updated",
            lambda p: p.update_zone(zone_index, **changes),
            f"Zone {zone_index} updated",
        )

    # -- materials ---------------------------------------------------------

    def update_component_material(self, component_id: str, material_id: str) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.MATERIALS):
            return OperationResult.fail(ReasonCode.MATERIALS_LOCKED, "Materials are locked")
        component = project.find_component(component_id)
        if component is None:
            return OperationResult.fail(
                ReasonCode.INVALID_COMPONENT, f"Component '{component_id}' does not exist"
            )
        material = self.catalog.get(material_id)
        if material is None:
            return OperationResult.fail(
                ReasonCode.INVALID_MATERIAL, f"Unknown material '{material_id}'"
            )
        issues = material.usage_issues(component.thickness, component.structural)
        if issues and self.settings.enforce_constraints:
            return OperationResult.fail(ReasonCode.UNSUITABLE_MATERIAL, "; ".join(issues))
        return self._commit(
            "component_material_updated",
            lambda p: p.set_component_material(component_id, material_id),
            f"{component.name} set to {material.name}",
            issues,
        )

    def update_project_material(self, material_id: str) -> OperationResult:
        """Set the project material and apply it to every structural component."""
        project = self._project
        if project is None:
            return self._no_project()
        if self.is_locked(LockAspect.MATERIALS):
            return OperationResult.fail(ReasonCode.MATERIALS_LOCKED, "Materials are locked")
        material = self.catalog.get(material_id)
        if material is None:
            return OperationResult.fail(
                ReasonCode.INVALID_MATERIAL, f"Unknown material '{material_id}'"
            )
        issues = material.usage_issues(structural=True)
        if issues and self.settings.enforce_constraints:
            return OperationResult.fail(ReasonCode.UNSUITABLE_MATERIAL, "; ".join(issues))
        return self._commit(
            "project_material_updated",
            lambda p: p.set_project_material(material_id),
            f"Project material set to {material.name}",
            issues,
        )

    def rename_project(self, name: str) -> OperationResult:
        if self._project is None:
            return self._no_project()
        if not name.strip():
            return OperationResult.fail(ReasonCode.INVALID_NAME, "Project name must not be empty")
        return self._commit("project_renamed", lambda p: p.rename(name), f"Renamed to '{name}'")

    # -- history -----------------------------------------------------------

    def undo(self) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if not project.undo():
            return OperationResult.fail(ReasonCode.NOTHING_TO_UNDO, "Nothing to undo")
        self._recompute()
        return OperationResult.ok("Undone", warnings=self._notify("undo"))

    def redo(self) -> OperationResult:
        project = self._project
        if project is None:
            return self._no_project()
        if not project.redo():
            return OperationResult.fail(ReasonCode.NOTHING_TO_REDO, "Nothing to redo")
        self._recompute()
        return OperationResult.ok("Redone", warnings=self._notify("redo"))

    # -- internals ---------------------------------------------------------

    def _no_project(self) -> OperationResult:
        return OperationResult.fail(ReasonCode.NO_PROJECT, "No project is loaded")

    def _check_divider_position(
        self, project: FurnitureProject, position: float, ignore: int | None = None
    ) -> OperationResult | None:
        width = project.dimensions.width
        thickness = project.thickness.vertical_dividers
        if not 0 < position < width - thickness:
            return OperationResult.fail(
                ReasonCode.INVALID_POSITION,
                f"Divider position {position:g}mm must be between 0 and "
                f"{width - thickness:g}mm",
            )
        if self.settings.enforce_constraints:
            minimum = self.settings.min_divider_distance
            for divider in project.dividers:
                if divider.index == ignore:
                    continue
                if abs(divider.position - position) < minimum:
                    return OperationResult.fail(
                        ReasonCode.DIVIDER_TOO_CLOSE,
                        f"Divider at {position:g}mm is within {minimum:g}mm of the "
                        f"divider at {divider.position:g}mm",
                    )
        return None

    def _check_zone(self, project: FurnitureProject, zone_index: int) -> OperationResult | None:
        if not 0 <= zone_index < len(project.zones):
            return OperationResult.fail(ReasonCode.INVALID_ZONE, f"Zone {zone_index} does not exist")
        if self.is_locked(LockAspect.ZONE, zone_index):
            return OperationResult.fail(ReasonCode.ZONE_LOCKED, f"Zone {zone_index} is locked")
        return None

    def _check_content(
        self, project: FurnitureProject, candidate: Zone
    ) -> tuple[OperationResult | None, list[str]]:
        result = self.content.validate(
            candidate, project.thickness, project.dimensions, project.has_back
        )
        if result.errors and self.settings.enforce_constraints:
            return OperationResult.fail(ReasonCode.INVALID_SETTINGS, "; ".join(result.errors)), []
        return None, list(result.errors) + list(result.warnings)

    def _commit(
        self,
        action: str,
        mutate: Callable[[FurnitureProject], Any],
        message: str,
        warnings: list[str] | tuple[str, ...] = (),
    ) -> OperationResult:
        project = self._project
        assert project is not None
        try:
            data = mutate(project)
        except (ValueError, IndexError, KeyError) as exc:
            return OperationResult.fail(ReasonCode.INVALID_SETTINGS, str(exc))
        except GenerationError as exc:
            logger.exception(f"Regeneration failed during '{action}'")
            return OperationResult.fail(ReasonCode.GENERATION_ERROR, str(exc))

        self._recompute()
        all_warnings = list(warnings) + list(project.generation_warnings)
        all_warnings += self._notify(action)
        logger.debug(f"Committed '{action}': {len(project.components)} components")
        return OperationResult.ok(message, data, all_warnings)

    def _recompute(self) -> None:
        project = self._project
        if project is None:
            self._derived = DerivedValues()
            return
        estimate = self.estimator.estimate(project.components)
        self._derived = DerivedValues(
            total_cost=estimate.total_cost,
            total_weight=estimate.total_weight,
            complexity=self.estimator.complexity(project.components, project.zones),
            validation=self.validator.validate(
                project.dimensions,
                project.thickness,
                project.zones,
                project.components,
                project.has_back,
            ),
            estimate=estimate,
        )

    def _notify(self, action: str) -> list[str]:
        project = self._project
        if project is None or not self._listeners:
            return []
        event = ProjectChanged(
            action=action,
            view=project.view(),
            derived=self._derived,
            resolve_material=self.catalog.resolve,
        )
        failures = []
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as exc:
                logger.exception(f"Listener failed after '{action}'")
                failures.append(f"Listener failed after '{action}': {exc}")
        return failures
