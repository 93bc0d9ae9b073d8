"""The furniture project aggregate root."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, ClassVar

from .components import Component
from .entities import Divider, ProjectMetadata, Zone
from .history import DEFAULT_HISTORY_LIMIT, SnapshotHistory
from .services.partitioner import ZonePartitioner
from .services.regeneration import ComponentBuilder
from .value_objects import ContentType, Dimensions, SubZoneName, ThicknessProfile

logger = logging.getLogger(__name__)

POSITION_TOLERANCE = 0.01


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ProjectSnapshot:
    """Immutable copy of a project's state.

    Every field is itself immutable (or treated as such), so snapshots
    share records with the live project instead of copying them.
    """

    name: str
    dimensions: Dimensions
    thickness: ThicknessProfile
    has_back: bool
    material_id: str | None
    dividers: tuple[Divider, ...]
    zones: tuple[Zone, ...]
    components: tuple[Component, ...]
    material_overrides: tuple[tuple[str, str], ...]
    metadata: ProjectMetadata
    generation_warnings: tuple[str, ...]
    updated_at: datetime


@dataclass(frozen=True)
class ProjectView:
    """Read-only view of the state renderers draw from."""

    dimensions: Dimensions
    thickness: ThicknessProfile
    dividers: tuple[Divider, ...]
    zones: tuple[Zone, ...]
    components: tuple[Component, ...]
    has_back: bool


@dataclass
class FurnitureProject:
    """A wardrobe project: its parameters and the components derived from them.

    ``components`` is a pure function of the dimensions, thickness profile,
    dividers, zones and back flag, and is replaced wholesale after every
    change. Every mutating method either completes (zones recomputed,
    components regenerated, an undo snapshot recorded) or raises and leaves
    the project exactly as it was.

    Attributes:
        name: Display name.
        dimensions: Overall cabinet dimensions.
        thickness: Panel thickness per role.
        has_back: Whether the cabinet has a back panel.
        material_id: Default material for every part.
        dividers: Vertical dividers sorted by position.
        zones: Zones derived from the dividers, with their content.
        components: Generated parts.
        material_overrides: Per-component material, keyed by component id.
        metadata: Descriptive information.
        id: Unique project identifier.
        created_at: Creation time (UTC).
        updated_at: Time of the last change (UTC).
        generation_warnings: Advisories from the last regeneration.
        history_limit: Number of undo snapshots kept.
    """

    partitioner: ClassVar[ZonePartitioner] = ZonePartitioner()
    builder: ClassVar[ComponentBuilder] = ComponentBuilder()

    name: str = "New wardrobe"
    dimensions: Dimensions = field(default_factory=Dimensions)
    thickness: ThicknessProfile = field(default_factory=ThicknessProfile)
    has_back: bool = True
    material_id: str | None = None
    dividers: tuple[Divider, ...] = ()
    zones: tuple[Zone, ...] = ()
    components: tuple[Component, ...] = ()
    material_overrides: dict[str, str] = field(default_factory=dict)
    metadata: ProjectMetadata = field(default_factory=ProjectMetadata)
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)
    generation_warnings: tuple[str, ...] = field(default=(), compare=False)
    history_limit: int = field(default=DEFAULT_HISTORY_LIMIT, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.dividers = tuple(self.dividers)
        self.zones = tuple(self.zones)
        self.components = tuple(self.components)
        self._history: SnapshotHistory[ProjectSnapshot] = SnapshotHistory(self.history_limit)

    @classmethod
    def create(
        cls,
        name: str = "New wardrobe",
        dimensions: Dimensions | None = None,
        thickness: ThicknessProfile | None = None,
        has_back: bool = True,
        material_id: str | None = None,
        default_structure: bool = True,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> FurnitureProject:
        """Create a regenerated project.

        Args:
            name: Display name.
            dimensions: Overall size, defaults to 2000 x 2400 x 600mm.
            thickness: Thickness profile, defaults to the standard profile.
            has_back: Whether to add a back panel.
            material_id: Default material.
            default_structure: Add a divider at mid-width with shelves on the
                left and a hanging rail on the right.
            history_limit: Number of undo snapshots kept.
        """
        project = cls(
            name=name,
            dimensions=dimensions or Dimensions(),
            thickness=thickness or ThicknessProfile(),
            has_back=has_back,
            material_id=material_id,
            history_limit=history_limit,
        )
        if default_structure:
            divider_thickness = project.thickness.vertical_dividers
            middle = (project.dimensions.width - divider_thickness) / 2
            project.dividers = project._indexed([middle])
        project._recalculate_zones()
        if default_structure and len(project.zones) == 2:
            left, right = project.zones
            project.zones = (
                left.with_content(ContentType.SHELVES),
                right.with_content(ContentType.WARDROBE),
            )
        project.regenerate()
        return project

    # -- state capture -----------------------------------------------------

    def snapshot(self) -> ProjectSnapshot:
        return ProjectSnapshot(
            name=self.name,
            dimensions=self.dimensions,
            thickness=self.thickness,
            has_back=self.has_back,
            material_id=self.material_id,
            dividers=self.dividers,
            zones=self.zones,
            components=self.components,
            material_overrides=tuple(sorted(self.material_overrides.items())),
            metadata=self.metadata,
            generation_warnings=self.generation_warnings,
            updated_at=self.updated_at,
        )

    def restore(self, snapshot: ProjectSnapshot) -> None:
        """Put the project back into the state captured by ``snapshot``."""
        self.name = snapshot.name
        self.dimensions = snapshot.dimensions
        self.thickness = snapshot.thickness
        self.has_back = snapshot.has_back
        self.material_id = snapshot.material_id
        self.dividers = snapshot.dividers
        self.zones = snapshot.zones
        self.components = snapshot.components
        self.material_overrides = dict(snapshot.material_overrides)
        self.metadata = snapshot.metadata
        self.generation_warnings = snapshot.generation_warnings
        self.updated_at = snapshot.updated_at

    def view(self) -> ProjectView:
        return ProjectView(
            dimensions=self.dimensions,
            thickness=self.thickness,
            dividers=self.dividers,
            zones=self.zones,
            components=self.components,
            has_back=self.has_back,
        )

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def undo(self) -> bool:
        """Revert the last change. Returns False when there is nothing to undo."""
        previous = self._history.undo(self.snapshot())
        if previous is None:
            return False
        self.restore(previous)
        return True

    def redo(self) -> bool:
        """Reapply the last undone change. Returns False when there is none."""
        following = self._history.redo(self.snapshot())
        if following is None:
            return False
        self.restore(following)
        return True

    def reset_history(self, limit: int | None = None) -> None:
        """Discard undo and redo state, optionally changing the limit."""
        if limit is not None:
            self.history_limit = limit
        self._history = SnapshotHistory(self.history_limit)

    def clone(self, name: str | None = None) -> FurnitureProject:
        """Independent copy with a new id and fresh history."""
        now = _now()
        copy = replace(
            self,
            name=name if name is not None else self.name,
            material_overrides=dict(self.material_overrides),
            id=_new_id(),
            created_at=now,
            updated_at=now,
        )
        return copy

    # -- lookups -----------------------------------------------------------

    def zone(self, index: int) -> Zone:
        """Zone at ``index``.

        Raises:
            IndexError: If there is no such zone.
        """
        if not 0 <= index < len(self.zones):
            raise IndexError(f"Zone {index} does not exist")
        return self.zones[index]

    def divider(self, index: int) -> Divider:
        if not 0 <= index < len(self.dividers):
            raise IndexError(f"Divider {index} does not exist")
        return self.dividers[index]

    def find_component(self, component_id: str) -> Component | None:
        return next((c for c in self.components if c.id == component_id), None)

    def components_for_zone(self, index: int) -> list[Component]:
        return [c for c in self.components if c.zone_index == index]

    @property
    def structural_components(self) -> list[Component]:
        return [c for c in self.components if c.structural]

    # -- mutations ---------------------------------------------------------

    def set_dimensions(self, dimensions: Dimensions) -> None:
        def apply() -> None:
            self.dimensions = dimensions
            kept = [d for d in self.dividers if d.end < dimensions.width]
            if len(kept) != len(self.dividers):
                logger.warning(
                    f"Dropped {len(self.dividers) - len(kept)} dividers outside "
                    f"the new width of {dimensions.width:g}mm"
                )
            self.dividers = self._indexed([d.position for d in kept])
            self._recalculate_zones()

        self._mutate(apply)

    def add_divider(self, position: float) -> Divider:
        """Insert a divider whose left face is ``position`` mm from the left.

        Raises:
            ValueError: If the divider would not lie inside the cabinet.
        """
        self._check_divider_position(position)

        def apply() -> None:
            self.dividers = self._indexed([d.position for d in self.dividers] + [position])
            self._recalculate_zones()

        self._mutate(apply)
        return next(d for d in self.dividers if abs(d.position - position) < POSITION_TOLERANCE)

    def remove_divider(self, index: int) -> None:
        self.divider(index)

        def apply() -> None:
            positions = [d.position for d in self.dividers if d.index != index]
            self.dividers = self._indexed(positions)
            self._recalculate_zones()

        self._mutate(apply)

    def move_divider(self, index: int, position: float) -> Divider:
        self.divider(index)
        self._check_divider_position(position)

        def apply() -> None:
            positions = [
                position if d.index == index else d.position for d in self.dividers
            ]
            self.dividers = self._indexed(positions)
            self._recalculate_zones()

        self._mutate(apply)
        return next(d for d in self.dividers if abs(d.position - position) < POSITION_TOLERANCE)

    def set_zone_content(
        self,
        index: int,
        content_type: ContentType | str,
        settings: Mapping[str, Any] | None = None,
    ) -> Zone:
        """Configure a zone's content, merging ``settings`` onto the current ones.

        Raises:
            IndexError: If the zone does not exist.
            SettingsError: If the settings are invalid.
        """
        updated = self.zone(index).with_content(content_type, settings)
        self._mutate(lambda: self._replace_zone(updated))
        return updated

    def set_sub_zone_content(
        self,
        index: int,
        sub_zone: SubZoneName | str,
        content_type: ContentType | str,
        settings: Mapping[str, Any] | None = None,
    ) -> Zone:
        """Configure one sub-zone of a horizontally separated zone.

        Raises:
            IndexError: If the zone does not exist.
            SettingsError: If the zone is not separated, the sub-zone is not
                active, or the settings are invalid.
        """
        updated = self.zone(index).with_sub_zone(
            sub_zone, content_type, settings, self.thickness.horizontal_dividers
        )
        self._mutate(lambda: self._replace_zone(updated))
        return updated

    def update_zone(self, index: int, **changes: Any) -> Zone:
        """Change zone attributes other than content.

        Accepts ``material_id``, ``custom_name``, ``visible``, ``locked`` and
        ``tags``.

        Raises:
            ValueError: If another attribute is given.
        """
        allowed = {"material_id", "custom_name", "visible", "locked", "tags"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Cannot change zone attribute(s): {', '.join(sorted(unknown))}")
        updated = replace(self.zone(index), **changes)
        self._mutate(lambda: self._replace_zone(updated))
        return updated

    def set_component_material(self, component_id: str, material_id: str) -> None:
        """Override the material of one component.

        Raises:
            KeyError: If no component has ``component_id``.
        """
        if self.find_component(component_id) is None:
            raise KeyError(f"Component '{component_id}' does not exist")

        def apply() -> None:
            self.material_overrides = {**self.material_overrides, component_id: material_id}

        self._mutate(apply)

    def set_project_material(self, material_id: str | None) -> int:
        """Change the default material and reset structural parts to it.

        Returns:
            Number of structural components now using ``material_id``.
        """
        structural_ids = {c.id for c in self.components if c.structural}

        def apply() -> None:
            self.material_id = material_id
            self.material_overrides = {
                k: v for k, v in self.material_overrides.items() if k not in structural_ids
            }

        self._mutate(apply)
        return len(self.structural_components)

    def set_thickness(self, thickness: ThicknessProfile) -> None:
        def apply() -> None:
            self.thickness = thickness
            self.dividers = self._indexed([d.position for d in self.dividers])
            self._recalculate_zones()

        self._mutate(apply)

    def set_has_back(self, has_back: bool) -> None:
        def apply() -> None:
            self.has_back = has_back

        self._mutate(apply)

    def rename(self, name: str) -> None:
        if not name.strip():
            raise ValueError("Project name must not be empty")

        def apply() -> None:
            self.name = name

        self._mutate(apply)

    def set_metadata(self, **changes: Any) -> None:
        updated = replace(self.metadata, **changes)

        def apply() -> None:
            self.metadata = updated

        self._mutate(apply)

    def regenerate(self) -> None:
        """Rebuild ``components`` from the current parameters.

        Raises:
            GenerationError: If a zone's content cannot be generated.
        """
        result = self.builder.build(
            self.dimensions,
            self.thickness,
            self.dividers,
            self.zones,
            self.has_back,
            self.material_id,
            self.material_overrides,
        )
        self.components = result.components
        self.generation_warnings = result.warnings

    # -- internals ---------------------------------------------------------

    def _mutate(self, apply: Callable[[], None]) -> None:
        before = self.snapshot()
        try:
            apply()
            self.regenerate()
        except Exception:
            self.restore(before)
            raise
        self.updated_at = _now()
        self._history.record(before)

    def _check_divider_position(self, position: float) -> None:
        if not 0 < position < self.dimensions.width - self.thickness.vertical_dividers:
            raise ValueError(
                f"Divider position {position:g}mm must lie inside the cabinet "
                f"width of {self.dimensions.width:g}mm"
            )

    def _indexed(self, positions: list[float]) -> tuple[Divider, ...]:
        thickness = self.thickness.vertical_dividers
        return tuple(
            Divider(index=i, position=p, thickness=thickness)
            for i, p in enumerate(sorted(positions))
        )

    def _replace_zone(self, zone: Zone) -> None:
        zones = list(self.zones)
        zones[zone.index] = zone
        self.zones = tuple(zones)

    def _recalculate_zones(self) -> None:
        """Repartition, carrying content over to zones that survive.

        A new zone inherits the configuration of the old zone that started at
        the same position; failing that, when the zone count is unchanged it
        inherits from the old zone with the same index. Any other zone starts
        empty.
        """
        fresh = self.partitioner.partition(
            self.dimensions.width,
            self.dividers,
            self.thickness.vertical_dividers,
            self.dimensions.height,
        )
        previous = self.zones
        same_count = len(previous) == len(fresh)

        zones = []
        for zone in fresh:
            source = next(
                (z for z in previous if abs(z.position - zone.position) < POSITION_TOLERANCE),
                previous[zone.index] if same_count else None,
            )
            if source is not None:
                zone = replace(
                    zone,
                    content_type=source.content_type,
                    settings=source.settings,
                    material_id=source.material_id,
                    custom_name=source.custom_name,
                    visible=source.visible,
                    locked=source.locked,
                    tags=source.tags,
                )
            zones.append(zone)
        self.zones = tuple(zones)
