"""Material catalog used to price and weigh components."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL_ID = "white_melamine"


class MaterialKind(str, Enum):
    MELAMINE = "melamine"
    WOOD = "wood"
    PLYWOOD = "plywood"
    MDF = "mdf"
    PARTICLE_BOARD = "particle_board"
    GLASS = "glass"
    METAL = "metal"


@dataclass(frozen=True)
class Material:
    """A catalog material.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        price_per_m2: Price per square meter of face area.
        density: Density in kg/m3.
        kind: Material family.
        min_thickness: Thinnest stock available, in millimeters.
        max_thickness: Thickest stock available, in millimeters.
        structural: Whether the material may be used for carcass parts.
        edge_banding_available: Whether matching edge banding exists.
    """

    id: str
    name: str
    price_per_m2: float
    density: float = 650.0
    kind: MaterialKind = MaterialKind.MELAMINE
    min_thickness: float = 8.0
    max_thickness: float = 30.0
    structural: bool = True
    edge_banding_available: bool = True

    def __post_init__(self) -> None:
        if self.price_per_m2 < 0:
            raise ValueError("Material price must be non-negative")
        if self.density <= 0:
            raise ValueError("Material density must be positive")
        if self.min_thickness > self.max_thickness:
            raise ValueError("Material minimum thickness exceeds maximum thickness")

    def usage_issues(self, thickness: float | None = None, structural: bool = False) -> list[str]:
        """Reasons the material is unsuitable for a part, empty when suitable."""
        issues = []
        if structural and not self.structural:
            issues.append(f"{self.name} cannot be used for structural parts")
        if thickness is not None and not self.min_thickness <= thickness <= self.max_thickness:
            issues.append(
                f"{self.name} is available from {self.min_thickness:g}mm to "
                f"{self.max_thickness:g}mm, not {thickness:g}mm"
            )
        return issues


DEFAULT_MATERIALS: tuple[Material, ...] = (
    Material("white_melamine", "White melamine", 25.0, 720.0, MaterialKind.MELAMINE, 8.0, 25.0),
    Material("black_melamine", "Black melamine", 30.0, 720.0, MaterialKind.MELAMINE, 8.0, 25.0),
    Material("gray_melamine", "Gray melamine", 28.0, 720.0, MaterialKind.MELAMINE, 8.0, 25.0),
    Material("beige_melamine", "Beige melamine", 26.0, 720.0, MaterialKind.MELAMINE, 8.0, 25.0),
    Material("oak", "Oak", 45.0, 680.0, MaterialKind.WOOD, 12.0, 30.0),
    Material("walnut", "Walnut", 60.0, 640.0, MaterialKind.WOOD, 12.0, 30.0),
    Material("cherry", "Cherry", 55.0, 590.0, MaterialKind.WOOD, 12.0, 30.0),
    Material("maple", "Maple", 50.0, 620.0, MaterialKind.WOOD, 12.0, 30.0),
    Material("birch_plywood", "Birch plywood", 38.0, 630.0, MaterialKind.PLYWOOD, 4.0, 30.0),
    Material("raw_mdf", "Raw MDF", 18.0, 750.0, MaterialKind.MDF, 3.0, 30.0),
    Material("particle_board", "Particle board", 15.0, 650.0, MaterialKind.PARTICLE_BOARD, 8.0, 30.0),
    Material(
        "clear_glass", "Clear glass", 70.0, 2500.0, MaterialKind.GLASS, 4.0, 12.0,
        structural=False, edge_banding_available=False,
    ),
    Material(
        "stainless_steel", "Stainless steel", 90.0, 7850.0, MaterialKind.METAL, 0.5, 3.0,
        structural=False, edge_banding_available=False,
    ),
    Material(
        "brushed_aluminum", "Brushed aluminum", 75.0, 2700.0, MaterialKind.METAL, 0.5, 5.0,
        structural=False, edge_banding_available=False,
    ),
    Material(
        "chrome_steel", "Chrome steel tube", 40.0, 7850.0, MaterialKind.METAL, 15.0, 40.0,
        structural=False, edge_banding_available=False,
    ),
)


@runtime_checkable
class MaterialCatalog(Protocol):
    """Resolves material ids to materials."""

    def get(self, material_id: str | None) -> Material | None:
        """Return the material, or None when the id is unknown."""
        ...

    def resolve(self, material_id: str | None) -> Material:
        """Return the material, falling back to the default for unknown ids."""
        ...


class InMemoryMaterialCatalog:
    """Material catalog held in memory, seeded with ``DEFAULT_MATERIALS``."""

    def __init__(
        self,
        materials: Iterable[Material] = DEFAULT_MATERIALS,
        default_id: str = DEFAULT_MATERIAL_ID,
    ) -> None:
        self._materials = {material.id: material for material in materials}
        if default_id not in self._materials:
            raise ValueError(f"Default material '{default_id}' is not in the catalog")
        self._default_id = default_id

    @property
    def default(self) -> Material:
        return self._materials[self._default_id]

    def get(self, material_id: str | None) -> Material | None:
        if material_id is None:
            return None
        return self._materials.get(material_id)

    def resolve(self, material_id: str | None) -> Material:
        material = self.get(material_id)
        if material is None:
            if material_id is not None:
                logger.debug(f"Unknown material '{material_id}', using '{self._default_id}'")
            return self.default
        return material

    def add(self, material: Material) -> None:
        self._materials[material.id] = material

    def list(self) -> list[Material]:
        return sorted(self._materials.values(), key=lambda m: m.id)

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._materials
