"""Overall dimension value objects in millimeters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MM_PER_INCH = 25.4
INCHES_PER_MM = 0.0393701


class LengthUnit(str, Enum):
    """Units supported for dimension conversion and display."""

    MM = "mm"
    CM = "cm"
    M = "m"
    INCH = "in"


def _round2(value: float) -> float:
    return round(float(value), 2)


@dataclass(frozen=True)
class Dimensions:
    """Immutable width/height/depth in millimeters.

    Values are normalized to two decimal places on construction. Negative
    values are rejected; zero is allowed so that clamped subtraction can
    produce an empty extent.
    """

    width: float = 2000.0
    height: float = 2400.0
    depth: float = 600.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError("Dimensions must be non-negative")
        object.__setattr__(self, "width", _round2(self.width))
        object.__setattr__(self, "height", _round2(self.height))
        object.__setattr__(self, "depth", _round2(self.depth))

    @classmethod
    def from_centimeters(cls, width: float, height: float, depth: float) -> Dimensions:
        """Build dimensions from centimeter values."""
        return cls(width * 10, height * 10, depth * 10)

    @classmethod
    def from_inches(cls, width: float, height: float, depth: float) -> Dimensions:
        """Build dimensions from inch values."""
        return cls(width * MM_PER_INCH, height * MM_PER_INCH, depth * MM_PER_INCH)

    def with_changes(
        self,
        width: float | None = None,
        height: float | None = None,
        depth: float | None = None,
    ) -> Dimensions:
        """Return a copy with the given axes replaced."""
        return Dimensions(
            self.width if width is None else width,
            self.height if height is None else height,
            self.depth if depth is None else depth,
        )

    def scale(self, factor: float) -> Dimensions:
        """Scale every axis by ``factor``."""
        if factor < 0:
            raise ValueError("Scale factor must be non-negative")
        return Dimensions(self.width * factor, self.height * factor, self.depth * factor)

    def __add__(self, other: Dimensions) -> Dimensions:
        return Dimensions(
            self.width + other.width,
            self.height + other.height,
            self.depth + other.depth,
        )

    def __sub__(self, other: Dimensions) -> Dimensions:
        return Dimensions(
            max(0.0, self.width - other.width),
            max(0.0, self.height - other.height),
            max(0.0, self.depth - other.depth),
        )

    @property
    def volume(self) -> float:
        """Volume in cubic meters."""
        return (self.width * self.height * self.depth) / 1_000_000_000

    @property
    def front_area(self) -> float:
        """Width x height in square meters."""
        return (self.width * self.height) / 1_000_000

    @property
    def side_area(self) -> float:
        """Depth x height in square meters."""
        return (self.depth * self.height) / 1_000_000

    @property
    def top_area(self) -> float:
        """Width x depth in square meters."""
        return (self.width * self.depth) / 1_000_000

    def is_close(self, other: Dimensions, tolerance: float = 0.01) -> bool:
        """Check equality within ``tolerance`` millimeters on every axis."""
        return (
            abs(self.width - other.width) <= tolerance
            and abs(self.height - other.height) <= tolerance
            and abs(self.depth - other.depth) <= tolerance
        )

    def fits_within(self, container: Dimensions) -> bool:
        """Check whether these dimensions fit inside ``container``."""
        return (
            self.width <= container.width
            and self.height <= container.height
            and self.depth <= container.depth
        )

    def round_to_step(self, step: float = 10.0) -> Dimensions:
        """Round every axis to the nearest multiple of ``step``."""
        if step <= 0:
            raise ValueError("Rounding step must be positive")
        return Dimensions(
            round(self.width / step) * step,
            round(self.height / step) * step,
            round(self.depth / step) * step,
        )

    def to_unit(self, unit: LengthUnit) -> tuple[float, float, float]:
        """Convert to ``unit``, returning (width, height, depth)."""
        factor = {
            LengthUnit.MM: 1.0,
            LengthUnit.CM: 0.1,
            LengthUnit.M: 0.001,
            LengthUnit.INCH: INCHES_PER_MM,
        }[LengthUnit(unit)]
        return (
            _round2(self.width * factor),
            _round2(self.height * factor),
            _round2(self.depth * factor),
        )

    def to_inches(self) -> tuple[float, float, float]:
        return self.to_unit(LengthUnit.INCH)

    def to_centimeters(self) -> tuple[float, float, float]:
        return self.to_unit(LengthUnit.CM)

    def to_meters(self) -> tuple[float, float, float]:
        return self.to_unit(LengthUnit.M)

    def describe(self, unit: LengthUnit = LengthUnit.MM) -> str:
        """Human-readable ``W x H x D unit`` string."""
        width, height, depth = self.to_unit(unit)
        return f"{width:g} x {height:g} x {depth:g} {LengthUnit(unit).value}"

    def validate(self, bounds: DimensionBounds | None = None) -> list[str]:
        """Check each axis against ``bounds``.

        Args:
            bounds: Limits to check against. Defaults to the general
                furniture limits of ``DimensionBounds()``.

        Returns:
            List of issue strings, empty when every axis is within bounds.
        """
        bounds = bounds or DimensionBounds()
        issues: list[str] = []
        for axis in ("width", "height", "depth"):
            value = getattr(self, axis)
            low = getattr(bounds.minimum, axis)
            high = getattr(bounds.maximum, axis)
            if value < low:
                issues.append(f"{axis.capitalize()} {value:g}mm is below the minimum of {low:g}mm")
            elif value > high:
                issues.append(f"{axis.capitalize()} {value:g}mm exceeds the maximum of {high:g}mm")
        return issues


@dataclass(frozen=True)
class DimensionBounds:
    """Inclusive minimum and maximum dimensions per axis."""

    minimum: Dimensions = Dimensions(100.0, 100.0, 100.0)
    maximum: Dimensions = Dimensions(4000.0, 3000.0, 1000.0)

    def __post_init__(self) -> None:
        if not self.minimum.fits_within(self.maximum):
            raise ValueError("Minimum bounds must not exceed maximum bounds")

    def contains(self, dimensions: Dimensions) -> bool:
        return not dimensions.validate(self)
