"""Configurator policy settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wardrobes.domain.value_objects import DimensionBounds, Dimensions


class DimensionsConfig(BaseModel):
    """Width, height and depth in millimeters."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(gt=0, le=20000, description="Width in millimeters")
    height: float = Field(gt=0, le=10000, description="Height in millimeters")
    depth: float = Field(gt=0, le=5000, description="Depth in millimeters")

    def to_domain(self) -> Dimensions:
        return Dimensions(self.width, self.height, self.depth)


class ConfiguratorSettings(BaseModel):
    """Policy applied by the configurator to every mutation.

    Attributes:
        enforce_constraints: Reject out-of-bounds mutations instead of only
            flagging them in the validation status.
        max_history: Undo snapshots kept by the configurator.
        min_divider_distance: Minimum gap between divider positions when
            constraints are enforced.
        round_dimensions: Round new dimensions to ``round_step``.
        round_step: Rounding step in millimeters.
        min_dimensions: Smallest accepted overall dimensions.
        max_dimensions: Largest accepted overall dimensions.
    """

    model_config = ConfigDict(extra="forbid")

    enforce_constraints: bool = True
    max_history: int = Field(default=20, ge=1, le=500)
    min_divider_distance: float = Field(default=150.0, ge=0)
    round_dimensions: bool = False
    round_step: float = Field(default=10.0, gt=0)
    min_dimensions: DimensionsConfig = Field(
        default_factory=lambda: DimensionsConfig(width=300, height=300, depth=200)
    )
    max_dimensions: DimensionsConfig = Field(
        default_factory=lambda: DimensionsConfig(width=6000, height=3000, depth=1000)
    )

    @model_validator(mode="after")
    def check_bounds_order(self) -> ConfiguratorSettings:
        low, high = self.min_dimensions, self.max_dimensions
        if low.width > high.width or low.height > high.height or low.depth > high.depth:
            raise ValueError("min_dimensions must not exceed max_dimensions")
        return self

    @property
    def bounds(self) -> DimensionBounds:
        return DimensionBounds(
            minimum=self.min_dimensions.to_domain(),
            maximum=self.max_dimensions.to_domain(),
        )
