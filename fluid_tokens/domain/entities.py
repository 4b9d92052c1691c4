"""
Fluid scale data model.

Plain records passed between the scale generator, the interpolation solver
and the emitter. All of them are transient: they are rebuilt from the current
configuration on every generation request.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---

ScaleFamily = Literal["typography", "spacing", "gap"]
PreviewViewport = Literal["mobile", "tablet", "desktop"]


class RootFontSize(IntEnum):
    """Pixels per rem for the two supported root font-size presets."""

    DEFAULT = 16  # html { font-size: 100% }
    SIXTY_TWO_FIVE = 10  # html { font-size: 62.5% }

    @property
    def percentage(self) -> str:
        return "100%" if self is RootFontSize.DEFAULT else "62.5%"


# --- Scale records ---


@dataclass(frozen=True)
class ScaleStep:
    """A named position in a geometric progression (exponent 0 is the base)."""

    name: str
    exponent: int


@dataclass(frozen=True)
class ScaleConfig:
    """Input to the scale generator."""

    base_min: float
    base_max: float
    ratio_min: float
    ratio_max: float
    steps: tuple[ScaleStep, ...]


@dataclass(frozen=True)
class StepRange:
    """Minimum and maximum value of one step, in relative units."""

    name: str
    min: float
    max: float


@dataclass(frozen=True)
class ViewportRange:
    """Viewport widths the fluid value interpolates between."""

    min: float
    max: float


@dataclass(frozen=True)
class LinearCoefficients:
    """f(width) = slope * width + intercept."""

    slope: float
    intercept: float


# --- Persisted configuration ---


class TokenConfig(BaseModel):
    """
    Dashboard configuration for the three token families.

    Serialized with camelCase keys so stored configurations keep the shape
    the dashboard has always written.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    viewport_min: float = 320
    viewport_max: float = 1440

    type_base_min: float = 1.4
    type_base_max: float = 1.6
    type_ratio_mobile: float = 1.125
    type_ratio_desktop: float = 1.2

    space_base_min: float = 0.5
    space_base_max: float = 1.0
    space_ratio: float = 1.333

    gap_base_min: float = 0.75
    gap_base_max: float = 1.5
    gap_ratio: float = 1.333

    root_font_size: RootFontSize = RootFontSize.DEFAULT

    @property
    def viewport(self) -> ViewportRange:
        return ViewportRange(min=self.viewport_min, max=self.viewport_max)
