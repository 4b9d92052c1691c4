"""
Interpolation component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluid_tokens.domain.entities import (
    LinearCoefficients,
    RootFontSize,
    StepRange,
    ViewportRange,
)


@dataclass(frozen=True)
class SolveInput:
    """Input for solving coefficients of a whole scale."""

    ranges: tuple[StepRange, ...]
    viewport: ViewportRange


@dataclass(frozen=True)
class SolveOutput:
    """Coefficients keyed by step name, in step order."""

    coefficients: dict[str, LinearCoefficients]


@dataclass(frozen=True)
class EvaluateInput:
    """Input for evaluating one step at a preview width."""

    step: StepRange
    viewport: ViewportRange
    width: float
    root_font_size: RootFontSize = RootFontSize.DEFAULT


@dataclass(frozen=True)
class EvaluateOutput:
    """Value of one step at a preview width."""

    name: str
    value: float
    pixels: float
