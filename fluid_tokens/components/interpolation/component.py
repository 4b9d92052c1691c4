"""
Interpolation component - linear viewport interpolation.

Solves f(width) = slope * width + intercept through the two points
(viewport.min, range.min) and (viewport.max, range.max), and evaluates it
clamped to the step's [min, max] envelope for live previews.

Pure functions only; no I/O.
"""

from __future__ import annotations

import math

from fluid_tokens.domain.entities import (
    LinearCoefficients,
    RootFontSize,
    StepRange,
    ViewportRange,
)
from fluid_tokens.domain.errors import DegenerateViewport, InvalidConfig
from fluid_tokens.domain.numbers import round_float

from .models import (
    EvaluateInput,
    EvaluateOutput,
    SolveInput,
    SolveOutput,
)

# Absolute values are reported with two decimals
PIXEL_DIGITS = 2


# --- Validation ---


def validate_viewport(viewport: ViewportRange) -> None:
    """
    Reject viewport ranges without a positive width.

    Raises:
        DegenerateViewport: min == max, min > max or a non-finite bound.
    """
    if not (math.isfinite(viewport.min) and math.isfinite(viewport.max)):
        raise DegenerateViewport(viewport.min, viewport.max)
    if viewport.max <= viewport.min:
        raise DegenerateViewport(viewport.min, viewport.max)


def _validate_range(step: StepRange) -> None:
    if not (math.isfinite(step.min) and math.isfinite(step.max)):
        raise InvalidConfig(
            f"Step '{step.name}' has a non-finite range: {step.min!r}..{step.max!r}",
            field=step.name,
        )


# --- Solver ---


def solve(step: StepRange, viewport: ViewportRange) -> LinearCoefficients:
    """
    Derive slope and intercept for one step.

    A step whose max is below its min gets a negative slope; that is accepted
    and simply describes a value that shrinks as the viewport grows.

    Raises:
        DegenerateViewport: viewport without a positive finite width.
        InvalidConfig: non-finite range, or a slope or intercept outside the
            float range.
    """
    validate_viewport(viewport)
    _validate_range(step)

    slope = (step.max - step.min) / (viewport.max - viewport.min)
    intercept = step.min - slope * viewport.min

    # Narrow viewports can push the line out of the float range
    if not (
        math.isfinite(slope) and math.isfinite(slope * 100) and math.isfinite(intercept)
    ):
        raise InvalidConfig(
            f"Step '{step.name}' cannot be interpolated over viewport "
            f"{viewport.min!r}..{viewport.max!r}: slope or intercept is out of the float range",
            field="viewport",
        )
    return LinearCoefficients(slope=slope, intercept=intercept)


def solve_all(
    ranges: tuple[StepRange, ...],
    viewport: ViewportRange,
) -> dict[str, LinearCoefficients]:
    """Solve every step; keys follow step order."""
    validate_viewport(viewport)
    return {step.name: solve(step, viewport) for step in ranges}


def evaluate_clamped(
    step: StepRange,
    coeffs: LinearCoefficients,
    viewport: ViewportRange,
    width: float,
) -> float:
    """
    Value of the fluid expression at `width`, bounded to the step envelope.

    The bounds are min(range.min, range.max) and max(range.min, range.max),
    so widths outside the viewport range never escape the declared values
    whichever way the slope points.
    """
    validate_viewport(viewport)
    if not math.isfinite(width):
        raise InvalidConfig(f"Preview width must be finite, got {width!r}", field="width")

    raw = coeffs.slope * width + coeffs.intercept
    low = min(step.min, step.max)
    high = max(step.min, step.max)
    return max(low, min(high, raw))


def actual_size_px(
    step: StepRange,
    coeffs: LinearCoefficients,
    viewport: ViewportRange,
    width: float,
    root_font_size: RootFontSize | int = RootFontSize.DEFAULT,
) -> float:
    """Clamped value at `width` converted to pixels, rounded to 2 decimals."""
    value = evaluate_clamped(step, coeffs, viewport, width)
    return round_float(value * int(root_font_size), PIXEL_DIGITS)


# --- Component Entry Points ---


def run_solve(inp: SolveInput) -> SolveOutput:
    """Solve coefficients for every step range in the input."""
    return SolveOutput(coefficients=solve_all(inp.ranges, inp.viewport))


def run_evaluate(inp: EvaluateInput) -> EvaluateOutput:
    """Evaluate one step at a preview width, in rem and in px."""
    coeffs = solve(inp.step, inp.viewport)
    value = evaluate_clamped(inp.step, coeffs, inp.viewport, inp.width)
    return EvaluateOutput(
        name=inp.step.name,
        value=value,
        pixels=round_float(value * int(inp.root_font_size), PIXEL_DIGITS),
    )


def run(inp: SolveInput | EvaluateInput) -> SolveOutput | EvaluateOutput:
    """
    Main entry point for the interpolation component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SolveInput):
        return run_solve(inp)
    elif isinstance(inp, EvaluateInput):
        return run_evaluate(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
