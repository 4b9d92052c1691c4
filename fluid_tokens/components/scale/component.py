"""
Scale component - geometric scale generation.

For each step with exponent e:
    min = base_min * ratio_min ** e
    max = base_max * ratio_max ** e

Negative exponents divide by the positive power so that a step at -2 is
exactly base / ratio ** 2 however the caller frames it.

Pure functions only; no I/O.
"""

from __future__ import annotations

import math
import re

from fluid_tokens.domain.entities import ScaleConfig, ScaleStep, StepRange
from fluid_tokens.domain.errors import InvalidConfig

from .models import GenerateScaleInput, GenerateScaleOutput

# Custom property names: --<name>
STEP_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


# --- Validation ---


def _require_positive(value: float, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfig(f"'{field}' must be a number, got {value!r}", field=field)
    if not math.isfinite(value):
        raise InvalidConfig(f"'{field}' must be finite, got {value!r}", field=field)
    if value <= 0:
        raise InvalidConfig(f"'{field}' must be greater than 0, got {value!r}", field=field)


def _validate_steps(steps: tuple[ScaleStep, ...]) -> None:
    seen: set[str] = set()
    for step in steps:
        if not isinstance(step.name, str) or not STEP_NAME_PATTERN.match(step.name):
            raise InvalidConfig(f"Invalid step name: {step.name!r}", field="steps")
        if step.name in seen:
            raise InvalidConfig(f"Duplicate step name: {step.name!r}", field="steps")
        seen.add(step.name)
        if isinstance(step.exponent, bool) or not isinstance(step.exponent, int):
            raise InvalidConfig(
                f"Exponent for step '{step.name}' must be an integer, got {step.exponent!r}",
                field="steps",
            )


def validate_config(config: ScaleConfig) -> None:
    """Reject configurations that geometric scaling cannot handle."""
    _require_positive(config.base_min, "base_min")
    _require_positive(config.base_max, "base_max")
    _require_positive(config.ratio_min, "ratio_min")
    _require_positive(config.ratio_max, "ratio_max")
    _validate_steps(config.steps)


# --- Scaling ---


def scale_value(base: float, ratio: float, exponent: int) -> float:
    """Return base * ratio ** exponent."""
    try:
        if exponent < 0:
            value = base / math.pow(ratio, -exponent)
        else:
            value = base * math.pow(ratio, exponent)
    except OverflowError as e:
        raise InvalidConfig(
            f"{base!r} * {ratio!r} ** {exponent} is out of the float range"
        ) from e

    if not math.isfinite(value) or value == 0.0:
        raise InvalidConfig(f"{base!r} * {ratio!r} ** {exponent} is out of the float range")
    return value


def generate(config: ScaleConfig) -> tuple[StepRange, ...]:
    """
    Generate the min/max value of every step, in step order.

    No ordering between min and max is enforced: base_min > base_max yields
    min > max for every step.

    Raises:
        InvalidConfig: non-positive or non-finite base or ratio, bad steps.
    """
    validate_config(config)
    return tuple(
        StepRange(
            name=step.name,
            min=scale_value(config.base_min, config.ratio_min, step.exponent),
            max=scale_value(config.base_max, config.ratio_max, step.exponent),
        )
        for step in config.steps
    )


# --- Component Entry Point ---


def run(inp: GenerateScaleInput) -> GenerateScaleOutput:
    """
    Main entry point for the scale component.

    Args:
        inp: Scale configuration wrapper.

    Returns:
        GenerateScaleOutput with one range per step.
    """
    return GenerateScaleOutput(ranges=generate(inp.config))
