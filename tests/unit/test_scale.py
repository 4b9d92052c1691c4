"""
Scale generator tests.

- Step values follow base * ratio ** exponent
- Exponent 0 reproduces the base exactly
- Non-positive bases and ratios are rejected before any arithmetic
"""

from __future__ import annotations

import math

import pytest

from fluid_tokens.components.scale import (
    GenerateScaleInput,
    generate,
    run,
    scale_value,
)
from fluid_tokens.domain.entities import ScaleConfig, ScaleStep
from fluid_tokens.domain.errors import InvalidConfig

STEPS = (
    ScaleStep("xs", -2),
    ScaleStep("s", -1),
    ScaleStep("m", 0),
    ScaleStep("l", 1),
    ScaleStep("xl", 8),
)


def make_config(**overrides: object) -> ScaleConfig:
    values: dict[str, object] = {
        "base_min": 1.4,
        "base_max": 1.6,
        "ratio_min": 1.125,
        "ratio_max": 1.2,
        "steps": STEPS,
    }
    values.update(overrides)
    return ScaleConfig(**values)  # type: ignore[arg-type]


class TestGeometricScaling:
    """Step values follow the power law."""

    def test_exponent_zero_is_exact_base(self) -> None:
        """Exponent 0 returns the base unchanged."""
        ranges = {r.name: r for r in generate(make_config())}
        assert ranges["m"].min == 1.4
        assert ranges["m"].max == 1.6

    def test_positive_exponent(self) -> None:
        """Positive exponents multiply by the ratio power."""
        ranges = {r.name: r for r in generate(make_config())}
        assert ranges["l"].min == pytest.approx(1.4 * 1.125)
        assert ranges["xl"].max == pytest.approx(1.6 * 1.2**8)

    def test_negative_exponent_divides_by_power(self) -> None:
        """Exponent -2 equals base / ratio ** 2 exactly."""
        ranges = {r.name: r for r in generate(make_config())}
        assert ranges["xs"].min == 1.4 / 1.125**2
        assert ranges["xs"].max == 1.6 / 1.2**2
        assert ranges["s"].min == 1.4 / 1.125

    def test_negative_exponent_known_value(self) -> None:
        """base=1.4, ratio=1.125, exponent -2 gives 1.106..."""
        value = scale_value(1.4, 1.125, -2)
        assert round(value, 3) == 1.106

    @pytest.mark.parametrize("exponent", [-5, -1, 0, 1, 3, 10])
    def test_matches_power_law(self, exponent: int) -> None:
        assert scale_value(2.0, 1.333, exponent) == pytest.approx(2.0 * 1.333**exponent)

    def test_preserves_step_order(self) -> None:
        names = [r.name for r in generate(make_config())]
        assert names == ["xs", "s", "m", "l", "xl"]

    def test_inverted_bases_are_not_reordered(self) -> None:
        """base_min > base_max yields min > max; ordering is the caller's call."""
        ranges = generate(make_config(base_min=2.0, base_max=1.0, ratio_max=1.125))
        assert all(r.min > r.max for r in ranges)

    def test_empty_steps(self) -> None:
        assert generate(make_config(steps=())) == ()

    def test_is_deterministic(self) -> None:
        assert generate(make_config()) == generate(make_config())


class TestValidation:
    """InvalidConfig is raised for configurations that cannot be scaled."""

    @pytest.mark.parametrize("field", ["base_min", "base_max", "ratio_min", "ratio_max"])
    @pytest.mark.parametrize("value", [0, -1.0, math.nan, math.inf])
    def test_rejects_non_positive_or_non_finite(self, field: str, value: float) -> None:
        with pytest.raises(InvalidConfig) as exc_info:
            generate(make_config(**{field: value}))
        assert exc_info.value.field == field
        assert exc_info.value.code == "invalid_config"

    def test_rejects_non_integer_exponent(self) -> None:
        with pytest.raises(InvalidConfig, match="integer"):
            generate(make_config(steps=(ScaleStep("half", 1.5),)))  # type: ignore[arg-type]

    def test_rejects_bool_exponent(self) -> None:
        with pytest.raises(InvalidConfig):
            generate(make_config(steps=(ScaleStep("flag", True),)))

    def test_rejects_duplicate_names(self) -> None:
        with pytest.raises(InvalidConfig, match="Duplicate"):
            generate(make_config(steps=(ScaleStep("a", 0), ScaleStep("a", 1))))

    @pytest.mark.parametrize("name", ["", "has space", "1st", "semi;colon"])
    def test_rejects_malformed_names(self, name: str) -> None:
        with pytest.raises(InvalidConfig, match="Invalid step name"):
            generate(make_config(steps=(ScaleStep(name, 0),)))

    def test_rejects_overflow(self) -> None:
        """Results beyond the float range fail instead of becoming inf."""
        with pytest.raises(InvalidConfig, match="float range"):
            generate(make_config(ratio_max=1e10, steps=(ScaleStep("huge", 400),)))

    def test_rejects_underflow_to_zero(self) -> None:
        with pytest.raises(InvalidConfig, match="float range"):
            generate(make_config(ratio_min=1e10, steps=(ScaleStep("tiny", -400),)))


class TestRunEntryPoint:
    def test_run_returns_ranges_and_mapping(self) -> None:
        output = run(GenerateScaleInput(config=make_config()))
        mapping = output.as_mapping()
        assert list(mapping) == ["xs", "s", "m", "l", "xl"]
        assert mapping["m"] == (1.4, 1.6)
