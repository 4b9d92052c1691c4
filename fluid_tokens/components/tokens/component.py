"""
Tokens component - typography, spacing and gap scales from one configuration.

Composes the scale, interpolation and emitter components:

    TokenConfig -> ScaleConfig per family -> StepRange -> LinearCoefficients
                -> stylesheet per family -> merged live stylesheet

Typography scales with separate mobile and desktop ratios; spacing and gap
use one ratio for both ends.
"""

from __future__ import annotations

from fluid_tokens.components.emitter import (
    format_clamp_expression,
    format_stylesheet,
    merge_stylesheets,
)
from fluid_tokens.components.interpolation import (
    PIXEL_DIGITS,
    actual_size_px,
    solve_all,
    validate_viewport,
)
from fluid_tokens.components.scale import generate
from fluid_tokens.domain.entities import (
    LinearCoefficients,
    ScaleConfig,
    ScaleFamily,
    ScaleStep,
    StepRange,
    TokenConfig,
)
from fluid_tokens.domain.errors import InvalidConfig
from fluid_tokens.domain.numbers import format_fixed
from fluid_tokens.rules.models import REQUIRED_FAMILIES, Rules

from .models import (
    GenerateTokensInput,
    GenerateTokensOutput,
    PreviewItem,
    PreviewTokensInput,
    PreviewTokensOutput,
    ScaleResult,
    TokenValue,
)

# Scale field -> configuration key, per family
FIELD_NAMES: dict[ScaleFamily, dict[str, str]] = {
    "typography": {
        "base_min": "typeBaseMin",
        "base_max": "typeBaseMax",
        "ratio_min": "typeRatioMobile",
        "ratio_max": "typeRatioDesktop",
    },
    "spacing": {
        "base_min": "spaceBaseMin",
        "base_max": "spaceBaseMax",
        "ratio_min": "spaceRatio",
        "ratio_max": "spaceRatio",
    },
    "gap": {
        "base_min": "gapBaseMin",
        "base_max": "gapBaseMax",
        "ratio_min": "gapRatio",
        "ratio_max": "gapRatio",
    },
}


# --- Configuration mapping ---


def families_from_rules(rules: Rules) -> dict[ScaleFamily, tuple[ScaleStep, ...]]:
    """Step tables for every family, in the canonical family order."""
    return {family: rules.families[family].to_steps() for family in REQUIRED_FAMILIES}


def scale_config_for(
    family: ScaleFamily,
    config: TokenConfig,
    steps: tuple[ScaleStep, ...],
) -> ScaleConfig:
    """Build the scale generator input for one family."""
    if family == "typography":
        return ScaleConfig(
            base_min=config.type_base_min,
            base_max=config.type_base_max,
            ratio_min=config.type_ratio_mobile,
            ratio_max=config.type_ratio_desktop,
            steps=steps,
        )
    elif family == "spacing":
        return ScaleConfig(
            base_min=config.space_base_min,
            base_max=config.space_base_max,
            ratio_min=config.space_ratio,
            ratio_max=config.space_ratio,
            steps=steps,
        )
    elif family == "gap":
        return ScaleConfig(
            base_min=config.gap_base_min,
            base_max=config.gap_base_max,
            ratio_min=config.gap_ratio,
            ratio_max=config.gap_ratio,
            steps=steps,
        )
    else:
        raise ValueError(f"Unknown scale family: {family}")


def resolve_preview_width(
    rules: Rules,
    viewport: str | None = None,
    width: float | None = None,
) -> float:
    """
    Preview width from an explicit width, a named viewport or the default.

    Raises:
        InvalidConfig: unknown viewport name or non-positive width.
    """
    if width is not None:
        if width <= 0:
            raise InvalidConfig(f"Preview width must be positive, got {width!r}", field="width")
        return float(width)

    name = viewport or rules.preview.default_viewport
    if name not in rules.preview.viewports:
        known = ", ".join(rules.preview.viewports)
        raise InvalidConfig(f"Unknown preview viewport '{name}' (known: {known})", field="viewport")
    return rules.preview.viewports[name]


def _generate_family(
    family: ScaleFamily,
    config: TokenConfig,
    steps: tuple[ScaleStep, ...],
) -> tuple[tuple[StepRange, ...], dict[str, LinearCoefficients]]:
    try:
        ranges = generate(scale_config_for(family, config, steps))
    except InvalidConfig as e:
        field = FIELD_NAMES[family].get(e.field or "", e.field)
        raise InvalidConfig(f"{family}: {e.message}", field=field) from e
    return ranges, solve_all(ranges, config.viewport)


# --- Component Entry Points ---


def run_generate(inp: GenerateTokensInput) -> GenerateTokensOutput:
    """
    Generate stylesheet text and values for every family.

    The viewport is checked once up front so a degenerate range fails before
    any scale is built.

    Raises:
        DegenerateViewport: viewportMin == viewportMax.
        InvalidConfig: non-positive base or ratio in any family.
    """
    validate_viewport(inp.config.viewport)

    scales: dict[ScaleFamily, ScaleResult] = {}
    for family, steps in inp.families.items():
        ranges, coefficients = _generate_family(family, inp.config, steps)
        css = format_stylesheet(ranges, coefficients, inp.unit, inp.config.root_font_size)
        tokens = tuple(
            TokenValue(
                name=r.name,
                min=r.min,
                max=r.max,
                slope=coefficients[r.name].slope,
                intercept=coefficients[r.name].intercept,
                expression=format_clamp_expression(r, coefficients[r.name], inp.unit),
            )
            for r in ranges
        )
        scales[family] = ScaleResult(family=family, css=css, tokens=tokens)

    merged = merge_stylesheets([s.css for s in scales.values()]) if scales else ""
    return GenerateTokensOutput(scales=scales, merged_css=merged)


def run_preview(inp: PreviewTokensInput) -> PreviewTokensOutput:
    """Actual pixel size of every token at the preview width."""
    validate_viewport(inp.config.viewport)

    items: dict[ScaleFamily, tuple[PreviewItem, ...]] = {}
    for family, steps in inp.families.items():
        ranges, coefficients = _generate_family(family, inp.config, steps)
        family_items = []
        for r in ranges:
            pixels = actual_size_px(
                r,
                coefficients[r.name],
                inp.config.viewport,
                inp.width,
                inp.config.root_font_size,
            )
            family_items.append(
                PreviewItem(
                    name=r.name,
                    pixels=pixels,
                    pixels_text=format_fixed(pixels, PIXEL_DIGITS),
                    min_text=format_fixed(r.min),
                    max_text=format_fixed(r.max),
                )
            )
        items[family] = tuple(family_items)

    return PreviewTokensOutput(width=inp.width, items=items)


def run(
    inp: GenerateTokensInput | PreviewTokensInput,
) -> GenerateTokensOutput | PreviewTokensOutput:
    """
    Main entry point for the tokens component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GenerateTokensInput):
        return run_generate(inp)
    elif isinstance(inp, PreviewTokensInput):
        return run_preview(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
