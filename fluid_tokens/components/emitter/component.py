"""
Emitter component - CSS text for fluid scales.

Each step renders as

    --<name>: clamp(<min><unit>, <vw>vw <sign> <offset><unit>, <max><unit>);

with every number fixed to 3 decimals. The intercept is always printed as a
magnitude behind an explicit `+` or `-` token.

Pure functions only; no I/O.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from fluid_tokens.domain.entities import LinearCoefficients, RootFontSize, StepRange
from fluid_tokens.domain.errors import InvalidConfig, StylesheetFormatError
from fluid_tokens.domain.numbers import format_fixed, round_decimal

from .models import (
    FormatStylesheetInput,
    FormatStylesheetOutput,
    MergeStylesheetsInput,
    MergeStylesheetsOutput,
)

DEFAULT_UNIT = "rem"
VALUE_DIGITS = 3
INDENT = "    "

ROOT_OPEN = ":root {\n"
ROOT_CLOSE = "}"


# --- Expressions ---


def format_preferred_value(coeffs: LinearCoefficients, unit: str = DEFAULT_UNIT) -> str:
    """Middle clamp() term, e.g. `0.018vw + 1.343rem`."""
    vw = format_fixed(coeffs.slope * 100, VALUE_DIGITS)
    offset = round_decimal(coeffs.intercept, VALUE_DIGITS)
    sign = "-" if offset.is_signed() else "+"
    return f"{vw}vw {sign} {offset.copy_abs():f}{unit}"


def format_clamp_expression(
    step: StepRange,
    coeffs: LinearCoefficients,
    unit: str = DEFAULT_UNIT,
) -> str:
    """`clamp(<min>, <vw-expr>, <max>)` for one step."""
    minimum = format_fixed(step.min, VALUE_DIGITS)
    maximum = format_fixed(step.max, VALUE_DIGITS)
    return f"clamp({minimum}{unit}, {format_preferred_value(coeffs, unit)}, {maximum}{unit})"


def format_declaration(
    step: StepRange,
    coeffs: LinearCoefficients,
    unit: str = DEFAULT_UNIT,
) -> str:
    return f"{INDENT}--{step.name}: {format_clamp_expression(step, coeffs, unit)};"


# --- Stylesheets ---


def format_root_preamble(root_font_size: RootFontSize | int) -> str:
    """Comment (and for 62.5% the html rule) describing the root unit."""
    preset = RootFontSize(root_font_size)
    comment = f"/* Root font-size: {preset.percentage} ({preset.value}px) */\n"
    if preset is RootFontSize.SIXTY_TWO_FIVE:
        return comment + f"html {{ font-size: {preset.percentage}; }}\n\n"
    return comment + "\n"


def format_stylesheet(
    ranges: Sequence[StepRange],
    coefficients: Mapping[str, LinearCoefficients],
    unit: str = DEFAULT_UNIT,
    root_font_size: RootFontSize | int | None = RootFontSize.DEFAULT,
) -> str:
    """
    One `:root` ruleset with a declaration per step, in step order.

    Args:
        ranges: Step ranges from the scale generator.
        coefficients: Solver output keyed by step name.
        unit: Relative unit appended to every length.
        root_font_size: Preset described in the leading comment, or None to
            emit the ruleset alone.
    """
    lines = []
    for step in ranges:
        coeffs = coefficients.get(step.name)
        if coeffs is None:
            raise InvalidConfig(f"No coefficients for step '{step.name}'", field=step.name)
        lines.append(format_declaration(step, coeffs, unit) + "\n")

    css = ROOT_OPEN + "".join(lines) + ROOT_CLOSE
    if root_font_size is None:
        return css
    return format_root_preamble(root_font_size) + css


def split_stylesheet(css: str) -> tuple[str, str]:
    """
    Split generated CSS into (preamble, declaration body).

    Raises:
        StylesheetFormatError: when the text has no `:root { ... }` block.
    """
    start = css.find(ROOT_OPEN)
    stripped = css.rstrip()
    if start < 0 or not stripped.endswith(ROOT_CLOSE):
        raise StylesheetFormatError("Stylesheet has no ':root { ... }' block")
    body_start = start + len(ROOT_OPEN)
    body_end = len(stripped) - len(ROOT_CLOSE)
    if body_end < body_start:
        raise StylesheetFormatError("Stylesheet ':root' block is not closed")
    return css[:start], css[body_start:body_end]


def merge_stylesheets(stylesheets: Sequence[str]) -> str:
    """
    Merge generated stylesheets into one `:root` block.

    The first stylesheet keeps its preamble; the others contribute only
    their declarations. Text is moved as-is, nothing is re-parsed.
    """
    if not stylesheets:
        raise StylesheetFormatError("No stylesheets to merge")

    preamble, _ = split_stylesheet(stylesheets[0])
    bodies = [split_stylesheet(css)[1] for css in stylesheets]
    return preamble + ROOT_OPEN + "".join(bodies) + ROOT_CLOSE


# --- Component Entry Points ---


def run_format(inp: FormatStylesheetInput) -> FormatStylesheetOutput:
    css = format_stylesheet(inp.ranges, inp.coefficients, inp.unit, inp.root_font_size)
    return FormatStylesheetOutput(css=css)


def run_merge(inp: MergeStylesheetsInput) -> MergeStylesheetsOutput:
    return MergeStylesheetsOutput(css=merge_stylesheets(inp.stylesheets))


def run(
    inp: FormatStylesheetInput | MergeStylesheetsInput,
) -> FormatStylesheetOutput | MergeStylesheetsOutput:
    """
    Main entry point for the emitter component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FormatStylesheetInput):
        return run_format(inp)
    elif isinstance(inp, MergeStylesheetsInput):
        return run_merge(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
