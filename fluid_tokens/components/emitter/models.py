"""
Emitter component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluid_tokens.domain.entities import LinearCoefficients, RootFontSize, StepRange


@dataclass(frozen=True)
class FormatStylesheetInput:
    """Input for rendering one scale as a stylesheet."""

    ranges: tuple[StepRange, ...]
    coefficients: dict[str, LinearCoefficients]
    unit: str = "rem"
    root_font_size: RootFontSize | None = RootFontSize.DEFAULT


@dataclass(frozen=True)
class FormatStylesheetOutput:
    """Rendered stylesheet."""

    css: str


@dataclass(frozen=True)
class MergeStylesheetsInput:
    """Input for merging generated stylesheets into one block."""

    stylesheets: tuple[str, ...]


@dataclass(frozen=True)
class MergeStylesheetsOutput:
    """Merged stylesheet."""

    css: str
