"""
Emitter component - clamp() declarations and stylesheet text.
"""

from .component import (
    DEFAULT_UNIT,
    VALUE_DIGITS,
    format_clamp_expression,
    format_declaration,
    format_preferred_value,
    format_root_preamble,
    format_stylesheet,
    merge_stylesheets,
    run,
    run_format,
    run_merge,
    split_stylesheet,
)
from .models import (
    FormatStylesheetInput,
    FormatStylesheetOutput,
    MergeStylesheetsInput,
    MergeStylesheetsOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_format",
    "run_merge",
    # Functions
    "format_clamp_expression",
    "format_declaration",
    "format_preferred_value",
    "format_root_preamble",
    "format_stylesheet",
    "merge_stylesheets",
    "split_stylesheet",
    # Models
    "FormatStylesheetInput",
    "FormatStylesheetOutput",
    "MergeStylesheetsInput",
    "MergeStylesheetsOutput",
    # Constants
    "DEFAULT_UNIT",
    "VALUE_DIGITS",
]
