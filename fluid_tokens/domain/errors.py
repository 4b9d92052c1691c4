"""
Fluid scale error types.

Every failure the engine can report is detected before any arithmetic runs,
so callers never receive NaN or Infinity inside formatted output.
"""

from __future__ import annotations


class FluidScaleError(Exception):
    """Base class for fluid scale errors."""

    code = "fluid_scale_error"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class InvalidConfig(FluidScaleError):
    """Raised when a base, ratio or step definition cannot be scaled."""

    code = "invalid_config"


class DegenerateViewport(FluidScaleError):
    """Raised when the viewport range has no width to interpolate over."""

    code = "degenerate_viewport"

    def __init__(self, minimum: float, maximum: float) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Viewport range is degenerate: min={minimum!r}, max={maximum!r}",
            field="viewport",
        )


class StylesheetFormatError(FluidScaleError):
    """Raised when a stylesheet does not follow the generated `:root { ... }` shape."""

    code = "malformed_stylesheet"
