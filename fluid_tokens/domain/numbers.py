"""
Decimal rounding helpers shared by the emitter and the preview values.

Rounding is half away from zero on the float's shortest decimal repr, so
1.0005 rounds to 1.001 rather than to the binary neighbour below it.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Enough significant digits for any finite double at 3+ decimals
_PRECISION = 400


def round_decimal(value: float, digits: int) -> Decimal:
    """Round a finite float to `digits` decimals, half away from zero."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        # Drop the sign of negative zero
        return rounded.copy_abs()
    return rounded


def format_fixed(value: float, digits: int = 3) -> str:
    """Fixed-point text with exactly `digits` decimals and no exponent."""
    return f"{round_decimal(value, digits):f}"


def round_float(value: float, digits: int) -> float:
    return float(round_decimal(value, digits))
