"""
Interpolation component - slope/intercept solving and clamped evaluation.
"""

from .component import (
    PIXEL_DIGITS,
    actual_size_px,
    evaluate_clamped,
    run,
    run_evaluate,
    run_solve,
    solve,
    solve_all,
    validate_viewport,
)
from .models import EvaluateInput, EvaluateOutput, SolveInput, SolveOutput

__all__ = [
    # Entry points
    "run",
    "run_solve",
    "run_evaluate",
    # Functions
    "solve",
    "solve_all",
    "evaluate_clamped",
    "actual_size_px",
    "validate_viewport",
    # Models
    "SolveInput",
    "SolveOutput",
    "EvaluateInput",
    "EvaluateOutput",
    # Constants
    "PIXEL_DIGITS",
]
