"""
Scale component - geometric min/max values per scale step.
"""

from .component import generate, run, scale_value, validate_config
from .models import GenerateScaleInput, GenerateScaleOutput

__all__ = [
    # Entry points
    "run",
    "generate",
    # Functions
    "scale_value",
    "validate_config",
    # Models
    "GenerateScaleInput",
    "GenerateScaleOutput",
]
