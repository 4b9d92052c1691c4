"""
Tokens component - typography, spacing and gap scales from one configuration.
"""

from .component import (
    FIELD_NAMES,
    families_from_rules,
    resolve_preview_width,
    run,
    run_generate,
    run_preview,
    scale_config_for,
)
from .models import (
    GenerateTokensInput,
    GenerateTokensOutput,
    PreviewItem,
    PreviewTokensInput,
    PreviewTokensOutput,
    ScaleResult,
    TokenValue,
)

__all__ = [
    # Entry points
    "run",
    "run_generate",
    "run_preview",
    # Input models
    "GenerateTokensInput",
    "PreviewTokensInput",
    # Output models
    "GenerateTokensOutput",
    "PreviewItem",
    "PreviewTokensOutput",
    "ScaleResult",
    "TokenValue",
    # Functions
    "families_from_rules",
    "resolve_preview_width",
    "scale_config_for",
    # Constants
    "FIELD_NAMES",
]
