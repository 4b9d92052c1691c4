"""
Preferences component - persisted configuration and dark mode flag.
"""

from .component import (
    dump_config,
    parse_config,
    run,
    run_get_dark_mode,
    run_load_config,
    run_reset_config,
    run_save_config,
    run_set_dark_mode,
)
from .models import (
    DarkModeOutput,
    GetDarkModeInput,
    LoadConfigInput,
    LoadConfigOutput,
    ResetConfigInput,
    ResetConfigOutput,
    SaveConfigInput,
    SaveConfigOutput,
    SetDarkModeInput,
)

__all__ = [
    # Entry points
    "run",
    "run_load_config",
    "run_save_config",
    "run_reset_config",
    "run_get_dark_mode",
    "run_set_dark_mode",
    # Input models
    "LoadConfigInput",
    "SaveConfigInput",
    "ResetConfigInput",
    "GetDarkModeInput",
    "SetDarkModeInput",
    # Output models
    "LoadConfigOutput",
    "SaveConfigOutput",
    "ResetConfigOutput",
    "DarkModeOutput",
    # Functions
    "dump_config",
    "parse_config",
]
