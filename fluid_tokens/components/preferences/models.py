"""
Preferences component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluid_tokens.domain.entities import TokenConfig


@dataclass(frozen=True)
class LoadConfigInput:
    """Input for loading the last-used configuration."""

    pass


@dataclass(frozen=True)
class LoadConfigOutput:
    """Output from loading the last-used configuration."""

    config: TokenConfig | None


@dataclass(frozen=True)
class SaveConfigInput:
    """Input for saving the last-used configuration."""

    config: TokenConfig


@dataclass(frozen=True)
class SaveConfigOutput:
    """Output from saving the last-used configuration."""

    config: TokenConfig


@dataclass(frozen=True)
class ResetConfigInput:
    """Input for resetting the configuration to defaults."""

    pass


@dataclass(frozen=True)
class ResetConfigOutput:
    """Output from resetting the configuration."""

    config: TokenConfig
    cleared: int


@dataclass(frozen=True)
class GetDarkModeInput:
    """Input for reading the dark mode preference."""

    pass


@dataclass(frozen=True)
class SetDarkModeInput:
    """Input for writing the dark mode preference."""

    enabled: bool


@dataclass(frozen=True)
class DarkModeOutput:
    """Current dark mode preference."""

    enabled: bool
