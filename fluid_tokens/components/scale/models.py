"""
Scale component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluid_tokens.domain.entities import ScaleConfig, StepRange


@dataclass(frozen=True)
class GenerateScaleInput:
    """Input for generating a scale."""

    config: ScaleConfig


@dataclass(frozen=True)
class GenerateScaleOutput:
    """Output from generating a scale."""

    ranges: tuple[StepRange, ...]

    def as_mapping(self) -> dict[str, tuple[float, float]]:
        """Step name -> (min, max), in step order."""
        return {r.name: (r.min, r.max) for r in self.ranges}
