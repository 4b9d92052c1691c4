"""
Tokens component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fluid_tokens.domain.entities import ScaleFamily, ScaleStep, TokenConfig


@dataclass(frozen=True)
class GenerateTokensInput:
    """Input for generating every token family from one configuration."""

    config: TokenConfig
    families: dict[ScaleFamily, tuple[ScaleStep, ...]]
    unit: str = "rem"


@dataclass(frozen=True)
class TokenValue:
    """One generated token."""

    name: str
    min: float
    max: float
    slope: float
    intercept: float
    expression: str


@dataclass(frozen=True)
class ScaleResult:
    """Stylesheet and values of one token family."""

    family: ScaleFamily
    css: str
    tokens: tuple[TokenValue, ...]

    def values(self) -> dict[str, tuple[float, float]]:
        """Token name -> (min, max), in step order."""
        return {t.name: (t.min, t.max) for t in self.tokens}


@dataclass(frozen=True)
class GenerateTokensOutput:
    """Output from generating all token families."""

    scales: dict[ScaleFamily, ScaleResult]
    merged_css: str


@dataclass(frozen=True)
class PreviewTokensInput:
    """Input for computing actual sizes at a preview width."""

    config: TokenConfig
    families: dict[ScaleFamily, tuple[ScaleStep, ...]]
    width: float


@dataclass(frozen=True)
class PreviewItem:
    """Actual size of one token at the preview width."""

    name: str
    pixels: float
    pixels_text: str
    min_text: str
    max_text: str


@dataclass(frozen=True)
class PreviewTokensOutput:
    """Preview items per family."""

    width: float
    items: dict[ScaleFamily, tuple[PreviewItem, ...]] = field(default_factory=dict)
