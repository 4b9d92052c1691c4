from pydantic import BaseModel

from fluid_tokens.components.tokens import GenerateTokensOutput, PreviewTokensOutput
from fluid_tokens.domain.entities import TokenConfig
from fluid_tokens.domain.errors import FluidScaleError


class ErrorDetail(BaseModel):
    code: str
    message: str
    field: str | None = None

    @classmethod
    def from_error(cls, error: FluidScaleError) -> "ErrorDetail":
        return cls(code=error.code, message=error.message, field=error.field)


class TokenValueResponse(BaseModel):
    name: str
    min: float
    max: float
    slope: float
    intercept: float
    expression: str


class ScaleResponse(BaseModel):
    family: str
    css: str
    tokens: list[TokenValueResponse]


class GenerateResponse(BaseModel):
    scales: dict[str, ScaleResponse]
    merged_css: str

    @classmethod
    def from_output(cls, output: GenerateTokensOutput) -> "GenerateResponse":
        return cls(
            scales={
                family: ScaleResponse(
                    family=scale.family,
                    css=scale.css,
                    tokens=[
                        TokenValueResponse(
                            name=t.name,
                            min=t.min,
                            max=t.max,
                            slope=t.slope,
                            intercept=t.intercept,
                            expression=t.expression,
                        )
                        for t in scale.tokens
                    ],
                )
                for family, scale in output.scales.items()
            },
            merged_css=output.merged_css,
        )


class PreviewItemResponse(BaseModel):
    name: str
    pixels: float
    pixels_text: str
    min_text: str
    max_text: str


class PreviewResponse(BaseModel):
    width: float
    items: dict[str, list[PreviewItemResponse]]

    @classmethod
    def from_output(cls, output: PreviewTokensOutput) -> "PreviewResponse":
        return cls(
            width=output.width,
            items={
                family: [
                    PreviewItemResponse(
                        name=i.name,
                        pixels=i.pixels,
                        pixels_text=i.pixels_text,
                        min_text=i.min_text,
                        max_text=i.max_text,
                    )
                    for i in family_items
                ]
                for family, family_items in output.items.items()
            },
        )


class ConfigResponse(BaseModel):
    config: TokenConfig | None


class ResetResponse(BaseModel):
    config: TokenConfig
    cleared: int


class DarkModeBody(BaseModel):
    enabled: bool
