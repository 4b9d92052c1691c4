"""
Token generation routes.

HTTP surface for the dashboard: defaults, generation and live preview.
Configuration errors map to 422 with a {code, message, field} detail.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fluid_tokens.api.deps import get_rules, get_store
from fluid_tokens.api.schemas import ErrorDetail, GenerateResponse, PreviewResponse
from fluid_tokens.components.preferences import SaveConfigInput, run_save_config
from fluid_tokens.components.tokens import (
    GenerateTokensInput,
    PreviewTokensInput,
    families_from_rules,
    resolve_preview_width,
    run_generate,
    run_preview,
)
from fluid_tokens.domain.entities import TokenConfig
from fluid_tokens.domain.errors import FluidScaleError
from fluid_tokens.ports.storage import KeyValueStorePort, StorageError
from fluid_tokens.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


def config_error(error: FluidScaleError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=ErrorDetail.from_error(error).model_dump(),
    )


def storage_error(error: StorageError) -> HTTPException:
    logger.error("Preference store failure: %s", error)
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail={"code": "storage_unavailable", "message": str(error)},
    )


@router.get("/defaults", response_model=TokenConfig)
def get_defaults(rules: Rules = Depends(get_rules)) -> TokenConfig:
    """Default configuration from the rules file."""
    return rules.defaults


@router.post("/generate", response_model=GenerateResponse)
def generate_tokens(
    config: TokenConfig,
    save: bool = Query(default=True, description="Store as the last-used configuration"),
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> GenerateResponse:
    """
    Generate typography, spacing and gap stylesheets.

    Returns per-family CSS and values plus the merged live stylesheet.
    The configuration is stored only when generation succeeds.
    """
    try:
        output = run_generate(
            GenerateTokensInput(
                config=config,
                families=families_from_rules(rules),
                unit=rules.output.unit,
            )
        )
    except FluidScaleError as e:
        raise config_error(e) from e

    if save:
        try:
            run_save_config(SaveConfigInput(config=config), store=store, keys=rules.storage)
        except StorageError as e:
            raise storage_error(e) from e

    return GenerateResponse.from_output(output)


@router.post("/preview", response_model=PreviewResponse)
def preview_tokens(
    config: TokenConfig,
    viewport: str | None = Query(default=None, description="Named preview viewport"),
    width: float | None = Query(default=None, description="Explicit preview width in px"),
    rules: Rules = Depends(get_rules),
) -> PreviewResponse:
    """Actual pixel size of every token at the preview width."""
    try:
        preview_width = resolve_preview_width(rules, viewport=viewport, width=width)
        output = run_preview(
            PreviewTokensInput(
                config=config,
                families=families_from_rules(rules),
                width=preview_width,
            )
        )
    except FluidScaleError as e:
        raise config_error(e) from e

    return PreviewResponse.from_output(output)
