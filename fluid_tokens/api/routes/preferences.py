"""
Preference routes: last-used configuration and dark mode.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fluid_tokens.api.deps import get_rules, get_store
from fluid_tokens.api.routes.tokens import config_error, storage_error
from fluid_tokens.api.schemas import ConfigResponse, DarkModeBody, ResetResponse
from fluid_tokens.components.preferences import (
    GetDarkModeInput,
    LoadConfigInput,
    ResetConfigInput,
    SaveConfigInput,
    SetDarkModeInput,
    run_get_dark_mode,
    run_load_config,
    run_reset_config,
    run_save_config,
    run_set_dark_mode,
)
from fluid_tokens.components.tokens import GenerateTokensInput, families_from_rules, run_generate
from fluid_tokens.domain.entities import TokenConfig
from fluid_tokens.domain.errors import FluidScaleError
from fluid_tokens.ports.storage import KeyValueStorePort, StorageError
from fluid_tokens.rules.models import Rules

router = APIRouter()


@router.get("/config", response_model=ConfigResponse)
def get_config(
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> ConfigResponse:
    """Last-used configuration, or null when none is stored."""
    result = run_load_config(LoadConfigInput(), store=store, keys=rules.storage)
    return ConfigResponse(config=result.config)


@router.put("/config", response_model=ConfigResponse)
def put_config(
    config: TokenConfig,
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> ConfigResponse:
    """Store a configuration after checking that it generates."""
    try:
        run_generate(
            GenerateTokensInput(
                config=config,
                families=families_from_rules(rules),
                unit=rules.output.unit,
            )
        )
    except FluidScaleError as e:
        raise config_error(e) from e

    try:
        result = run_save_config(SaveConfigInput(config=config), store=store, keys=rules.storage)
    except StorageError as e:
        raise storage_error(e) from e
    return ConfigResponse(config=result.config)


@router.delete("/config", response_model=ResetResponse)
def reset_config(
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> ResetResponse:
    """Clear the stored configuration and return the defaults."""
    try:
        result = run_reset_config(
            ResetConfigInput(),
            store=store,
            defaults=rules.defaults,
            keys=rules.storage,
        )
    except StorageError as e:
        raise storage_error(e) from e
    return ResetResponse(config=result.config, cleared=result.cleared)


@router.get("/preferences/dark-mode", response_model=DarkModeBody)
def get_dark_mode(
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> DarkModeBody:
    result = run_get_dark_mode(GetDarkModeInput(), store=store, keys=rules.storage)
    return DarkModeBody(enabled=result.enabled)


@router.put("/preferences/dark-mode", response_model=DarkModeBody)
def put_dark_mode(
    body: DarkModeBody,
    rules: Rules = Depends(get_rules),
    store: KeyValueStorePort = Depends(get_store),
) -> DarkModeBody:
    try:
        result = run_set_dark_mode(
            SetDarkModeInput(enabled=body.enabled), store=store, keys=rules.storage
        )
    except StorageError as e:
        raise storage_error(e) from e
    return DarkModeBody(enabled=result.enabled)
