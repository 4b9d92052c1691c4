"""
Preferences component - last-used configuration and dark mode flag.

Persists through an injected KeyValueStorePort. Values are stored as
strings: the configuration as camelCase JSON, dark mode as "true"/"false".

Key behaviors:
- Load returns None when nothing usable is stored; unreadable or invalid
  stored data is logged and treated as absent
- Save and reset propagate StorageError from the store
- Reset removes exactly the configuration key (other keys, including ones
  sharing its prefix, are kept) and returns the defaults
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from fluid_tokens.domain.entities import TokenConfig
from fluid_tokens.ports.storage import KeyValueStorePort, StorageError
from fluid_tokens.rules.models import StorageRules

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

logger = logging.getLogger(__name__)

DEFAULT_KEYS = StorageRules()


# --- Serialization ---


def dump_config(config: TokenConfig) -> str:
    """Configuration as camelCase JSON."""
    return config.model_dump_json(by_alias=True)


def parse_config(raw: str) -> TokenConfig:
    """
    Parse a stored configuration.

    Raises:
        ValueError: not JSON, or not a valid configuration.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Stored configuration is not JSON: {e}") from e
    try:
        return TokenConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Stored configuration is invalid:\n{e}") from e


# --- Component Entry Points ---


def run_load_config(
    inp: LoadConfigInput,
    *,
    store: KeyValueStorePort,
    keys: StorageRules = DEFAULT_KEYS,
) -> LoadConfigOutput:
    """
    Load the last-used configuration.

    Args:
        inp: Input (empty for load operation).
        store: Key-value store port.
        keys: Storage key names.

    Returns:
        LoadConfigOutput with the stored configuration, or None.
    """
    try:
        raw = store.get(keys.config_key)
    except StorageError as e:
        logger.warning("Could not read stored configuration: %s", e)
        return LoadConfigOutput(config=None)

    if raw is None:
        return LoadConfigOutput(config=None)

    try:
        config = parse_config(raw)
    except ValueError as e:
        logger.warning("Ignoring stored configuration: %s", e)
        return LoadConfigOutput(config=None)
    return LoadConfigOutput(config=config)


def run_save_config(
    inp: SaveConfigInput,
    *,
    store: KeyValueStorePort,
    keys: StorageRules = DEFAULT_KEYS,
) -> SaveConfigOutput:
    """Store the configuration as the last-used one."""
    store.set(keys.config_key, dump_config(inp.config))
    return SaveConfigOutput(config=inp.config)


def run_reset_config(
    inp: ResetConfigInput,
    *,
    store: KeyValueStorePort,
    defaults: TokenConfig | None = None,
    keys: StorageRules = DEFAULT_KEYS,
) -> ResetConfigOutput:
    """
    Clear the stored configuration.

    Args:
        inp: Input (empty for reset operation).
        store: Key-value store port.
        defaults: Configuration to report back; TokenConfig() if omitted.
        keys: Storage key names.

    Returns:
        ResetConfigOutput with the defaults and the number of keys removed.
    """
    cleared = 1 if store.delete(keys.config_key) else 0
    logger.info("Configuration reset to defaults (%d key(s) cleared)", cleared)
    return ResetConfigOutput(config=defaults or TokenConfig(), cleared=cleared)


def run_get_dark_mode(
    inp: GetDarkModeInput,
    *,
    store: KeyValueStorePort,
    keys: StorageRules = DEFAULT_KEYS,
) -> DarkModeOutput:
    """Dark mode preference; False when unset or unreadable."""
    try:
        raw = store.get(keys.dark_mode_key)
    except StorageError as e:
        logger.warning("Could not read dark mode preference: %s", e)
        return DarkModeOutput(enabled=False)
    return DarkModeOutput(enabled=raw == "true")


def run_set_dark_mode(
    inp: SetDarkModeInput,
    *,
    store: KeyValueStorePort,
    keys: StorageRules = DEFAULT_KEYS,
) -> DarkModeOutput:
    store.set(keys.dark_mode_key, "true" if inp.enabled else "false")
    return DarkModeOutput(enabled=inp.enabled)


def run(
    inp: LoadConfigInput
    | SaveConfigInput
    | ResetConfigInput
    | GetDarkModeInput
    | SetDarkModeInput,
    *,
    store: KeyValueStorePort,
    defaults: TokenConfig | None = None,
    keys: StorageRules = DEFAULT_KEYS,
) -> LoadConfigOutput | SaveConfigOutput | ResetConfigOutput | DarkModeOutput:
    """
    Main entry point for the preferences component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, LoadConfigInput):
        return run_load_config(inp, store=store, keys=keys)
    elif isinstance(inp, SaveConfigInput):
        return run_save_config(inp, store=store, keys=keys)
    elif isinstance(inp, ResetConfigInput):
        return run_reset_config(inp, store=store, defaults=defaults, keys=keys)
    elif isinstance(inp, GetDarkModeInput):
        return run_get_dark_mode(inp, store=store, keys=keys)
    elif isinstance(inp, SetDarkModeInput):
        return run_set_dark_mode(inp, store=store, keys=keys)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
