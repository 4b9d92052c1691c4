import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from fluid_tokens.adapters.json_store import (
    DATA_DIR_ENV_VAR,
    DEFAULT_DATA_DIR,
    STORE_FILENAME,
    JsonFileKeyValueStore,
)
from fluid_tokens.ports.storage import KeyValueStorePort
from fluid_tokens.rules.loader import load_rules, resolve_rules_path
from fluid_tokens.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.data_dir = Path(os.environ.get(DATA_DIR_ENV_VAR, DEFAULT_DATA_DIR))
        self.store_path = self.data_dir / STORE_FILENAME
        self.rules_path = resolve_rules_path()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


# --- Store ---
def get_store(settings: Settings = Depends(get_settings)) -> KeyValueStorePort:
    return JsonFileKeyValueStore(settings.store_path)
