"""
JSON File Key-Value Store.

Implements KeyValueStorePort on a single JSON object file, the server-side
stand-in for the browser's localStorage.

Invariants:
- The file always holds a JSON object of string keys to string values
- Writes replace the file atomically (temp file + os.replace)
- Every store instance on the same file shares one lock
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from fluid_tokens.ports.storage import StorageError, StoreCorruptedError

logger = logging.getLogger(__name__)

DATA_DIR_ENV_VAR = "FLUID_TOKENS_DATA_DIR"
DEFAULT_DATA_DIR = "./data"
STORE_FILENAME = "preferences.json"

# One lock per resolved file path, shared by every store instance
_PATH_LOCKS: dict[Path, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(path.resolve(), threading.Lock())


class JsonFileKeyValueStore:
    """
    JSON file implementation of KeyValueStorePort.

    Every operation reads the file fresh, so several processes sharing the
    file see each other's writes. Within one process, read-modify-write
    cycles are serialized per file, even across separate instances (the API
    builds one per request).
    """

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize the store.

        Args:
            path: JSON file holding the key-value pairs
            create_dirs: Whether to create the parent directory if missing
        """
        self.path = Path(path)
        self._lock = _lock_for(self.path)

        if create_dirs:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreCorruptedError(str(self.path), str(e)) from e
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise StoreCorruptedError(str(self.path), "expected an object of strings")
        return data

    def _write(self, data: dict[str, str]) -> None:
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)
        logger.debug("Stored key %s in %s", key, self.path)

    def delete(self, key: str) -> bool:
        with self._lock:
            data = self._read()
            if key not in data:
                return False
            del data[key]
            self._write(data)
        logger.info("Deleted key %s from %s", key, self.path)
        return True

    def clear(self, prefix: str = "") -> int:
        with self._lock:
            data = self._read()
            doomed = [k for k in data if k.startswith(prefix)]
            if not doomed:
                return 0
            for key in doomed:
                del data[key]
            self._write(data)
        logger.info("Cleared %d key(s) with prefix %r from %s", len(doomed), prefix, self.path)
        return len(doomed)


def create_json_store(
    data_dir: str | Path | None = None,
    *,
    env_var: str = DATA_DIR_ENV_VAR,
    default_dir: str = DEFAULT_DATA_DIR,
) -> JsonFileKeyValueStore:
    """
    Factory function to create JsonFileKeyValueStore from config.

    Args:
        data_dir: Explicit data directory (overrides env var)
        env_var: Environment variable name for the data directory
        default_dir: Default directory if not configured

    Returns:
        Configured JsonFileKeyValueStore instance
    """
    if data_dir is None:
        data_dir = os.environ.get(env_var, default_dir)

    return JsonFileKeyValueStore(Path(data_dir) / STORE_FILENAME)
