"""
Key-value store port.

String keys to string values, the same contract a browser's localStorage
offers. The pure scale engine never touches it; only the preferences
component does.
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorePort(Protocol):
    """Key-value store interface for persisted preferences."""

    def get(self, key: str) -> str | None:
        """
        Read a value.

        Returns:
            The stored string, or None if the key is absent.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> bool:
        """
        Remove exactly one key.

        Returns:
            True if the key was present.
        """
        ...

    def clear(self, prefix: str = "") -> int:
        """
        Remove every key starting with `prefix` ("" removes everything).

        Returns:
            Number of keys removed.
        """
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class StoreCorruptedError(StorageError):
    """Raised when the backing store cannot be decoded."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"Store at {location} is unreadable: {reason}")
