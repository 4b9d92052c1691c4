"""
In-memory key-value store.

Implements KeyValueStorePort for tests and single-process use.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InMemoryKeyValueStore:
    """Dict-backed implementation of KeyValueStorePort."""

    data: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    def clear(self, prefix: str = "") -> int:
        doomed = [k for k in self.data if k.startswith(prefix)]
        for key in doomed:
            del self.data[key]
        return len(doomed)
