"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_store.domain.exceptions import StorageQuotaExceededError


class KeyValueStorage(Protocol):
    """Synchronous string-keyed, string-valued persistent storage."""

    def get_item(self, key: str) -> str | None:
        """Return the value stored under a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing a missing key does nothing."""

    def keys(self) -> list[str]:
        """Return all stored keys."""


@dataclass
class InMemoryKeyValueStorage(KeyValueStorage):
    """In-memory storage with an optional quota on stored characters."""

    _items: dict[str, str]
    quota_bytes: int | None

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            previous = self._items.get(key)
            used = self._used_bytes()
            if previous is not None:
                used -= _size(key, previous)
            if used + _size(key, value) > self.quota_bytes:
                raise StorageQuotaExceededError(
                    f"Writing {key!r} exceeds quota of {self.quota_bytes} bytes"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def _used_bytes(self) -> int:
        return sum(_size(key, value) for key, value in self._items.items())


def _size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))
