"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from nutrition_store.config import Settings
from nutrition_store.containers import AppContainer, build_container
from nutrition_store.domain.exceptions import StorageAccessError
from nutrition_store.domain.keys import StorageKeys
from nutrition_store.services.documents import DocumentStore
from nutrition_store.services.key_value import InMemoryKeyValueStorage


class FlakyStorage(InMemoryKeyValueStorage):
    """In-memory storage that fails for selected keys and operations."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_reads: set[str] = set()
        self.fail_writes: set[str] = set()
        self.fail_removes: set[str] = set()

    def get_item(self, key: str) -> str | None:
        if key in self.fail_reads:
            raise StorageAccessError(f"read denied: {key}")
        return super().get_item(key)

    def set_item(self, key: str, value: str) -> None:
        if key in self.fail_writes:
            raise StorageAccessError(f"write denied: {key}")
        super().set_item(key, value)

    def remove_item(self, key: str) -> None:
        if key in self.fail_removes:
            raise StorageAccessError(f"remove denied: {key}")
        super().remove_item(key)


@dataclass
class SteppingClock:
    """Clock that advances one minute per call."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        value = self.current
        self.current = value + timedelta(minutes=1)
        return value


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_path=None, key_namespace="nutritionTracker_")


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def keys() -> StorageKeys:
    return StorageKeys()


@pytest.fixture
def documents(storage: FlakyStorage) -> DocumentStore:
    return DocumentStore(storage)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def container(settings: Settings, storage: FlakyStorage) -> AppContainer:
    return build_container(settings, storage=storage)
