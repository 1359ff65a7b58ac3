"""Tagged results for document reads and writes."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful read or write carrying its value."""

    value: T


@dataclass(frozen=True)
class Empty:
    """The key is absent. Not an error."""


@dataclass(frozen=True)
class Failed:
    """Storage or deserialization failed."""

    reason: str


StoreResult = Ok[T] | Empty | Failed


def unwrap_or(result: "StoreResult[T]", default: T) -> T:
    """Return the carried value for ``Ok`` results, ``default`` otherwise."""
    if isinstance(result, Ok):
        return result.value
    return default
