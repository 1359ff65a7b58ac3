"""JSON document layer over key-value storage."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from nutrition_store.domain.exceptions import StorageError
from nutrition_store.domain.results import Empty, Failed, Ok, StoreResult
from nutrition_store.services.key_value import KeyValueStorage

T = TypeVar("T")

_logger = logging.getLogger(__name__)

_PARSE_ERRORS = (
    json.JSONDecodeError,
    KeyError,
    TypeError,
    ValueError,
    RecursionError,
)


@dataclass
class DocumentStore:
    """Reads and writes JSON documents, turning every failure into ``Failed``.

    Failures are logged where they are caught. Nothing here raises for
    storage or deserialization problems.
    """

    storage: KeyValueStorage

    def read(self, key: str, parse: Callable[[object], T]) -> StoreResult[T]:
        """Read and parse the document stored under ``key``."""
        try:
            raw = self.storage.get_item(key)
        except StorageError as exc:
            _logger.exception("Error reading %s", key)
            return Failed(reason=f"storage: {exc}")
        if raw is None:
            return Empty()
        try:
            return Ok(parse(json.loads(raw)))
        except _PARSE_ERRORS as exc:
            _logger.error("Malformed document at %s: %s", key, exc)
            return Failed(reason=f"malformed: {exc}")

    def read_list(
        self, key: str, parse_item: Callable[[object], T]
    ) -> StoreResult[list[T]]:
        """Read a JSON array, parsing every element. Any bad element fails all."""

        def parse(doc: object) -> list[T]:
            if not isinstance(doc, list):
                raise TypeError(f"expected a list, got {type(doc).__name__}")
            return [parse_item(item) for item in doc]

        return self.read(key, parse)

    def write(self, key: str, document: object) -> StoreResult[None]:
        """Serialize ``document`` and store it under ``key``."""
        try:
            raw = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            _logger.error("Cannot serialize document for %s: %s", key, exc)
            return Failed(reason=f"serialize: {exc}")
        try:
            self.storage.set_item(key, raw)
        except StorageError as exc:
            _logger.exception("Error writing %s", key)
            return Failed(reason=f"storage: {exc}")
        return Ok(None)

    def remove(self, key: str) -> StoreResult[None]:
        """Remove ``key``. Missing keys are not an error."""
        try:
            self.storage.remove_item(key)
        except StorageError as exc:
            _logger.exception("Error removing %s", key)
            return Failed(reason=f"storage: {exc}")
        return Ok(None)
