"""File-backed key-value storage."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from nutrition_store.domain.exceptions import StorageAccessError
from nutrition_store.services.key_value import KeyValueStorage

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStorage(KeyValueStorage):
    """Keeps the whole key space in one JSON object on disk.

    The file is read on every access and rewritten on every mutation, so two
    instances pointing at the same path see each other's writes but can
    overwrite each other without notice.
    """

    path: Path

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._dump(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._dump(items)

    def keys(self) -> list[str]:
        return list(self._load())

    def _load(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageAccessError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw) if raw.strip() else {}
        except (json.JSONDecodeError, RecursionError) as exc:
            raise StorageAccessError(f"Storage file {self.path} is corrupt") from exc
        if not isinstance(data, dict):
            raise StorageAccessError(f"Storage file {self.path} is not an object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, items: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageAccessError(f"Cannot write {self.path}: {exc}") from exc
        _logger.debug("Wrote %s keys to %s", len(items), self.path)
