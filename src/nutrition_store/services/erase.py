"""Removal of all stored data."""

import logging
from dataclasses import dataclass, field

from nutrition_store.domain.keys import StorageKeys
from nutrition_store.domain.results import Failed
from nutrition_store.services.documents import DocumentStore
from nutrition_store.services.users import UserDirectory

_logger = logging.getLogger(__name__)


@dataclass
class DataEraser:
    """Best-effort removal of every known user's documents.

    Custom food lists are kept unless ``include_custom_foods`` is set, so a
    full erase leaves ``userFoods_<id>`` keys behind by default.
    """

    documents: DocumentStore
    users: UserDirectory
    keys: StorageKeys = field(default_factory=StorageKeys)
    include_custom_foods: bool = False

    def clear_all_data(self, include_custom_foods: bool | None = None) -> int:
        """Remove records, profiles, the index and the session pointer.

        Each key is removed independently; a failed removal is logged and the
        erase continues. Returns the number of keys that could not be removed.
        """
        erase_foods = (
            self.include_custom_foods
            if include_custom_foods is None
            else include_custom_foods
        )
        keys: list[str] = []
        for entry in self.users.list_all_users():
            keys.append(self.keys.records_key(entry.id))
            keys.append(self.keys.user_key(entry.id))
            if erase_foods:
                keys.append(self.keys.user_foods_key(entry.id))
        keys.append(self.keys.users_index)
        keys.append(self.keys.current_user)

        failures = sum(
            1 for key in keys if isinstance(self.documents.remove(key), Failed)
        )
        if failures:
            _logger.error("Erase left %s of %s keys in place", failures, len(keys))
        else:
            _logger.info("Erased %s keys", len(keys))
        return failures
