"""User directory: active session pointer, profiles and the user index."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from nutrition_store.domain.keys import StorageKeys
from nutrition_store.domain.models import User, UserIndexEntry
from nutrition_store.domain.results import Failed, StoreResult, unwrap_or
from nutrition_store.services.documents import DocumentStore

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class UserDirectory:
    """Application service for user identity and the index of known users."""

    documents: DocumentStore
    keys: StorageKeys = field(default_factory=StorageKeys)
    clock: Callable[[], datetime] = _utc_now

    def lookup_by_name(self, name: str) -> User | None:
        """Return the first indexed user whose name matches, ignoring case."""
        entry = self._find_by_name(name)
        if entry is None:
            return None
        return self.get_user(entry.id)

    def name_exists(self, name: str) -> bool:
        """Return whether any indexed user has this name, ignoring case."""
        return self._find_by_name(name) is not None

    def get_user(self, user_id: str) -> User | None:
        """Load a user's profile document."""
        result = self.documents.read(self.keys.user_key(user_id), User.from_document)
        return unwrap_or(result, None)

    def save_user(self, user: User) -> None:
        """Make ``user`` active, store its profile and upsert its index entry."""
        document = user.to_document()
        if isinstance(self.documents.write(self.keys.current_user, document), Failed):
            return
        if isinstance(
            self.documents.write(self.keys.user_key(user.id), document), Failed
        ):
            return

        index = self.list_all_users_result()
        if isinstance(index, Failed):
            _logger.error("User index unreadable, not updating entry for %s", user.id)
            return
        entries = unwrap_or(index, [])
        now = self.clock()
        for position, entry in enumerate(entries):
            if entry.id == user.id:
                entries[position] = UserIndexEntry(
                    id=user.id,
                    name=user.name,
                    created_at=entry.created_at,
                    last_access=now,
                )
                break
        else:
            entries.append(
                UserIndexEntry(
                    id=user.id, name=user.name, created_at=now, last_access=now
                )
            )
        self.documents.write(
            self.keys.users_index, [entry.to_document() for entry in entries]
        )

    def get_active_user(self) -> User | None:
        """Return the user of the active session, if any."""
        return unwrap_or(self.get_active_user_result(), None)

    def get_active_user_result(self) -> StoreResult[User]:
        return self.documents.read(self.keys.current_user, User.from_document)

    def list_all_users(self) -> list[UserIndexEntry]:
        """Return all known users in the order they were first saved."""
        return unwrap_or(self.list_all_users_result(), [])

    def list_all_users_result(self) -> StoreResult[list[UserIndexEntry]]:
        return self.documents.read_list(
            self.keys.users_index, UserIndexEntry.from_document
        )

    def clear_active_user(self) -> None:
        """Sign out. Profiles and records stay in storage."""
        self.documents.remove(self.keys.current_user)

    def _find_by_name(self, name: str) -> UserIndexEntry | None:
        wanted = name.lower()
        for entry in self.list_all_users():
            if entry.name.lower() == wanted:
                return entry
        return None

