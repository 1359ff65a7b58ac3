"""Storage key derivation."""

from dataclasses import dataclass

DEFAULT_NAMESPACE = "nutritionTracker_"


@dataclass(frozen=True)
class StorageKeys:
    """Derives storage keys for the documents owned by each user.

    Every key starts with ``namespace``. Per-user keys use distinct fixed
    prefixes so the profile, records and custom foods of one user never
    share a key.
    """

    namespace: str = DEFAULT_NAMESPACE

    @property
    def current_user(self) -> str:
        """Key of the active-session pointer."""
        return f"{self.namespace}currentUser"

    @property
    def users_index(self) -> str:
        """Key of the index of all known users."""
        return f"{self.namespace}users"

    def user_key(self, user_id: str) -> str:
        """Key of a user's full profile document."""
        return f"{self.namespace}user_{user_id}"

    def records_key(self, user_id: str) -> str:
        """Key of a user's daily record list."""
        return f"{self.namespace}records_{user_id}"

    def user_foods_key(self, user_id: str) -> str:
        """Key of a user's custom food list."""
        return f"{self.namespace}userFoods_{user_id}"
