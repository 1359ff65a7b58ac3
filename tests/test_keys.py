"""Tests for storage key derivation."""

from nutrition_store.domain.keys import StorageKeys


def test_default_keys_match_stored_layout() -> None:
    keys = StorageKeys()

    assert keys.current_user == "nutritionTracker_currentUser"
    assert keys.users_index == "nutritionTracker_users"
    assert keys.user_key("u1") == "nutritionTracker_user_u1"
    assert keys.records_key("u1") == "nutritionTracker_records_u1"
    assert keys.user_foods_key("u1") == "nutritionTracker_userFoods_u1"


def test_per_user_keys_never_collide() -> None:
    keys = StorageKeys()
    derived = {
        keys.user_key("abc"),
        keys.records_key("abc"),
        keys.user_foods_key("abc"),
        keys.current_user,
        keys.users_index,
    }

    assert len(derived) == 5


def test_keys_are_deterministic_and_namespaced() -> None:
    first = StorageKeys(namespace="app_")
    second = StorageKeys(namespace="app_")

    assert first.records_key("42") == second.records_key("42") == "app_records_42"
