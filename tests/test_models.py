"""Tests for document conversion of domain models."""

from datetime import UTC, datetime

import pytest

from nutrition_store.domain.models import (
    DailyRecord,
    FoodCategory,
    FoodItem,
    User,
    UserIndexEntry,
)


def test_user_profile_fields_are_flattened() -> None:
    user = User(id="u1", name="Ana", profile={"weight": 61.5, "goal": 1800})

    assert user.to_document() == {
        "id": "u1",
        "name": "Ana",
        "weight": 61.5,
        "goal": 1800,
    }
    assert User.from_document(user.to_document()) == user


def test_user_requires_string_id_and_name() -> None:
    with pytest.raises(KeyError):
        User.from_document({"name": "Ana"})
    with pytest.raises(TypeError):
        User.from_document({"id": 1, "name": "Ana"})
    with pytest.raises(TypeError):
        User.from_document(["u1"])


def test_index_entry_uses_iso_timestamps() -> None:
    created = datetime(2024, 1, 1, 8, tzinfo=UTC)
    entry = UserIndexEntry(id="u1", name="Ana", created_at=created, last_access=created)

    doc = entry.to_document()

    assert doc["createdAt"] == "2024-01-01T08:00:00+00:00"
    assert UserIndexEntry.from_document(doc) == entry


def test_index_entry_accepts_browser_timestamps() -> None:
    entry = UserIndexEntry.from_document(
        {
            "id": "u1",
            "name": "Ana",
            "createdAt": "2024-01-01T08:00:00.000Z",
            "lastAccess": "2024-01-02T08:00:00.000Z",
        }
    )

    assert entry.last_access > entry.created_at


def test_food_item_document_shape() -> None:
    food = FoodItem(
        id="custom-9", name="Flan", calories_per_100g=210, category=FoodCategory.DAIRY
    )

    assert food.to_document() == {
        "id": "custom-9",
        "name": "Flan",
        "caloriesPer100g": 210,
        "category": "dairy",
    }
    assert FoodItem.from_document(food.to_document()) == food
    assert food.is_custom


def test_food_item_rejects_bad_documents() -> None:
    with pytest.raises(ValueError):
        FoodItem.from_document(
            {"id": "1", "name": "X", "caloriesPer100g": 10, "category": "candy"}
        )
    with pytest.raises(ValueError):
        FoodItem.from_document(
            {"id": "1", "name": "X", "caloriesPer100g": -5, "category": "snacks"}
        )
    with pytest.raises(TypeError):
        FoodItem.from_document(
            {"id": "1", "name": "X", "caloriesPer100g": "10", "category": "snacks"}
        )


def test_built_in_food_is_not_custom() -> None:
    food = FoodItem(
        id="12", name="Almonds", calories_per_100g=579, category=FoodCategory.SNACKS
    )

    assert not food.is_custom


def test_daily_record_defaults() -> None:
    record = DailyRecord.from_document({"date": "2024-01-01"})

    assert record == DailyRecord(date="2024-01-01")
    assert record.to_document() == {
        "date": "2024-01-01",
        "totalCalories": 0.0,
        "entries": [],
    }


def test_food_item_requires_integer_calories() -> None:
    with pytest.raises(TypeError):
        FoodItem(
            id="custom-1",
            name="Soup",
            calories_per_100g=52.7,
            category=FoodCategory.VEGETABLES,
        )
    with pytest.raises(TypeError):
        FoodItem(
            id="custom-1",
            name="Soup",
            calories_per_100g=True,
            category=FoodCategory.VEGETABLES,
        )


def test_food_item_rejects_fractional_stored_calories() -> None:
    with pytest.raises(ValueError):
        FoodItem.from_document(
            {"id": "1", "name": "X", "caloriesPer100g": 52.7, "category": "snacks"}
        )

    whole = FoodItem.from_document(
        {"id": "1", "name": "X", "caloriesPer100g": 52.0, "category": "snacks"}
    )
    assert whole.calories_per_100g == 52


def test_daily_record_keeps_foreign_entries_verbatim() -> None:
    doc = {
        "date": "2024-01-01",
        "totalCalories": 52,
        "entries": [
            {"foodId": "1", "name": "Apple", "grams": 100, "calories": 52},
            {"food": {"id": "1"}, "quantity": 100},
        ],
    }

    record = DailyRecord.from_document(doc)

    assert record.entries[1] == {"food": {"id": "1"}, "quantity": 100}
    assert record.to_document()["entries"] == [
        {"foodId": "1", "name": "Apple", "grams": 100.0, "calories": 52.0},
        {"food": {"id": "1"}, "quantity": 100},
    ]


def test_daily_record_requires_numeric_total() -> None:
    with pytest.raises(ValueError):
        DailyRecord.from_document({"date": "2024-01-01", "totalCalories": "lots"})
