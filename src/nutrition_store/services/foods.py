"""Per-user custom food catalog."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from nutrition_store.domain.keys import StorageKeys
from nutrition_store.domain.models import CUSTOM_FOOD_PREFIX, FoodCategory, FoodItem
from nutrition_store.domain.results import Failed, StoreResult, unwrap_or
from nutrition_store.services.documents import DocumentStore

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class CustomFoodStore:
    """Stores user-authored foods, unique by id within each user."""

    documents: DocumentStore
    keys: StorageKeys = field(default_factory=StorageKeys)
    clock: Callable[[], datetime] = _utc_now

    def list_user_foods(self, user_id: str) -> list[FoodItem]:
        """Return the user's custom foods in stored order."""
        return unwrap_or(self.list_user_foods_result(user_id), [])

    def list_user_foods_result(self, user_id: str) -> StoreResult[list[FoodItem]]:
        return self.documents.read_list(
            self.keys.user_foods_key(user_id), FoodItem.from_document
        )

    def upsert_user_food(self, user_id: str, food: FoodItem) -> None:
        """Replace the food with the same id, or append it."""
        foods = self._load_for_update(user_id)
        if foods is None:
            return
        for position, existing in enumerate(foods):
            if existing.id == food.id:
                foods[position] = food
                break
        else:
            foods.append(food)
        self._store(user_id, foods)

    def remove_user_food(self, user_id: str, food_id: str) -> None:
        """Remove a food by id. Unknown ids leave the list unchanged."""
        foods = self._load_for_update(user_id)
        if foods is None:
            return
        self._store(user_id, [food for food in foods if food.id != food_id])

    def new_custom_food(
        self, name: str, calories_per_100g: int, category: FoodCategory
    ) -> FoodItem:
        """Build a custom food with a fresh id. Does not store it."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Custom food name must not be blank")
        millis = int(self.clock().timestamp() * 1000)
        return FoodItem(
            id=f"{CUSTOM_FOOD_PREFIX}{millis}",
            name=cleaned,
            calories_per_100g=calories_per_100g,
            category=FoodCategory(category),
        )

    def _load_for_update(self, user_id: str) -> list[FoodItem] | None:
        current = self.list_user_foods_result(user_id)
        if isinstance(current, Failed):
            _logger.error("Custom foods for %s unreadable, skipping update", user_id)
            return None
        return unwrap_or(current, [])

    def _store(self, user_id: str, foods: list[FoodItem]) -> None:
        self.documents.write(
            self.keys.user_foods_key(user_id), [food.to_document() for food in foods]
        )
