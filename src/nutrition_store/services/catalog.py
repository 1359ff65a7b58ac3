"""Merged view of built-in and custom foods."""

from dataclasses import dataclass
from typing import Protocol

from nutrition_store.domain.models import FoodCategory, FoodItem
from nutrition_store.services.foods import CustomFoodStore

ALL_CATEGORIES = "all"


class FoodCatalog(Protocol):
    """Provider of the fixed built-in food list."""

    def list_all_built_in_foods(self) -> list[FoodItem]:
        """Return every built-in food."""

    def category_label(self, category: FoodCategory) -> str:
        """Return the display label for a category."""


@dataclass
class CatalogService:
    """Combines the built-in catalog with a user's custom foods."""

    catalog: FoodCatalog
    custom_foods: CustomFoodStore

    def get_foods_for_user(self, user_id: str | None) -> list[FoodItem]:
        """Return built-in foods followed by the user's custom foods."""
        foods = list(self.catalog.list_all_built_in_foods())
        if user_id:
            foods.extend(self.custom_foods.list_user_foods(user_id))
        return foods

    def category_label(self, category: FoodCategory) -> str:
        return self.catalog.category_label(category)


def filter_foods(
    foods: list[FoodItem], category: str = ALL_CATEGORIES, search: str = ""
) -> list[FoodItem]:
    """Filter by category (``"all"`` keeps every category) and name substring."""
    needle = search.strip().casefold()
    return [
        food
        for food in foods
        if (category == ALL_CATEGORIES or food.category == category)
        and needle in food.name.casefold()
    ]
