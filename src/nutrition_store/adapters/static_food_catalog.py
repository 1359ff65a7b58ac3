"""Bundled built-in food catalog."""

from dataclasses import dataclass

from nutrition_store.domain.models import FoodCategory, FoodItem
from nutrition_store.services.catalog import FoodCatalog

_CATEGORY_LABELS = {
    FoodCategory.FRUITS: "Fruits",
    FoodCategory.PROTEINS: "Proteins",
    FoodCategory.DAIRY: "Dairy",
    FoodCategory.GRAINS: "Grains",
    FoodCategory.VEGETABLES: "Vegetables",
    FoodCategory.BEVERAGES: "Beverages",
    FoodCategory.SNACKS: "Snacks",
}

DEFAULT_FOODS = (
    FoodItem(id="1", name="Apple", calories_per_100g=52, category=FoodCategory.FRUITS),
    FoodItem(id="2", name="Banana", calories_per_100g=89, category=FoodCategory.FRUITS),
    FoodItem(
        id="3",
        name="Chicken breast",
        calories_per_100g=165,
        category=FoodCategory.PROTEINS,
    ),
    FoodItem(id="4", name="Egg", calories_per_100g=155, category=FoodCategory.PROTEINS),
    FoodItem(
        id="5", name="Whole milk", calories_per_100g=61, category=FoodCategory.DAIRY
    ),
    FoodItem(
        id="6", name="Greek yogurt", calories_per_100g=59, category=FoodCategory.DAIRY
    ),
    FoodItem(
        id="7", name="White rice", calories_per_100g=130, category=FoodCategory.GRAINS
    ),
    FoodItem(
        id="8", name="Oatmeal", calories_per_100g=68, category=FoodCategory.GRAINS
    ),
    FoodItem(
        id="9", name="Broccoli", calories_per_100g=34, category=FoodCategory.VEGETABLES
    ),
    FoodItem(
        id="10", name="Carrot", calories_per_100g=41, category=FoodCategory.VEGETABLES
    ),
    FoodItem(
        id="11",
        name="Orange juice",
        calories_per_100g=45,
        category=FoodCategory.BEVERAGES,
    ),
    FoodItem(
        id="12", name="Almonds", calories_per_100g=579, category=FoodCategory.SNACKS
    ),
)


@dataclass
class StaticFoodCatalog(FoodCatalog):
    """Catalog backed by a fixed tuple of foods."""

    foods: tuple[FoodItem, ...] = DEFAULT_FOODS

    def list_all_built_in_foods(self) -> list[FoodItem]:
        return list(self.foods)

    def category_label(self, category: FoodCategory) -> str:
        return _CATEGORY_LABELS.get(category, str(category))
