"""Logging food quantities into daily records."""

from dataclasses import dataclass, replace

from nutrition_store.domain.models import DailyRecord, FoodEntry, FoodItem
from nutrition_store.services.records import DailyRecordStore


@dataclass
class DiaryService:
    """Adds food entries to a user's record for a given date."""

    records: DailyRecordStore

    def log_food(
        self, user_id: str, day: str, food: FoodItem, grams: float
    ) -> DailyRecord | None:
        """Append ``grams`` of ``food`` to the day's record and return it.

        Returns None when the stored record could not be written back.
        """
        if grams <= 0:
            raise ValueError("grams must be positive")
        entry = FoodEntry(
            food_id=food.id,
            name=food.name,
            grams=grams,
            calories=calories_for(food, grams),
        )
        current = self.records.get_daily_record(day, user_id) or DailyRecord(date=day)
        entries = (*current.entries, entry)
        updated = replace(
            current,
            entries=entries,
            total_calories=round(sum(_entry_calories(item) for item in entries), 1),
            extra={k: v for k, v in current.extra.items() if k != "entries"},
        )
        self.records.save_daily_record(updated, user_id)
        if self.records.get_daily_record(day, user_id) != updated:
            return None
        return updated


def _entry_calories(entry: object) -> float:
    """Calories of a logged entry, reading foreign-shaped entries when possible."""
    if isinstance(entry, FoodEntry):
        return entry.calories
    if isinstance(entry, dict):
        value = entry.get("calories")
        if isinstance(value, int | float) and not isinstance(value, bool):
            return float(value)
    return 0.0


def calories_for(food: FoodItem, grams: float) -> float:
    """Return the calories in ``grams`` of ``food``."""
    return round(food.calories_per_100g * grams / 100, 1)
