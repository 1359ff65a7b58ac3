"""Domain models for the nutrition tracker documents."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

CUSTOM_FOOD_PREFIX = "custom-"

_USER_FIELDS = frozenset({"id", "name"})
_RECORD_FIELDS = frozenset({"date", "totalCalories", "entries"})


class FoodCategory(StrEnum):
    """Categories used by both built-in and custom foods."""

    FRUITS = "fruits"
    PROTEINS = "proteins"
    DAIRY = "dairy"
    GRAINS = "grains"
    VEGETABLES = "vegetables"
    BEVERAGES = "beverages"
    SNACKS = "snacks"


@dataclass(frozen=True)
class User:
    """A user profile. Extra profile fields are kept verbatim in ``profile``."""

    id: str
    name: str
    profile: dict[str, object] = field(default_factory=dict)

    def to_document(self) -> dict[str, object]:
        extra = {k: v for k, v in self.profile.items() if k not in _USER_FIELDS}
        return {"id": self.id, "name": self.name, **extra}

    @classmethod
    def from_document(cls, doc: object) -> "User":
        if not isinstance(doc, dict):
            raise TypeError(f"User document must be an object, got {type(doc)}")
        return cls(
            id=_require_str(doc, "id"),
            name=_require_str(doc, "name"),
            profile={k: v for k, v in doc.items() if k not in _USER_FIELDS},
        )


@dataclass(frozen=True)
class UserIndexEntry:
    """Represents one known user in the user index."""

    id: str
    name: str
    created_at: datetime
    last_access: datetime

    def to_document(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at.isoformat(),
            "lastAccess": self.last_access.isoformat(),
        }

    @classmethod
    def from_document(cls, doc: object) -> "UserIndexEntry":
        if not isinstance(doc, dict):
            raise TypeError(f"Index entry must be an object, got {type(doc)}")
        return cls(
            id=_require_str(doc, "id"),
            name=_require_str(doc, "name"),
            created_at=datetime.fromisoformat(_require_str(doc, "createdAt")),
            last_access=datetime.fromisoformat(_require_str(doc, "lastAccess")),
        )


@dataclass(frozen=True)
class FoodItem:
    """A food with its energy density per 100 grams."""

    id: str
    name: str
    calories_per_100g: int
    category: FoodCategory

    def __post_init__(self) -> None:
        calories = self.calories_per_100g
        if isinstance(calories, bool) or not isinstance(calories, int):
            raise TypeError("calories_per_100g must be an integer")
        if calories < 0:
            raise ValueError("calories_per_100g must be >= 0")

    @property
    def is_custom(self) -> bool:
        """True for user-authored foods."""
        return self.id.startswith(CUSTOM_FOOD_PREFIX)

    def to_document(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "caloriesPer100g": self.calories_per_100g,
            "category": self.category.value,
        }

    @classmethod
    def from_document(cls, doc: object) -> "FoodItem":
        if not isinstance(doc, dict):
            raise TypeError(f"Food document must be an object, got {type(doc)}")
        calories = doc["caloriesPer100g"]
        if isinstance(calories, bool) or not isinstance(calories, int | float):
            raise TypeError("caloriesPer100g must be a number")
        if isinstance(calories, float) and not calories.is_integer():
            raise ValueError("caloriesPer100g must be a whole number")
        return cls(
            id=str(doc["id"]),
            name=_require_str(doc, "name"),
            calories_per_100g=int(calories),
            category=FoodCategory(doc["category"]),
        )


@dataclass(frozen=True)
class FoodEntry:
    """A logged quantity of one food within a day."""

    food_id: str
    name: str
    grams: float
    calories: float

    def to_document(self) -> dict[str, object]:
        return {
            "foodId": self.food_id,
            "name": self.name,
            "grams": self.grams,
            "calories": self.calories,
        }

    @classmethod
    def from_document(cls, doc: object) -> "FoodEntry":
        if not isinstance(doc, dict):
            raise TypeError(f"Food entry must be an object, got {type(doc)}")
        return cls(
            food_id=str(doc["foodId"]),
            name=str(doc.get("name", "")),
            grams=float(doc.get("grams", 0.0)),
            calories=float(doc.get("calories", 0.0)),
        )


@dataclass(frozen=True)
class DailyRecord:
    """Nutrition log for one calendar date. ``date`` is unique per user."""

    date: str
    total_calories: float = 0.0
    entries: tuple[FoodEntry | dict[str, object], ...] = ()
    extra: dict[str, object] = field(default_factory=dict)

    def to_document(self) -> dict[str, object]:
        extra = {k: v for k, v in self.extra.items() if k not in _RECORD_FIELDS}
        raw_entries = self.extra.get("entries")
        return {
            "date": self.date,
            "totalCalories": self.total_calories,
            "entries": (
                raw_entries
                if raw_entries is not None and not self.entries
                else [_entry_document(entry) for entry in self.entries]
            ),
            **extra,
        }

    @classmethod
    def from_document(cls, doc: object) -> "DailyRecord":
        if not isinstance(doc, dict):
            raise TypeError(f"Daily record must be an object, got {type(doc)}")
        raw_entries = doc.get("entries", [])
        extra = {k: v for k, v in doc.items() if k not in _RECORD_FIELDS}
        if not isinstance(raw_entries, list):
            # Kept verbatim and written back until food is logged to the day.
            extra["entries"] = raw_entries
            raw_entries = []
        return cls(
            date=_require_str(doc, "date"),
            total_calories=float(doc.get("totalCalories", 0.0)),
            entries=tuple(_parse_entry(item) for item in raw_entries),
            extra=extra,
        )


def _parse_entry(item: object) -> "FoodEntry | dict[str, object]":
    """Parse a logged food, keeping entries of any other shape verbatim."""
    try:
        return FoodEntry.from_document(item)
    except (KeyError, TypeError, ValueError):
        return item  # type: ignore[return-value]


def _entry_document(entry: "FoodEntry | dict[str, object]") -> object:
    if isinstance(entry, FoodEntry):
        return entry.to_document()
    return entry


def _require_str(doc: dict[str, object], key: str) -> str:
    value = doc[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value
