"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MealInput:
    """Editable fields of a meal entry."""

    food_name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    date: str
    meal_type: str


@dataclass(frozen=True)
class Meal:
    """A logged food entry attributed to a calendar day."""

    id: str
    food_name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    date: str
    meal_type: str
    created_at: datetime
    updated_at: datetime | None = None
