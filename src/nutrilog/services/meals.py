"""Meal logging service."""

import logging
import math
import re
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import uuid4

from nutrilog.domain.errors import MealNotFoundError, ValidationError
from nutrilog.domain.meals import Meal, MealInput

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self) -> list[Meal]:
        """Return every stored meal."""

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return a meal by id, if present."""

    def create_meal(self, meal: Meal) -> None:
        """Store a new meal."""

    def update_meal(self, meal: Meal) -> None:
        """Replace a stored meal with the same id."""

    def delete_meal(self, meal_id: str) -> None:
        """Remove a meal by id."""


_SAMPLE_MEALS: list[tuple[int, MealInput]] = [
    (0, MealInput("Greek Yogurt with Berries", 150, 15, 20, 4, "", "Breakfast")),
    (0, MealInput("Grilled Chicken Salad", 320, 35, 12, 14, "", "Lunch")),
    (0, MealInput("Almonds (1 oz)", 160, 6, 6, 14, "", "Snack")),
    (1, MealInput("Oatmeal with Banana", 220, 8, 45, 3, "", "Breakfast")),
    (1, MealInput("Turkey Sandwich", 380, 25, 40, 12, "", "Lunch")),
]


@dataclass
class MealService:
    """Service for creating, editing and listing meals."""

    repository: MealRepository

    def add_meal(self, meal_input: MealInput, now: datetime | None = None) -> Meal:
        """Validate and store a new meal."""
        validate_meal_input(meal_input)
        meal = Meal(
            id=uuid4().hex,
            food_name=meal_input.food_name.strip(),
            calories=float(meal_input.calories),
            protein=float(meal_input.protein),
            carbs=float(meal_input.carbs),
            fats=float(meal_input.fats),
            date=meal_input.date,
            meal_type=meal_input.meal_type,
            created_at=now or datetime.now(tz=UTC),
        )
        self.repository.create_meal(meal)
        return meal

    def update_meal(
        self, meal_id: str, meal_input: MealInput, now: datetime | None = None
    ) -> Meal:
        """Replace the editable fields of an existing meal."""
        validate_meal_input(meal_input)
        current = self.repository.get_meal(meal_id)
        if current is None:
            raise MealNotFoundError(meal_id)
        updated = replace(
            current,
            food_name=meal_input.food_name.strip(),
            calories=float(meal_input.calories),
            protein=float(meal_input.protein),
            carbs=float(meal_input.carbs),
            fats=float(meal_input.fats),
            date=meal_input.date,
            meal_type=meal_input.meal_type,
            updated_at=now or datetime.now(tz=UTC),
        )
        self.repository.update_meal(updated)
        return updated

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal by id."""
        if self.repository.get_meal(meal_id) is None:
            raise MealNotFoundError(meal_id)
        self.repository.delete_meal(meal_id)

    def get_meal(self, meal_id: str) -> Meal:
        """Return a meal by id."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(meal_id)
        return meal

    def list_meals(
        self,
        day: str | None = None,
        meal_type: str | None = None,
        search: str | None = None,
    ) -> list[Meal]:
        """Return meals matching the filters, newest date first."""
        meals = self.repository.list_meals()
        if day:
            meals = [meal for meal in meals if meal.date == day]
        if meal_type:
            meals = [meal for meal in meals if meal.meal_type == meal_type]
        if search:
            needle = search.lower()
            meals = [meal for meal in meals if needle in meal.food_name.lower()]
        return sorted(meals, key=lambda meal: meal.date, reverse=True)

    def recent_meals(self, limit: int = 5) -> list[Meal]:
        """Return the most recently created meals."""
        meals = sorted(
            self.repository.list_meals(),
            key=lambda meal: meal.created_at,
            reverse=True,
        )
        return meals[:limit]

    def seed_sample_meals(
        self, today: date, now: datetime | None = None
    ) -> list[Meal]:
        """Populate an empty store with demo meals for today and yesterday."""
        if self.repository.list_meals():
            return []
        created_at = now or datetime.now(tz=UTC)
        seeded = []
        for days_ago, template in _SAMPLE_MEALS:
            day = today - timedelta(days=days_ago)
            seeded.append(
                self.add_meal(
                    replace(template, date=day.isoformat()),
                    now=created_at - timedelta(days=days_ago),
                )
            )
        _logger.info("Seeded %s sample meals", len(seeded))
        return seeded


def validate_meal_input(meal_input: MealInput) -> None:
    """Raise ValidationError when a meal input is not storable."""
    if not meal_input.food_name or not meal_input.food_name.strip():
        raise ValidationError("food_name", "This field is required")
    if not meal_input.meal_type or not meal_input.meal_type.strip():
        raise ValidationError("meal_type", "This field is required")
    for field in ("calories", "protein", "carbs", "fats"):
        value = getattr(meal_input, field)
        if not math.isfinite(value) or value < 0:
            raise ValidationError(field, "Please enter a valid positive number")
    validate_iso_date("date", meal_input.date)


def validate_iso_date(field: str, value: str) -> None:
    """Require a zero-padded YYYY-MM-DD string naming a real calendar day."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(field, "Please enter a valid date")
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(field, "Please enter a valid date") from exc
