"""Local JSON file storage for meals and the profile."""

import json
from dataclasses import dataclass
from pathlib import Path

from nutrilog.adapters.rows import (
    meal_from_row,
    meal_to_row,
    profile_from_row,
    profile_to_row,
)
from nutrilog.domain.meals import Meal
from nutrilog.domain.profile import Profile
from nutrilog.services.meals import MealRepository
from nutrilog.services.profile import ProfileRepository

MEALS_FILE = "meals.json"
PROFILE_FILE = "user_profile.json"


def _read_json(path: Path) -> object | None:
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


@dataclass
class JsonMealRepository(MealRepository):
    """Meal store kept as a single JSON array on disk."""

    path: Path

    @classmethod
    def in_directory(cls, data_dir: str | Path) -> "JsonMealRepository":
        return cls(path=Path(data_dir) / MEALS_FILE)

    def list_meals(self) -> list[Meal]:
        """Return every stored meal in insertion order."""
        rows = _read_json(self.path) or []
        return [meal_from_row(row) for row in rows]

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return a meal by id, if present."""
        for meal in self.list_meals():
            if meal.id == meal_id:
                return meal
        return None

    def create_meal(self, meal: Meal) -> None:
        """Append a meal to the file."""
        meals = self.list_meals()
        meals.append(meal)
        self._write(meals)

    def update_meal(self, meal: Meal) -> None:
        """Replace the meal with the same id."""
        meals = [
            meal if existing.id == meal.id else existing
            for existing in self.list_meals()
        ]
        self._write(meals)

    def delete_meal(self, meal_id: str) -> None:
        """Remove a meal by id."""
        self._write([meal for meal in self.list_meals() if meal.id != meal_id])

    def _write(self, meals: list[Meal]) -> None:
        _write_json(self.path, [meal_to_row(meal) for meal in meals])


@dataclass
class JsonProfileRepository(ProfileRepository):
    """Profile store kept as a single JSON object on disk."""

    path: Path

    @classmethod
    def in_directory(cls, data_dir: str | Path) -> "JsonProfileRepository":
        return cls(path=Path(data_dir) / PROFILE_FILE)

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""
        row = _read_json(self.path)
        if not row:
            return None
        return profile_from_row(row)

    def save_profile(self, profile: Profile) -> None:
        """Overwrite the stored profile."""
        _write_json(self.path, profile_to_row(profile))
