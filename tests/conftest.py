"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from nutrilog.config import Settings
from nutrilog.containers import AppContainer
from nutrilog.domain.meals import Meal
from nutrilog.domain.profile import Profile, ProfileInput
from nutrilog.services.meals import MealRepository, MealService
from nutrilog.services.profile import ProfileRepository, ProfileService
from nutrilog.services.stats import StatsService

FIXED_NOW = datetime(2024, 1, 2, 12, 0, tzinfo=UTC)


def make_meal(  # noqa: PLR0913
    meal_id: str = "meal-1",
    *,
    food_name: str = "Oatmeal",
    calories: float = 100,
    protein: float = 0,
    carbs: float = 0,
    fats: float = 0,
    date: str = "2024-01-01",
    meal_type: str = "Breakfast",
    created_at: datetime = FIXED_NOW,
) -> Meal:
    return Meal(
        id=meal_id,
        food_name=food_name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        date=date,
        meal_type=meal_type,
        created_at=created_at,
    )


def sample_profile_input(**overrides: object) -> ProfileInput:
    values: dict[str, object] = {
        "age": 30,
        "gender": "male",
        "height_feet": 5,
        "height_inches": 10,
        "weight_pounds": 180,
        "activity_level": "moderately_active",
        "goal": "maintain",
    }
    values.update(overrides)
    return ProfileInput(**values)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[str, Meal] = field(default_factory=dict)

    def list_meals(self) -> list[Meal]:
        return list(self.meals.values())

    def get_meal(self, meal_id: str) -> Meal | None:
        return self.meals.get(meal_id)

    def create_meal(self, meal: Meal) -> None:
        self.meals[meal.id] = meal

    def update_meal(self, meal: Meal) -> None:
        self.meals[meal.id] = meal

    def delete_meal(self, meal_id: str) -> None:
        self.meals.pop(meal_id, None)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile | None = None
    saves: int = 0

    def get_profile(self) -> Profile | None:
        return self.profile

    def save_profile(self, profile: Profile) -> None:
        self.profile = profile
        self.saves += 1


@dataclass
class FailingMealRepository(MealRepository):
    """Meal repository whose backend is unreachable."""

    calls: list[str] = field(default_factory=list)

    def _fail(self, action: str) -> None:
        self.calls.append(action)
        raise RuntimeError("Server not available")

    def list_meals(self) -> list[Meal]:
        self._fail("list_meals")
        return []

    def get_meal(self, meal_id: str) -> Meal | None:
        self._fail("get_meal")
        return None

    def create_meal(self, meal: Meal) -> None:
        self._fail("create_meal")

    def update_meal(self, meal: Meal) -> None:
        self._fail("update_meal")

    def delete_meal(self, meal_id: str) -> None:
        self._fail("delete_meal")


@dataclass
class FailingProfileRepository(ProfileRepository):
    """Profile repository whose backend is unreachable."""

    def get_profile(self) -> Profile | None:
        raise RuntimeError("Server not available")

    def save_profile(self, profile: Profile) -> None:
        raise RuntimeError("Server not available")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=str(tmp_path), seed_sample_data=False)


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        meal_repository=meal_repository,
        profile_repository=profile_repository,
        meal_service=MealService(meal_repository),
        profile_service=ProfileService(profile_repository),
        stats_service=StatsService(meal_repository, profile_repository),
    )
