"""Repositories that fall back to a secondary store when the primary fails."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from nutrilog.domain.meals import Meal
from nutrilog.domain.profile import Profile
from nutrilog.services.meals import MealRepository
from nutrilog.services.profile import ProfileRepository

_logger = logging.getLogger(__name__)

T = TypeVar("T")


def _with_fallback(
    action: str, primary: Callable[[], T], fallback: Callable[[], T]
) -> T:
    try:
        return primary()
    except Exception:
        _logger.warning(
            "Primary store unavailable for %s, using fallback", action, exc_info=True
        )
        return fallback()


@dataclass
class FallbackMealRepository(MealRepository):
    """Meal store that serves each call from the fallback if the primary fails."""

    primary: MealRepository
    fallback: MealRepository

    def list_meals(self) -> list[Meal]:
        return _with_fallback(
            "list_meals", self.primary.list_meals, self.fallback.list_meals
        )

    def get_meal(self, meal_id: str) -> Meal | None:
        return _with_fallback(
            "get_meal",
            lambda: self.primary.get_meal(meal_id),
            lambda: self.fallback.get_meal(meal_id),
        )

    def create_meal(self, meal: Meal) -> None:
        _with_fallback(
            "create_meal",
            lambda: self.primary.create_meal(meal),
            lambda: self.fallback.create_meal(meal),
        )

    def update_meal(self, meal: Meal) -> None:
        _with_fallback(
            "update_meal",
            lambda: self.primary.update_meal(meal),
            lambda: self.fallback.update_meal(meal),
        )

    def delete_meal(self, meal_id: str) -> None:
        _with_fallback(
            "delete_meal",
            lambda: self.primary.delete_meal(meal_id),
            lambda: self.fallback.delete_meal(meal_id),
        )


@dataclass
class FallbackProfileRepository(ProfileRepository):
    """Profile store that serves each call from the fallback if the primary fails."""

    primary: ProfileRepository
    fallback: ProfileRepository

    def get_profile(self) -> Profile | None:
        return _with_fallback(
            "get_profile", self.primary.get_profile, self.fallback.get_profile
        )

    def save_profile(self, profile: Profile) -> None:
        _with_fallback(
            "save_profile",
            lambda: self.primary.save_profile(profile),
            lambda: self.fallback.save_profile(profile),
        )
