"""Statistics over logged meals."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from nutrilog.domain.meals import Meal
from nutrilog.domain.profile import Profile
from nutrilog.domain.stats import (
    DailyTotals,
    DayCalories,
    DaySummary,
    MealTypeTotals,
    Statistics,
)
from nutrilog.services.meals import MealRepository
from nutrilog.services.profile import ProfileRepository, round_half_up

DEFAULT_CALORIE_GOAL = 2000
CLOSE_TO_GOAL_RATIO = 0.2
SLIGHTLY_OVER_RATIO = 0.1


@dataclass
class _DayAccumulator:
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    meal_count: int = 0

    def add(self, meal: Meal) -> None:
        self.calories += meal.calories
        self.protein += meal.protein
        self.carbs += meal.carbs
        self.fats += meal.fats
        self.meal_count += 1


@dataclass
class _TypeAccumulator:
    count: int = 0
    calories: float = 0.0


def aggregate(
    meals: Iterable[Meal],
    profile: Profile | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
) -> Statistics:
    """Fold meals within an optional inclusive date window into statistics.

    Dates are ``YYYY-MM-DD`` strings and compare lexicographically. A reversed
    window simply matches nothing. Without a profile the per-day goal falls
    back to 2000 kcal while goal progress stays at 0.
    """
    totals = _DayAccumulator()
    by_type: dict[str, _TypeAccumulator] = {}
    by_day: dict[str, _DayAccumulator] = {}
    for meal in meals:
        if start_date and meal.date < start_date:
            continue
        if end_date and meal.date > end_date:
            continue
        totals.add(meal)
        type_totals = by_type.setdefault(meal.meal_type, _TypeAccumulator())
        type_totals.count += 1
        type_totals.calories += meal.calories
        by_day.setdefault(meal.date, _DayAccumulator()).add(meal)

    calorie_goal = _calorie_goal(profile)
    daily_totals = {
        day: DailyTotals(
            calories=acc.calories,
            protein=acc.protein,
            carbs=acc.carbs,
            fats=acc.fats,
            meal_count=acc.meal_count,
            calorie_goal=calorie_goal,
            goal_progress_percent=(
                _percent(acc.calories, calorie_goal) if profile is not None else 0.0
            ),
        )
        for day, acc in by_day.items()
    }
    return Statistics(
        total_meals=totals.meal_count,
        total_calories=totals.calories,
        total_protein=totals.protein,
        total_carbs=totals.carbs,
        total_fats=totals.fats,
        average_calories=totals.calories / len(by_day) if by_day else 0.0,
        meal_type_breakdown={
            meal_type: MealTypeTotals(count=acc.count, total_calories=acc.calories)
            for meal_type, acc in by_type.items()
        },
        daily_totals=daily_totals,
    )


def summarize_day(
    meals: Iterable[Meal], profile: Profile | None, day: str
) -> DaySummary:
    """Return one day's totals and how they compare with the calorie goal."""
    acc = _DayAccumulator()
    for meal in meals:
        if meal.date == day:
            acc.add(meal)

    calorie_goal = _calorie_goal(profile)
    consumed = round_half_up(acc.calories)
    remaining = calorie_goal - consumed
    return DaySummary(
        day=day,
        calories=acc.calories,
        protein=acc.protein,
        carbs=acc.carbs,
        fats=acc.fats,
        meal_count=acc.meal_count,
        calorie_goal=calorie_goal,
        calories_consumed=consumed,
        remaining=remaining,
        progress_percent=min(_percent(consumed, calorie_goal), 100.0),
        status=goal_status(remaining, calorie_goal),
    )


def goal_status(remaining: int, calorie_goal: int) -> str:
    """Describe remaining calories relative to the goal."""
    if remaining > 0:
        if remaining > calorie_goal * CLOSE_TO_GOAL_RATIO:
            return "On track"
        return "Close to goal"
    if abs(remaining) <= calorie_goal * SLIGHTLY_OVER_RATIO:
        return "Slightly over"
    return "Over goal"


def calories_by_day(
    meals: Iterable[Meal], end_day: date, days: int = 7
) -> list[DayCalories]:
    """Return calories per day for the window ending on end_day, oldest first."""
    window = [
        (end_day - timedelta(days=offset)).isoformat() for offset in range(days)
    ]
    sums = dict.fromkeys(window, 0.0)
    for meal in meals:
        if meal.date in sums:
            sums[meal.date] += meal.calories
    return [DayCalories(day=day, calories=sums[day]) for day in reversed(window)]


def _calorie_goal(profile: Profile | None) -> int:
    if profile is None:
        return DEFAULT_CALORIE_GOAL
    return profile.daily_calorie_goal


def _percent(calories: float, calorie_goal: int) -> float:
    if calorie_goal <= 0:
        return 0.0
    return calories / calorie_goal * 100


@dataclass
class StatsService:
    """Service for computing statistics from the stored meals and profile."""

    meal_repository: MealRepository
    profile_repository: ProfileRepository

    def get_statistics(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> Statistics:
        """Return statistics for the optional date window."""
        return aggregate(
            self.meal_repository.list_meals(),
            self.profile_repository.get_profile(),
            start_date=start_date,
            end_date=end_date,
        )

    def get_today(self, today: date) -> DaySummary:
        """Return today's totals against the calorie goal."""
        return summarize_day(
            self.meal_repository.list_meals(),
            self.profile_repository.get_profile(),
            today.isoformat(),
        )

    def get_week(self, today: date) -> list[DayCalories]:
        """Return calories for the last seven days including today."""
        return calories_by_day(self.meal_repository.list_meals(), today, days=7)
