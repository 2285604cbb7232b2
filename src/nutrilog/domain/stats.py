"""Domain models for statistics."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MealTypeTotals:
    """Meal count and calories for one meal type label."""

    count: int
    total_calories: float


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros with progress against the calorie goal."""

    calories: float
    protein: float
    carbs: float
    fats: float
    meal_count: int
    calorie_goal: int
    goal_progress_percent: float


@dataclass(frozen=True)
class Statistics:
    """Aggregated totals over a filtered set of meals."""

    total_meals: int = 0
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    average_calories: float = 0.0
    meal_type_breakdown: dict[str, MealTypeTotals] = field(default_factory=dict)
    daily_totals: dict[str, DailyTotals] = field(default_factory=dict)


@dataclass(frozen=True)
class DaySummary:
    """Single-day progress used by the dashboard."""

    day: str
    calories: float
    protein: float
    carbs: float
    fats: float
    meal_count: int
    calorie_goal: int
    calories_consumed: int
    remaining: int
    progress_percent: float
    status: str


@dataclass(frozen=True)
class DayCalories:
    """Calories eaten on a single day."""

    day: str
    calories: float
