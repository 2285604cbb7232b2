"""Pydantic models for the JSON API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from nutrilog.domain.meals import Meal, MealInput
from nutrilog.domain.profile import BmiReading, Profile, ProfileInput
from nutrilog.domain.stats import DayCalories, DaySummary, Statistics


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealPayload(CamelModel):
    """Meal fields submitted by the client."""

    food_name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    date: str
    meal_type: str

    def to_domain(self) -> MealInput:
        return MealInput(
            food_name=self.food_name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
            date=self.date,
            meal_type=self.meal_type,
        )


class MealOut(CamelModel):
    """Stored meal."""

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

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        return cls(
            id=meal.id,
            food_name=meal.food_name,
            calories=meal.calories,
            protein=meal.protein,
            carbs=meal.carbs,
            fats=meal.fats,
            date=meal.date,
            meal_type=meal.meal_type,
            created_at=meal.created_at,
            updated_at=meal.updated_at,
        )


class ProfilePayload(CamelModel):
    """Biometric input submitted by the client."""

    age: int
    gender: str
    height_feet: int = Field(alias="heightFt")
    height_inches: int = Field(alias="heightIn")
    weight_pounds: float = Field(alias="weightLbs")
    activity_level: str
    goal: str

    def to_domain(self) -> ProfileInput:
        return ProfileInput(
            age=self.age,
            gender=self.gender,
            height_feet=self.height_feet,
            height_inches=self.height_inches,
            weight_pounds=self.weight_pounds,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class ProfileOut(CamelModel):
    """Profile with derived calorie targets and BMI."""

    age: int
    gender: str
    height_feet: int = Field(alias="heightFt")
    height_inches: int = Field(alias="heightIn")
    weight_pounds: float = Field(alias="weightLbs")
    activity_level: str
    activity_label: str
    goal: str
    goal_label: str
    bmr: int
    daily_calorie_goal: int
    bmi: float
    bmi_category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile, bmi: BmiReading) -> "ProfileOut":
        return cls(
            age=profile.age,
            gender=profile.gender.value,
            height_feet=profile.height_feet,
            height_inches=profile.height_inches,
            weight_pounds=profile.weight_pounds,
            activity_level=profile.activity_level.value.key,
            activity_label=profile.activity_level.value.label,
            goal=profile.goal.value.key,
            goal_label=profile.goal.value.label,
            bmr=profile.bmr,
            daily_calorie_goal=profile.daily_calorie_goal,
            bmi=round(bmi.value, 1),
            bmi_category=bmi.category,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class MealTypeOut(CamelModel):
    count: int
    calories: float


class DailyTotalsOut(CamelModel):
    calories: float
    protein: float
    carbs: float
    fats: float
    meals: int
    calorie_goal: int
    goal_progress: float


class StatisticsOut(CamelModel):
    """Aggregated statistics for a date window."""

    total_meals: int
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float
    average_calories: float
    meal_type_breakdown: dict[str, MealTypeOut]
    daily_totals: dict[str, DailyTotalsOut]

    @classmethod
    def from_domain(cls, stats: Statistics) -> "StatisticsOut":
        return cls(
            total_meals=stats.total_meals,
            total_calories=stats.total_calories,
            total_protein=stats.total_protein,
            total_carbs=stats.total_carbs,
            total_fats=stats.total_fats,
            average_calories=stats.average_calories,
            meal_type_breakdown={
                meal_type: MealTypeOut(
                    count=totals.count, calories=totals.total_calories
                )
                for meal_type, totals in stats.meal_type_breakdown.items()
            },
            daily_totals={
                day: DailyTotalsOut(
                    calories=totals.calories,
                    protein=totals.protein,
                    carbs=totals.carbs,
                    fats=totals.fats,
                    meals=totals.meal_count,
                    calorie_goal=totals.calorie_goal,
                    goal_progress=totals.goal_progress_percent,
                )
                for day, totals in stats.daily_totals.items()
            },
        )


class DaySummaryOut(CamelModel):
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

    @classmethod
    def from_domain(cls, summary: DaySummary) -> "DaySummaryOut":
        return cls(
            day=summary.day,
            calories=summary.calories,
            protein=summary.protein,
            carbs=summary.carbs,
            fats=summary.fats,
            meal_count=summary.meal_count,
            calorie_goal=summary.calorie_goal,
            calories_consumed=summary.calories_consumed,
            remaining=summary.remaining,
            progress_percent=summary.progress_percent,
            status=summary.status,
        )


class DayCaloriesOut(CamelModel):
    day: str
    calories: float

    @classmethod
    def from_domain(cls, entry: DayCalories) -> "DayCaloriesOut":
        return cls(day=entry.day, calories=entry.calories)


class DashboardOut(CamelModel):
    """Today's progress, the last seven days and the latest meals."""

    today: DaySummaryOut
    week: list[DayCaloriesOut]
    recent_meals: list[MealOut]
