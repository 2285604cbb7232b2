"""Row mapping shared by the storage adapters."""

from datetime import UTC, datetime

from nutrilog.domain.meals import Meal
from nutrilog.domain.profile import Profile
from nutrilog.services.profile import parse_activity_level, parse_gender, parse_goal

_MISSING_TIMESTAMP = datetime.min.replace(tzinfo=UTC)


def meal_to_row(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "food_name": meal.food_name,
        "calories": meal.calories,
        "protein": meal.protein,
        "carbs": meal.carbs,
        "fats": meal.fats,
        "date": meal.date,
        "meal_type": meal.meal_type,
        "created_at": meal.created_at.isoformat(),
        "updated_at": meal.updated_at.isoformat() if meal.updated_at else None,
    }


def meal_from_row(row: dict[str, object]) -> Meal:
    return Meal(
        id=str(row["id"]),
        food_name=str(row.get("food_name", "")),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fats=float(row.get("fats", 0.0)),
        date=str(row.get("date", "")),
        meal_type=str(row.get("meal_type", "")),
        created_at=_parse_timestamp(row.get("created_at")) or _MISSING_TIMESTAMP,
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def profile_to_row(profile: Profile) -> dict[str, object]:
    return {
        "age": profile.age,
        "gender": profile.gender.value,
        "height_feet": profile.height_feet,
        "height_inches": profile.height_inches,
        "weight_pounds": profile.weight_pounds,
        "activity_level": profile.activity_level.value.key,
        "goal": profile.goal.value.key,
        "bmr": profile.bmr,
        "daily_calorie_goal": profile.daily_calorie_goal,
        "created_at": profile.created_at.isoformat(),
        "updated_at": profile.updated_at.isoformat(),
    }


def profile_from_row(row: dict[str, object]) -> Profile:
    created_at = _parse_timestamp(row.get("created_at")) or _MISSING_TIMESTAMP
    return Profile(
        age=int(row["age"]),
        gender=parse_gender(str(row["gender"])),
        height_feet=int(row["height_feet"]),
        height_inches=int(row["height_inches"]),
        weight_pounds=float(row["weight_pounds"]),
        activity_level=parse_activity_level(str(row["activity_level"])),
        goal=parse_goal(str(row["goal"])),
        bmr=int(row["bmr"]),
        daily_calorie_goal=int(row["daily_calorie_goal"]),
        created_at=created_at,
        updated_at=_parse_timestamp(row.get("updated_at")) or created_at,
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
