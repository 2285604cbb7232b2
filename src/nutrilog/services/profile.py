"""Profile calculations and persistence service."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from nutrilog.domain.errors import ValidationError
from nutrilog.domain.profile import (
    ActivityLevel,
    BmiReading,
    Gender,
    Goal,
    Profile,
    ProfileInput,
)

CM_PER_INCH = 2.54
KG_PER_POUND = 0.453592

UNDERWEIGHT_BMI = 18.5
OVERWEIGHT_BMI = 25.0
OBESE_BMI = 30.0


class ProfileRepository(Protocol):
    """Persistence interface for the single user profile."""

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: Profile) -> None:
        """Replace the stored profile."""


def compute_profile(
    profile_input: ProfileInput,
    *,
    now: datetime | None = None,
    created_at: datetime | None = None,
) -> Profile:
    """Validate biometric input and derive BMR and the daily calorie goal.

    Uses the Mifflin-St Jeor equation. The BMR is rounded for storage while
    maintenance calories are computed from the unrounded value.
    """
    gender = parse_gender(profile_input.gender)
    activity_level = parse_activity_level(profile_input.activity_level)
    goal = parse_goal(profile_input.goal)
    _require_integer("age", profile_input.age)
    _require_integer("height_feet", profile_input.height_feet)
    _require_integer("height_inches", profile_input.height_inches)
    _require_positive("age", profile_input.age)
    _require_positive("weight_pounds", profile_input.weight_pounds)
    if profile_input.height_feet < 0:
        raise ValidationError("height_feet", "must not be negative")
    if profile_input.height_inches < 0:
        raise ValidationError("height_inches", "must not be negative")
    total_inches = profile_input.height_feet * 12 + profile_input.height_inches
    if total_inches <= 0:
        raise ValidationError("height", "combined height must be greater than 0")

    height_cm = total_inches * CM_PER_INCH
    weight_kg = profile_input.weight_pounds * KG_PER_POUND
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * profile_input.age
    bmr += 5 if gender is Gender.MALE else -161

    maintenance = bmr * activity_level.value.multiplier
    timestamp = now or datetime.now(tz=UTC)
    return Profile(
        age=profile_input.age,
        gender=gender,
        height_feet=profile_input.height_feet,
        height_inches=profile_input.height_inches,
        weight_pounds=profile_input.weight_pounds,
        activity_level=activity_level,
        goal=goal,
        bmr=round_half_up(bmr),
        daily_calorie_goal=round_half_up(maintenance + goal.value.calorie_delta),
        created_at=created_at or timestamp,
        updated_at=timestamp,
    )


def compute_bmi(profile: Profile) -> BmiReading:
    """Return the BMI and weight category for a profile."""
    height_m = profile.total_height_inches * CM_PER_INCH / 100
    weight_kg = profile.weight_pounds * KG_PER_POUND
    value = weight_kg / (height_m * height_m)
    return BmiReading(value=value, category=bmi_category(value))


def bmi_category(bmi: float) -> str:
    """Classify a BMI value; boundary values belong to the upper category."""
    if bmi < UNDERWEIGHT_BMI:
        return "Underweight"
    if bmi < OVERWEIGHT_BMI:
        return "Normal weight"
    if bmi < OBESE_BMI:
        return "Overweight"
    return "Obese"


def parse_gender(raw: str) -> Gender:
    normalized = str(raw).strip().lower()
    for gender in Gender:
        if gender.value == normalized:
            return gender
    raise ValidationError("gender", f"unrecognized value {raw!r}")


def parse_activity_level(raw: str) -> ActivityLevel:
    normalized = str(raw).strip().lower()
    for level in ActivityLevel:
        if level.value.key == normalized:
            return level
    raise ValidationError("activity_level", f"unrecognized value {raw!r}")


def parse_goal(raw: str) -> Goal:
    normalized = str(raw).strip().lower()
    for goal in Goal:
        if goal.value.key == normalized:
            return goal
    raise ValidationError("goal", f"unrecognized value {raw!r}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going toward +infinity."""
    return math.floor(value + 0.5)


def _require_integer(field: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be a whole number")


def _require_positive(field: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(field, "must be greater than 0")


@dataclass
class ProfileService:
    """Application service for reading and recomputing the profile."""

    repository: ProfileRepository

    def get(self) -> Profile | None:
        """Return the stored profile, if any."""
        return self.repository.get_profile()

    def save(
        self, profile_input: ProfileInput, now: datetime | None = None
    ) -> Profile:
        """Recompute the whole profile from input and persist it."""
        existing = self.repository.get_profile()
        profile = compute_profile(
            profile_input,
            now=now,
            created_at=existing.created_at if existing else None,
        )
        self.repository.save_profile(profile)
        return profile

    def bmi(self) -> BmiReading | None:
        """Return the BMI of the stored profile, if any."""
        profile = self.repository.get_profile()
        if profile is None:
            return None
        return compute_bmi(profile)
