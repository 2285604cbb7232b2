"""Domain models for the user profile."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class ActivityFactor:
    """Activity level definition with its TDEE multiplier."""

    key: str
    label: str
    multiplier: float


@dataclass(frozen=True)
class GoalAdjustment:
    """Weight goal definition with its daily calorie offset."""

    key: str
    label: str
    calorie_delta: int


class Gender(Enum):
    """Biological sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Supported activity levels (single source of truth for multipliers)."""

    SEDENTARY = ActivityFactor("sedentary", "Sedentary", 1.2)
    LIGHTLY_ACTIVE = ActivityFactor("lightly_active", "Lightly Active", 1.375)
    MODERATELY_ACTIVE = ActivityFactor(
        "moderately_active", "Moderately Active", 1.55
    )
    VERY_ACTIVE = ActivityFactor("very_active", "Very Active", 1.725)
    EXTRA_ACTIVE = ActivityFactor("extra_active", "Extra Active", 1.9)


class Goal(Enum):
    """Supported weight goals."""

    WEIGHT_LOSS = GoalAdjustment("weight_loss", "Weight Loss", -500)
    MAINTAIN = GoalAdjustment("maintain", "Maintain Weight", 0)
    WEIGHT_GAIN = GoalAdjustment("weight_gain", "Weight Gain", 500)


@dataclass(frozen=True)
class ProfileInput:
    """Raw biometric input collected from the user."""

    age: int
    gender: str
    height_feet: int
    height_inches: int
    weight_pounds: float
    activity_level: str
    goal: str


@dataclass(frozen=True)
class Profile:
    """Validated profile with derived calorie targets."""

    age: int
    gender: Gender
    height_feet: int
    height_inches: int
    weight_pounds: float
    activity_level: ActivityLevel
    goal: Goal
    bmr: int
    daily_calorie_goal: int
    created_at: datetime
    updated_at: datetime

    @property
    def total_height_inches(self) -> int:
        return self.height_feet * 12 + self.height_inches


@dataclass(frozen=True)
class BmiReading:
    """Body mass index with its weight category."""

    value: float
    category: str
