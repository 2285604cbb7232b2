"""Domain errors."""


class ValidationError(ValueError):
    """Raised when caller-supplied values cannot produce a valid record."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class MealNotFoundError(LookupError):
    """Raised when a meal id does not exist in the store."""

    def __init__(self, meal_id: str) -> None:
        super().__init__(f"Meal not found: {meal_id}")
        self.meal_id = meal_id
