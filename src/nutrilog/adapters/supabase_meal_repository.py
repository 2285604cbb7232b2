"""Supabase repository for meals."""

from dataclasses import dataclass

from supabase import Client

from nutrilog.adapters.rows import meal_from_row, meal_to_row
from nutrilog.domain.meals import Meal
from nutrilog.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def list_meals(self) -> list[Meal]:
        """Return all meals ordered by day."""
        response = (
            self.client.table("meals")
            .select("*")
            .order("date", desc=False)
            .execute()
        )
        return [meal_from_row(row) for row in response.data or []]

    def get_meal(self, meal_id: str) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", meal_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return meal_from_row(response.data[0])

    def create_meal(self, meal: Meal) -> None:
        """Insert a meal row."""
        response = self.client.table("meals").insert(meal_to_row(meal)).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal in Supabase")

    def update_meal(self, meal: Meal) -> None:
        """Update a meal row in place."""
        row = meal_to_row(meal)
        row.pop("id")
        response = self.client.table("meals").update(row).eq("id", meal.id).execute()
        if not response.data:
            raise RuntimeError("Failed to update meal in Supabase")

    def delete_meal(self, meal_id: str) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", meal_id).execute()
