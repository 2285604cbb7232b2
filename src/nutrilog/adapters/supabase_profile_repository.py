"""Supabase repository for the user profile."""

from dataclasses import dataclass

from supabase import Client

from nutrilog.adapters.rows import profile_from_row, profile_to_row
from nutrilog.domain.profile import Profile
from nutrilog.services.profile import ProfileRepository

PROFILE_ROW_ID = "default"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation storing the single profile row."""

    client: Client

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", PROFILE_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return profile_from_row(response.data[0])

    def save_profile(self, profile: Profile) -> None:
        """Upsert the profile row."""
        response = (
            self.client.table("profiles")
            .upsert({"id": PROFILE_ROW_ID, **profile_to_row(profile)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile in Supabase")
