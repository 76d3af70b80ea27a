"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_analyzer.domain.models import UserProfile, UserRecord
from meal_analyzer.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user and its profile, if present."""
        response = (
            self.client.table("users")
            .select("id, name, email, profile")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        profile_raw = row.get("profile")
        return UserRecord(
            id=UUID(str(row["id"])),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
            profile=UserProfile.from_json(
                profile_raw if isinstance(profile_raw, dict) else None
            ),
        )

    def update_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Replace the stored profile document."""
        self.client.table("users").update({"profile": profile.to_json()}).eq(
            "id", str(user_id)
        ).execute()
