"""User profile business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_analyzer.domain.analytics import ProfileMetrics
from meal_analyzer.domain.models import UserProfile, UserRecord
from meal_analyzer.services.physiology import profile_metrics


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with its profile, if present."""

    def update_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Replace the stored profile for a user."""


@dataclass
class UserService:
    """Application service for user profiles."""

    repository: UserRepository

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user record, if present."""
        return self.repository.get_user(user_id)

    def get_metrics(self, user_id: UUID) -> ProfileMetrics | None:
        """Return BMI, BMR and calorie target for a user, if present."""
        user = self.repository.get_user(user_id)
        if user is None:
            return None
        return profile_metrics(user.profile)

    def update_profile(
        self, user_id: UUID, changes: dict[str, object]
    ) -> UserRecord | None:
        """Merge camelCase profile changes into the stored profile."""
        user = self.repository.get_user(user_id)
        if user is None:
            return None
        profile = user.profile.merge(changes)
        self.repository.update_profile(user_id, profile)
        return UserRecord(id=user.id, name=user.name, email=user.email, profile=profile)
