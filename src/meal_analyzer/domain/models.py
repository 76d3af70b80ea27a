"""Domain models for users and their profiles."""

from dataclasses import dataclass, field
from uuid import UUID

PROFILE_KEYS = {
    "height": "height_cm",
    "weight": "weight_kg",
    "age": "age",
    "gender": "gender",
    "activityLevel": "activity_level",
    "goal": "goal",
}


@dataclass(frozen=True)
class UserProfile:
    """Physiological profile; every field is optional."""

    height_cm: float | None = None
    weight_kg: float | None = None
    age: int | None = None
    gender: str | None = None
    activity_level: str | None = None
    goal: str | None = None

    @classmethod
    def from_json(cls, raw: dict[str, object] | None) -> "UserProfile":
        """Parse the stored camelCase profile document."""
        raw = raw or {}
        height = raw.get("height")
        weight = raw.get("weight")
        age = raw.get("age")
        return cls(
            height_cm=float(height) if height not in (None, "") else None,
            weight_kg=float(weight) if weight not in (None, "") else None,
            age=int(float(age)) if age not in (None, "") else None,
            gender=_optional_str(raw.get("gender")),
            activity_level=_optional_str(raw.get("activityLevel")),
            goal=_optional_str(raw.get("goal")),
        )

    def to_json(self) -> dict[str, object]:
        """Serialize to the stored camelCase document, omitting unset fields."""
        payload: dict[str, object] = {}
        for json_key, attr in PROFILE_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                payload[json_key] = value
        return payload

    def merge(self, changes: dict[str, object]) -> "UserProfile":
        """Return a profile with the given camelCase fields overlaid."""
        return UserProfile.from_json({**self.to_json(), **changes})


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    email: str
    profile: UserProfile = field(default_factory=UserProfile)


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
