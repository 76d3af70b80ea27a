"""Request models for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from meal_analyzer.domain.meals import MealMetadataUpdate, MealType


class ProfileUpdate(BaseModel):
    """Partial profile update using the stored camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, gt=0)
    gender: Literal["male", "female", "other"] | None = None
    activity_level: (
        Literal[
            "sedentary",
            "lightly_active",
            "moderately_active",
            "very_active",
            "extra_active",
        ]
        | None
    ) = Field(default=None, alias="activityLevel")
    goal: Literal["lose_weight", "maintain_weight", "gain_weight"] | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class MealUpdate(BaseModel):
    """Editable meal metadata."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    meal_type: MealType | None = Field(default=None, alias="mealType")
    tags: list[str] | str | None = None
    notes: str | None = None

    def to_update(self) -> MealMetadataUpdate:
        name = self.name.strip() if self.name else None
        return MealMetadataUpdate(
            name=name or None,
            meal_type=self.meal_type.value if self.meal_type else None,
            tags=parse_tags(self.tags) if self.tags is not None else None,
            notes=self.notes,
        )


def parse_tags(raw: list[str] | str | None) -> list[str]:
    """Split comma-separated tags and drop blanks."""
    if raw is None:
        return []
    chunks = raw.split(",") if isinstance(raw, str) else raw
    return [chunk.strip() for chunk in chunks if chunk.strip()]
