"""
Exercise catalog reference data.

Catalog entries are shared by every user's workouts and templates. They are
never owned by a user and are immutable once referenced (the store restricts
deletes while a workout or template points at them).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExerciseCatalogEntry(BaseModel):
    """A named exercise type, e.g. "Bench Press"."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Stable catalog identifier")
    name: str = Field(..., min_length=1, max_length=255, description="Exercise name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        if not v.strip():
            raise ValueError("Catalog entry name cannot be blank")
        return v
