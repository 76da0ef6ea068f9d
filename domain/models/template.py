"""
Reusable workout templates.

Templates are per-user exercise blueprints that share the exercise catalog
with logged workouts. They are modelled here so the schema is complete; the
retrieval service does not query them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WorkoutTemplate(BaseModel):
    """A named, user-owned blueprint for a workout."""

    model_config = ConfigDict(frozen=True)

    id: int
    user_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    is_public: bool = False
    usage_count: int = Field(default=0, ge=0)


class TemplateExercise(BaseModel):
    """A catalog exercise placed in a template with optional set/rep targets."""

    model_config = ConfigDict(frozen=True)

    id: int
    template_id: int
    exercise_catalog_id: int
    order: int = Field(..., ge=0)
    target_sets: Optional[int] = Field(default=None, gt=0)
    target_reps_min: Optional[int] = Field(default=None, gt=0)
    target_reps_max: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def validate_rep_range(self) -> "TemplateExercise":
        """Ensure the rep range is not inverted."""
        if (
            self.target_reps_min is not None
            and self.target_reps_max is not None
            and self.target_reps_min > self.target_reps_max
        ):
            raise ValueError("target_reps_min cannot exceed target_reps_max")
        return self
