"""
Document models for tracking persistence.

These mirror, field for field, the JSON layout the mobile app stores under
each collection key (camelCase keys included). Pydantic handles validation
on load and JSON-compatible dumping on save.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fittrack.domain.shared.datetime_helpers import parse_timestamp


class _Document(BaseModel):
    """Common configuration: accept both aliases and field names."""

    model_config = ConfigDict(populate_by_name=True)


class _DatedDocument(_Document):
    """Document carrying a ``date`` timestamp, normalized to naive local time."""

    date: datetime = Field(..., description="When the entry was recorded")

    @field_validator("date", mode="before")
    @classmethod
    def ensure_local_naive(cls, v: object) -> object:
        """Store timestamps as naive local time (``Z`` strings are converted)."""
        if isinstance(v, (str, datetime)):
            return parse_timestamp(v)
        return v


class SetResultDocument(_Document):
    reps: int = 0
    weight: float = 0


class ExerciseDocument(_Document):
    """Exercise inside a workout or a completed workout."""

    id: str
    name: str
    sets: int = Field(..., ge=0)
    reps: Optional[int] = None
    duration: Optional[str] = None
    weight: float = 0
    completed_sets: Optional[list[SetResultDocument]] = Field(default=None, alias="completedSets")


class WorkoutDocument(_Document):
    """Workout catalog entry."""

    id: str
    name: str
    category: str
    duration: int = Field(..., ge=0, description="Minutes")
    difficulty: str
    calories: int = Field(..., ge=0, description="Expected burn in kcal")
    exercises: list[ExerciseDocument] = Field(default_factory=list)


class CompletedWorkoutDocument(_DatedDocument):
    """Completed-workout log entry."""

    id: str
    workout_id: str = Field(..., alias="workoutId")
    workout_name: str = Field(..., alias="workoutName")
    duration: int = Field(..., ge=0)
    calories: int = Field(..., ge=0)
    exercises: list[ExerciseDocument] = Field(default_factory=list)


class MealDocument(_Document):
    """Meal catalog entry."""

    id: str
    name: str
    category: str
    calories: int = Field(..., ge=0)
    protein: float = Field(..., ge=0, description="Protein in g")
    carbs: float = Field(..., ge=0, description="Carbohydrates in g")
    fat: float = Field(..., ge=0, description="Fat in g")
    ingredients: list[str] = Field(default_factory=list)


class ConsumedMealDocument(_DatedDocument):
    """Consumed-meal log entry (values already scaled by quantity)."""

    id: str
    meal_id: str = Field(..., alias="mealId")
    meal_name: str = Field(..., alias="mealName")
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)
    quantity: float = Field(default=1, ge=0)


class MeasurementEntryDocument(_DatedDocument):
    """Single measurement value."""

    id: str
    value: float


class HabitDocument(_Document):
    """Habit with its current-week completion record."""

    id: str
    name: str
    target: int = Field(..., ge=1, le=7)
    icon: Optional[str] = None
    completed: list[bool] = Field(..., min_length=7, max_length=7)


class UserDocument(_Document):
    """User profile."""

    name: str
    goal: str
    weight: float = Field(..., description="kg")
    height: float = Field(..., description="cm")
    age: int
