"""Workout entities - catalog entries, exercises and completed-workout log entries."""

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SetResult:
    """Reps and load actually performed for one set."""

    reps: int = 0
    weight: float = 0


@dataclass
class Exercise:
    """Exercise embedded in a workout.

    An exercise is described either by ``reps`` or by a ``duration`` string
    such as ``"45s"``; neither is required. ``weight`` is in kg, 0 meaning
    bodyweight. ``completed_sets`` is only set on exercises recorded from a
    performed session.
    """

    id: str
    name: str
    sets: int
    reps: Optional[int] = None
    duration: Optional[str] = None
    weight: float = 0
    completed_sets: Optional[list[SetResult]] = None

    def __post_init__(self) -> None:
        if self.sets < 0:
            raise ValueError(f"Sets must be non-negative, got {self.sets}")


@dataclass
class WorkoutDraft:
    """Workout data supplied by the user before an id is assigned."""

    name: str
    category: str
    duration: int
    difficulty: str
    calories: int
    exercises: list[Exercise] = field(default_factory=list)


@dataclass
class Workout:
    """Workout catalog entry.

    Attributes:
        id: Unique id assigned by the store
        name: Display name
        category: strength, cardio, core, flexibility or a custom value
        duration: Planned duration in minutes
        difficulty: beginner, intermediate or advanced
        calories: Expected calorie burn
        exercises: Ordered exercise list
    """

    id: str
    name: str
    category: str
    duration: int
    difficulty: str
    calories: int
    exercises: list[Exercise] = field(default_factory=list)

    @staticmethod
    def from_draft(workout_id: str, draft: WorkoutDraft) -> "Workout":
        """Create a catalog entry from a draft, copying its exercise list."""
        return Workout(
            id=workout_id,
            name=draft.name,
            category=draft.category,
            duration=draft.duration,
            difficulty=draft.difficulty,
            calories=draft.calories,
            exercises=deepcopy(draft.exercises),
        )

    def exercise_names(self) -> list[str]:
        return [exercise.name for exercise in self.exercises]


@dataclass(frozen=True)
class CompletedWorkout:
    """Log entry for a performed workout.

    Name, duration and calories are snapshotted from the catalog entry at
    completion time and never recomputed; ``workout_id`` is a weak reference
    that may outlive the catalog entry.
    """

    id: str
    workout_id: str
    workout_name: str
    date: datetime
    duration: int
    calories: int
    exercises: list[Exercise] = field(default_factory=list)

    @staticmethod
    def snapshot(
        entry_id: str,
        workout: Workout,
        date: datetime,
        exercise_results: Optional[list[Exercise]] = None,
    ) -> "CompletedWorkout":
        """Snapshot a catalog workout into a log entry.

        Args:
            entry_id: Id of the new log entry
            workout: Workout being completed
            date: Completion timestamp
            exercise_results: Per-exercise results; when empty the workout's
                own exercise list is copied instead

        Returns:
            CompletedWorkout: New log entry
        """
        exercises = exercise_results if exercise_results else workout.exercises
        return CompletedWorkout(
            id=entry_id,
            workout_id=workout.id,
            workout_name=workout.name,
            date=date,
            duration=workout.duration,
            calories=workout.calories,
            exercises=deepcopy(list(exercises)),
        )
