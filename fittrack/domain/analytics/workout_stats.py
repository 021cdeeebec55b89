"""Workout statistics: weekly totals, period summaries and catalog filters."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Sequence, Union

from fittrack.domain.shared.datetime_helpers import start_of_week, to_local_naive
from fittrack.domain.shared.types import Period
from fittrack.domain.tracking.core.entities import CompletedWorkout, Exercise, SetResult, Workout

from .periods import period_window_start

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class WorkoutWeekSummary:
    """Workouts logged since the start of the current calendar week."""

    count: int
    calories: int


@dataclass(frozen=True)
class PeriodSummary:
    """Totals over the summary window of a period."""

    count: int
    total_duration_minutes: int
    total_calories: int


def weekly_workout_summary(
    completed: Iterable[CompletedWorkout], reference: datetime
) -> WorkoutWeekSummary:
    """Count and calories of workouts since Sunday 00:00 of the reference week.

    An entry dated exactly at the week start is included.
    """
    week_start = start_of_week(to_local_naive(reference))
    this_week = [entry for entry in completed if entry.date >= week_start]
    return WorkoutWeekSummary(
        count=len(this_week),
        calories=sum(entry.calories for entry in this_week),
    )


def period_summary(
    completed: Iterable[CompletedWorkout],
    period: Union[Period, str],
    reference: datetime,
) -> PeriodSummary:
    """Count, minutes and calories of workouts in the period's summary window.

    See ``period_window_start`` for where each window begins.
    """
    window_start = period_window_start(period, reference)
    in_window = [entry for entry in completed if entry.date >= window_start]
    return PeriodSummary(
        count=len(in_window),
        total_duration_minutes=sum(entry.duration for entry in in_window),
        total_calories=sum(entry.calories for entry in in_window),
    )


def completed_count(completed: Iterable[CompletedWorkout], workout_id: str) -> int:
    """How many times a catalog workout has been completed."""
    return sum(1 for entry in completed if entry.workout_id == workout_id)


def recent_completed_workouts(
    completed: Iterable[CompletedWorkout], limit: int = 5
) -> list[CompletedWorkout]:
    """Most recent log entries, newest first."""
    ordered = sorted(completed, key=lambda entry: entry.date, reverse=True)
    return ordered[:limit]


def filter_workouts(
    workouts: Sequence[Workout],
    category: str = ALL_CATEGORIES,
    query: str = "",
) -> list[Workout]:
    """Filter the catalog by category and free-text search.

    The search is case-insensitive and matches the workout name or the
    name of any of its exercises. Catalog order is preserved.
    """
    result = list(workouts)
    if category and category != ALL_CATEGORIES:
        result = [workout for workout in result if workout.category == category]
    if query:
        needle = query.lower()
        result = [
            workout
            for workout in result
            if needle in workout.name.lower()
            or any(needle in name.lower() for name in workout.exercise_names())
        ]
    return result


def build_exercise_results(workout: Workout) -> list[Exercise]:
    """Session template for performing a workout.

    Every exercise gets ``sets`` copies of its planned reps and load, to be
    adjusted as sets are performed. Missing reps or weight become 0.
    """
    results = []
    for exercise in workout.exercises:
        planned = SetResult(reps=exercise.reps or 0, weight=exercise.weight or 0)
        results.append(replace(exercise, completed_sets=[planned] * exercise.sets))
    return results
