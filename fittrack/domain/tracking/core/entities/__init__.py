"""Entities for the tracking context."""

from .habit import HABIT_WEEK_DAYS, Habit, HabitDraft
from .meal import ConsumedMeal, Meal, MealDraft
from .measurement import MeasurementEntry
from .user_profile import UserProfile
from .workout import CompletedWorkout, Exercise, SetResult, Workout, WorkoutDraft

__all__ = [
    "HABIT_WEEK_DAYS",
    "CompletedWorkout",
    "ConsumedMeal",
    "Exercise",
    "Habit",
    "HabitDraft",
    "Meal",
    "MealDraft",
    "MeasurementEntry",
    "SetResult",
    "UserProfile",
    "Workout",
    "WorkoutDraft",
]
