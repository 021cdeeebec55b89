"""Catalog category and difficulty enums.

Entities keep these as plain strings so user-defined categories survive a
load/save round trip; the enums name the values the app ships with and are
used for filtering.
"""

from enum import Enum


class WorkoutCategory(str, Enum):
    """Built-in workout categories."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    CORE = "core"
    FLEXIBILITY = "flexibility"


class Difficulty(str, Enum):
    """Workout difficulty levels."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class MealCategory(str, Enum):
    """Meal categories (time of day)."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
