"""CollectionKey value object - storage key of each top-level collection."""

from enum import Enum


class CollectionKey(str, Enum):
    """Top-level collections owned by the store, one storage key each."""

    WORKOUTS = "workouts"
    COMPLETED_WORKOUTS = "completedWorkouts"
    MEALS = "meals"
    CONSUMED_MEALS = "consumedMeals"
    MEASUREMENTS = "measurements"
    HABITS = "habits"
    USER = "user"
    DAILY_CALORIES = "dailyCalories"
