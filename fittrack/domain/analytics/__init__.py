"""Aggregation functions over store snapshots.

Everything here is pure: inputs are entity sequences plus a reference
time, outputs are plain values or frozen dataclasses.
"""

from .body_metrics import (
    BMICategory,
    bmi,
    bmi_category,
    latest_measurement,
    recent_measurement_series,
)
from .habit_stats import habit_completion_rate, habit_day_completion_rate, today_index
from .nutrition_stats import (
    MacroPercentages,
    NutritionTotals,
    calorie_progress_percentage,
    daily_nutrition_summary,
    filter_meals,
    macro_breakdown_percentages,
    meal_macro_percentages,
    remaining_calories,
)
from .periods import PeriodBucket, build_buckets, period_window_start
from .rounding import round_half_up
from .series import ChartSeries, series_for_period
from .workout_stats import (
    ALL_CATEGORIES,
    PeriodSummary,
    WorkoutWeekSummary,
    build_exercise_results,
    completed_count,
    filter_workouts,
    period_summary,
    recent_completed_workouts,
    weekly_workout_summary,
)

__all__ = [
    "ALL_CATEGORIES",
    "BMICategory",
    "ChartSeries",
    "MacroPercentages",
    "NutritionTotals",
    "PeriodBucket",
    "PeriodSummary",
    "WorkoutWeekSummary",
    "bmi",
    "bmi_category",
    "build_buckets",
    "build_exercise_results",
    "calorie_progress_percentage",
    "completed_count",
    "daily_nutrition_summary",
    "filter_meals",
    "filter_workouts",
    "habit_completion_rate",
    "habit_day_completion_rate",
    "latest_measurement",
    "macro_breakdown_percentages",
    "meal_macro_percentages",
    "period_summary",
    "period_window_start",
    "recent_completed_workouts",
    "recent_measurement_series",
    "remaining_calories",
    "round_half_up",
    "series_for_period",
    "today_index",
    "weekly_workout_summary",
]
