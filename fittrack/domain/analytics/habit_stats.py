"""Habit completion rates over the stored week."""

from datetime import datetime
from typing import Sequence

from fittrack.domain.shared.datetime_helpers import sunday_index, to_local_naive
from fittrack.domain.tracking.core.entities import Habit

from .rounding import round_half_up


def habit_day_completion_rate(habit: Habit) -> int:
    """Checked-in days as a percentage of the weekly target.

    Not clamped: 6 check-ins against a target of 5 gives 120.
    """
    return round_half_up(habit.days_completed() / habit.target * 100)


def habit_completion_rate(habits: Sequence[Habit]) -> int:
    """Average of per-habit ``days / target`` ratios as a rounded percentage.

    Returns 0 for an empty habit list.
    """
    if not habits:
        return 0
    total = sum(habit.days_completed() / habit.target for habit in habits)
    return round_half_up(total / len(habits) * 100)


def today_index(reference: datetime) -> int:
    """Index of the reference day in a habit week (0 = Sunday)."""
    return sunday_index(to_local_naive(reference))
