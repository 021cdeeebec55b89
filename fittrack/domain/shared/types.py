"""Shared domain types used across multiple domains."""

from enum import Enum


class Period(str, Enum):
    """Reporting period for summaries and chart series.

    ``SIX_MONTHS`` is what the progress screen labels as "year": it spans
    the current month and the five before it.
    """

    WEEK = "week"
    MONTH = "month"
    SIX_MONTHS = "sixMonths"

    def bucket_count(self) -> int:
        """Number of chart buckets for this period."""
        return _BUCKET_COUNTS[self]


_BUCKET_COUNTS = {
    Period.WEEK: 7,
    Period.MONTH: 4,
    Period.SIX_MONTHS: 6,
}


class SeriesMetric(str, Enum):
    """Metric plotted by a period chart series."""

    WORKOUT_COUNT = "workoutCount"
    CALORIES_CONSUMED = "caloriesConsumed"
    WEIGHT_CLOSEST_MATCH = "weightClosestMatch"
