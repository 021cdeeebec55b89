"""Time-bucketed chart series for the progress screen."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence, Union

from fittrack.domain.shared.types import Period, SeriesMetric
from fittrack.domain.tracking.core.entities import (
    CompletedWorkout,
    ConsumedMeal,
    MeasurementEntry,
)

from .periods import PeriodBucket, build_buckets

SeriesSource = Union[
    Sequence[CompletedWorkout], Sequence[ConsumedMeal], Sequence[MeasurementEntry]
]


@dataclass(frozen=True)
class ChartSeries:
    """Index-aligned axis labels and values."""

    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.labels)


def _workout_count(bucket: PeriodBucket, source: Sequence[CompletedWorkout]) -> float:
    return sum(1 for entry in source if bucket.contains(entry.date))


def _calories_consumed(bucket: PeriodBucket, source: Sequence[ConsumedMeal]) -> float:
    return sum(entry.calories for entry in source if bucket.contains(entry.date))


def _weight_closest_match(bucket: PeriodBucket, source: Sequence[MeasurementEntry]) -> float:
    # Nearest neighbour, not interpolation; min() keeps the first of equal distances
    if not source:
        return 0
    closest = min(
        source,
        key=lambda entry: abs((entry.date - bucket.representative).total_seconds()),
    )
    return closest.value


_METRICS = {
    SeriesMetric.WORKOUT_COUNT: _workout_count,
    SeriesMetric.CALORIES_CONSUMED: _calories_consumed,
    SeriesMetric.WEIGHT_CLOSEST_MATCH: _weight_closest_match,
}


def series_for_period(
    metric: Union[SeriesMetric, str],
    period: Union[Period, str],
    reference: datetime,
    source: SeriesSource,
) -> ChartSeries:
    """Compute one chart series over the buckets of a period.

    Args:
        metric: What to compute per bucket. ``workoutCount`` expects
            completed workouts, ``caloriesConsumed`` consumed meals and
            ``weightClosestMatch`` the weight measurement series
        period: week, month or sixMonths
        reference: End of the charted range
        source: Entries for the metric

    Returns:
        ChartSeries: One label/value pair per bucket, oldest first

    Example:
        >>> series_for_period("weightClosestMatch", "week", now, []).values
        [0, 0, 0, 0, 0, 0, 0]
    """
    compute = _METRICS[SeriesMetric(metric)]
    buckets = build_buckets(period, reference)
    source = list(source)
    return ChartSeries(
        labels=[bucket.label for bucket in buckets],
        values=[compute(bucket, source) for bucket in buckets],
    )
