"""Get progress dashboard query - charts and totals for one period."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from fittrack.domain.analytics import (
    ChartSeries,
    PeriodSummary,
    habit_completion_rate,
    period_summary,
    recent_completed_workouts,
    series_for_period,
)
from fittrack.domain.shared.datetime_helpers import to_local_naive
from fittrack.domain.shared.types import Period, SeriesMetric
from fittrack.domain.tracking.core.entities import CompletedWorkout
from fittrack.domain.tracking.core.value_objects import MeasurementType
from fittrack.domain.tracking.store import FitnessStore

logger = logging.getLogger(__name__)

RECENT_WORKOUTS = 5


@dataclass(frozen=True)
class ProgressDashboard:
    """
    Progress screen read model.

    Attributes:
        period: Selected period
        workouts: Completed workouts per bucket
        calories: Calories consumed per bucket
        weight: Nearest recorded weight per bucket
        summary: Totals over the period's summary window
        habit_completion_rate: Average habit completion (%)
        recent_workouts: Latest completed workouts, newest first
    """

    period: Period
    workouts: ChartSeries
    calories: ChartSeries
    weight: ChartSeries
    summary: PeriodSummary
    habit_completion_rate: int
    recent_workouts: list[CompletedWorkout]


@dataclass(frozen=True)
class GetProgressDashboardQuery:
    """
    Query: Get the progress dashboard.

    Attributes:
        period: week, month or sixMonths
        reference: End of the charted range (if None, defaults to now in handler)
    """

    period: Union[Period, str] = Period.WEEK
    reference: Optional[datetime] = None


class GetProgressDashboardQueryHandler:
    """Handler for GetProgressDashboardQuery."""

    def __init__(self, store: FitnessStore):
        self._store = store

    async def handle(self, query: GetProgressDashboardQuery) -> ProgressDashboard:
        """
        Execute query against a store snapshot.

        Args:
            query: GetProgressDashboardQuery

        Returns:
            ProgressDashboard with three chart series and period totals

        Raises:
            ValueError: If the period is not week, month or sixMonths
        """
        period = Period(query.period)
        reference = to_local_naive(query.reference) if query.reference else datetime.now()
        snapshot = self._store.snapshot()

        dashboard = ProgressDashboard(
            period=period,
            workouts=series_for_period(
                SeriesMetric.WORKOUT_COUNT, period, reference, snapshot.completed_workouts
            ),
            calories=series_for_period(
                SeriesMetric.CALORIES_CONSUMED, period, reference, snapshot.consumed_meals
            ),
            weight=series_for_period(
                SeriesMetric.WEIGHT_CLOSEST_MATCH,
                period,
                reference,
                snapshot.measurements[MeasurementType.WEIGHT],
            ),
            summary=period_summary(snapshot.completed_workouts, period, reference),
            habit_completion_rate=habit_completion_rate(snapshot.habits),
            recent_workouts=recent_completed_workouts(
                snapshot.completed_workouts, RECENT_WORKOUTS
            ),
        )

        logger.info(
            "Progress dashboard calculated",
            extra={
                "period": period.value,
                "date": reference.date().isoformat(),
                "workout_count": dashboard.summary.count,
            },
        )

        return dashboard
