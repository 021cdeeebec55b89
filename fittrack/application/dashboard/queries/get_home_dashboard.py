"""Get home dashboard query - today's numbers for the home screen."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from fittrack.domain.analytics import (
    NutritionTotals,
    WorkoutWeekSummary,
    calorie_progress_percentage,
    daily_nutrition_summary,
    habit_day_completion_rate,
    remaining_calories,
    today_index,
    weekly_workout_summary,
)
from fittrack.domain.shared.datetime_helpers import to_local_naive
from fittrack.domain.tracking.core.entities import Habit, Workout
from fittrack.domain.tracking.store import FitnessStore

logger = logging.getLogger(__name__)

SUGGESTED_WORKOUTS = 3


@dataclass(frozen=True)
class HabitProgress:
    """Habit with its completion rate for the current week."""

    habit: Habit
    completion_rate: int
    completed_today: bool


@dataclass(frozen=True)
class HomeDashboard:
    """
    Home screen read model.

    Attributes:
        user_name: Greeting name
        week: Workouts and calories burned since Sunday
        nutrition: Today's consumed calories and macros
        daily_calories: Daily calorie target
        remaining_calories: Target minus consumed, negative when over
        over_target: True once consumption exceeds the target
        calorie_progress: Progress bar fill (0-100)
        suggested_workouts: First catalog workouts
        habits: Habits with their weekly completion rate
    """

    user_name: str
    week: WorkoutWeekSummary
    nutrition: NutritionTotals
    daily_calories: int
    remaining_calories: float
    over_target: bool
    calorie_progress: float
    suggested_workouts: list[Workout]
    habits: list[HabitProgress]


@dataclass(frozen=True)
class GetHomeDashboardQuery:
    """
    Query: Get the home dashboard.

    Attributes:
        reference: "Now" for the dashboard (if None, defaults to now in handler)
    """

    reference: Optional[datetime] = None


class GetHomeDashboardQueryHandler:
    """Handler for GetHomeDashboardQuery."""

    def __init__(self, store: FitnessStore):
        self._store = store

    async def handle(self, query: GetHomeDashboardQuery) -> HomeDashboard:
        """
        Execute query against a store snapshot.

        Args:
            query: GetHomeDashboardQuery

        Returns:
            HomeDashboard with weekly and daily aggregates

        Example:
            >>> handler = GetHomeDashboardQueryHandler(store)
            >>> dashboard = await handler.handle(GetHomeDashboardQuery())
            >>> dashboard.calorie_progress <= 100
            True
        """
        reference = to_local_naive(query.reference) if query.reference else datetime.now()
        snapshot = self._store.snapshot()

        week = weekly_workout_summary(snapshot.completed_workouts, reference)
        nutrition = daily_nutrition_summary(snapshot.consumed_meals, reference)
        remaining = remaining_calories(snapshot.daily_calories, nutrition.calories)
        day = today_index(reference)

        dashboard = HomeDashboard(
            user_name=snapshot.user.name,
            week=week,
            nutrition=nutrition,
            daily_calories=snapshot.daily_calories,
            remaining_calories=remaining,
            over_target=remaining < 0,
            calorie_progress=calorie_progress_percentage(
                nutrition.calories, snapshot.daily_calories
            ),
            suggested_workouts=snapshot.workouts[:SUGGESTED_WORKOUTS],
            habits=[
                HabitProgress(
                    habit=habit,
                    completion_rate=habit_day_completion_rate(habit),
                    completed_today=habit.is_day_completed(day),
                )
                for habit in snapshot.habits
            ],
        )

        logger.info(
            "Home dashboard calculated",
            extra={
                "date": reference.date().isoformat(),
                "workouts_this_week": week.count,
                "calories_consumed": nutrition.calories,
            },
        )

        return dashboard
