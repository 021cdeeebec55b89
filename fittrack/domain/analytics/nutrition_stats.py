"""Nutrition statistics: daily totals, calorie budget and macro split."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from fittrack.domain.shared.datetime_helpers import same_day, to_local_naive
from fittrack.domain.tracking.core.entities import ConsumedMeal, Meal

from .rounding import round_half_up
from .workout_stats import ALL_CATEGORIES


@dataclass(frozen=True)
class NutritionTotals:
    """Summed calories and macros."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


@dataclass(frozen=True)
class MacroPercentages:
    """Share of each macro in the gram total, as rounded percentages.

    Components are rounded independently and need not sum to 100.
    """

    protein: int
    carbs: int
    fat: int


def daily_nutrition_summary(
    consumed: Iterable[ConsumedMeal], reference: datetime
) -> NutritionTotals:
    """Sum calories and macros of entries on the reference calendar day.

    Returns zeros when nothing was logged that day.
    """
    reference = to_local_naive(reference)
    today = [entry for entry in consumed if same_day(entry.date, reference)]
    return NutritionTotals(
        calories=sum(entry.calories for entry in today),
        protein=sum(entry.protein for entry in today),
        carbs=sum(entry.carbs for entry in today),
        fat=sum(entry.fat for entry in today),
    )


def remaining_calories(daily_target: float, consumed_today: float) -> float:
    """Calories left for today; negative once the target is exceeded."""
    return daily_target - consumed_today


def calorie_progress_percentage(consumed_today: float, daily_target: float) -> float:
    """Progress bar fill: consumed share of the target, capped at 100.

    Returns 0 for a non-positive target.
    """
    if daily_target <= 0:
        return 0.0
    return min(consumed_today / daily_target * 100, 100.0)


def macro_breakdown_percentages(protein: float, carbs: float, fat: float) -> MacroPercentages:
    """Percentage split of protein, carbs and fat by grams.

    Returns all zeros when the three macros sum to zero.

    Example:
        >>> macro_breakdown_percentages(35, 30, 15)
        MacroPercentages(protein=44, carbs=38, fat=19)
    """
    total = protein + carbs + fat
    if total == 0:
        return MacroPercentages(protein=0, carbs=0, fat=0)
    return MacroPercentages(
        protein=round_half_up(protein / total * 100),
        carbs=round_half_up(carbs / total * 100),
        fat=round_half_up(fat / total * 100),
    )


def meal_macro_percentages(meal: Meal) -> MacroPercentages:
    return macro_breakdown_percentages(meal.protein, meal.carbs, meal.fat)


def filter_meals(meals: Sequence[Meal], category: str = ALL_CATEGORIES) -> list[Meal]:
    """Catalog meals of one category (all meals for ``"all"``)."""
    if not category or category == ALL_CATEGORIES:
        return list(meals)
    return [meal for meal in meals if meal.category == category]
