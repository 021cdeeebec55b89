"""Meal entities - catalog entries and consumed-meal log entries."""

from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class MealDraft:
    """Meal data supplied by the user before an id is assigned."""

    name: str
    category: str
    calories: int
    protein: float
    carbs: float
    fat: float
    ingredients: list[str] = field(default_factory=list)


@dataclass
class Meal:
    """Meal catalog entry.

    Attributes:
        id: Unique id assigned by the store
        name: Display name
        category: breakfast, lunch, dinner or snack
        calories: Energy per serving in kcal
        protein: Protein per serving in grams
        carbs: Carbohydrates per serving in grams
        fat: Fat per serving in grams
        ingredients: Ordered ingredient lines
    """

    id: str
    name: str
    category: str
    calories: int
    protein: float
    carbs: float
    fat: float
    ingredients: list[str] = field(default_factory=list)

    @staticmethod
    def from_draft(meal_id: str, draft: MealDraft) -> "Meal":
        return Meal(
            id=meal_id,
            name=draft.name,
            category=draft.category,
            calories=draft.calories,
            protein=draft.protein,
            carbs=draft.carbs,
            fat=draft.fat,
            ingredients=deepcopy(draft.ingredients),
        )


@dataclass(frozen=True)
class ConsumedMeal:
    """Log entry for a consumed meal.

    Calories and macros are the catalog values multiplied by ``quantity``
    at consumption time.
    """

    id: str
    meal_id: str
    meal_name: str
    date: datetime
    calories: float
    protein: float
    carbs: float
    fat: float
    quantity: float = 1

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Quantity must be non-negative, got {self.quantity}")

    @staticmethod
    def snapshot(entry_id: str, meal: Meal, date: datetime, quantity: float = 1) -> "ConsumedMeal":
        """Scale a catalog meal by ``quantity`` into a log entry.

        Example:
            >>> entry = ConsumedMeal.snapshot("9", meal, now, quantity=2)
            >>> entry.calories == meal.calories * 2
            True
        """
        return ConsumedMeal(
            id=entry_id,
            meal_id=meal.id,
            meal_name=meal.name,
            date=date,
            calories=meal.calories * quantity,
            protein=meal.protein * quantity,
            carbs=meal.carbs * quantity,
            fat=meal.fat * quantity,
            quantity=quantity,
        )
