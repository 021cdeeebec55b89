"""FitnessStore - single source of truth for the tracking collections.

The store owns workouts, the completed-workout log, meals, the consumed-meal
log, measurement series, habits, the user profile and the daily calorie
target. Every mutation is synchronous. Unknown ids and unknown measurement
types are silent no-ops: nothing changes, nothing is raised, and the return
value tells the caller whether anything happened.

After each applied mutation the store publishes one ``CollectionChanged``
event carrying the full document of the affected collection. The store
itself never performs I/O; persistence subscribes to those events.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from fittrack.domain.shared.datetime_helpers import to_local_naive
from fittrack.domain.shared.ports.event_bus import IEventBus

from .core.entities import (
    CompletedWorkout,
    ConsumedMeal,
    Exercise,
    Habit,
    HabitDraft,
    Meal,
    MealDraft,
    MeasurementEntry,
    UserProfile,
    Workout,
    WorkoutDraft,
)
from .core.events import CollectionChanged
from .core.exceptions import InvalidMeasurementTypeError
from .core.value_objects import CollectionKey, EntityIdGenerator, MeasurementType
from .persistence.codec import decode_collection, encode_collection
from .seed import (
    DEFAULT_DAILY_CALORIES,
    seed_habits,
    seed_meals,
    seed_measurements,
    seed_user,
    seed_workouts,
)

logger = logging.getLogger(__name__)

Measurements = dict[MeasurementType, list[MeasurementEntry]]


@dataclass(frozen=True)
class StoreSnapshot:
    """Point-in-time deep copy of every collection, for the query layer."""

    workouts: list[Workout]
    completed_workouts: list[CompletedWorkout]
    meals: list[Meal]
    consumed_meals: list[ConsumedMeal]
    measurements: Measurements
    habits: list[Habit]
    user: UserProfile
    daily_calories: int


class FitnessStore:
    """In-memory store of all tracking collections.

    Example:
        >>> bus = InMemoryEventBus()
        >>> store = FitnessStore(event_bus=bus)
        >>> workout = store.add_workout(WorkoutDraft(
        ...     name="Leg Day", category="strength", duration=50,
        ...     difficulty="advanced", calories=420,
        ... ))
        >>> store.complete_workout(workout.id) is not None
        True
        >>> store.complete_workout("missing") is None
        True
    """

    def __init__(
        self,
        *,
        workouts: Optional[list[Workout]] = None,
        completed_workouts: Optional[list[CompletedWorkout]] = None,
        meals: Optional[list[Meal]] = None,
        consumed_meals: Optional[list[ConsumedMeal]] = None,
        measurements: Optional[Measurements] = None,
        habits: Optional[list[Habit]] = None,
        user: Optional[UserProfile] = None,
        daily_calories: int = DEFAULT_DAILY_CALORIES,
        event_bus: Optional[IEventBus] = None,
        id_generator: Optional[EntityIdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize store; collections left as None start from seed data.

        Args:
            event_bus: Bus receiving ``CollectionChanged`` events
            id_generator: Source of ids for new entries
            clock: Returns "now" when a mutator is called without a date
        """
        self._workouts = list(workouts) if workouts is not None else seed_workouts()
        self._completed_workouts = list(completed_workouts or [])
        self._meals = list(meals) if meals is not None else seed_meals()
        self._consumed_meals = list(consumed_meals or [])
        self._measurements = seed_measurements()
        if measurements is not None:
            for measurement_type, entries in measurements.items():
                self._measurements[MeasurementType(measurement_type)] = list(entries)
        self._habits = list(habits) if habits is not None else seed_habits()
        self._user = user if user is not None else seed_user()
        self._daily_calories = daily_calories
        self._event_bus = event_bus
        self._ids = id_generator or EntityIdGenerator()
        self._clock = clock

    # ----------------- read access -----------------

    @property
    def workouts(self) -> list[Workout]:
        return deepcopy(self._workouts)

    @property
    def completed_workouts(self) -> list[CompletedWorkout]:
        return deepcopy(self._completed_workouts)

    @property
    def meals(self) -> list[Meal]:
        return deepcopy(self._meals)

    @property
    def consumed_meals(self) -> list[ConsumedMeal]:
        return deepcopy(self._consumed_meals)

    @property
    def measurements(self) -> Measurements:
        return deepcopy(self._measurements)

    @property
    def habits(self) -> list[Habit]:
        return deepcopy(self._habits)

    @property
    def user(self) -> UserProfile:
        return deepcopy(self._user)

    @property
    def daily_calories(self) -> int:
        return self._daily_calories

    def snapshot(self) -> StoreSnapshot:
        """Deep copy of every collection."""
        return StoreSnapshot(
            workouts=self.workouts,
            completed_workouts=self.completed_workouts,
            meals=self.meals,
            consumed_meals=self.consumed_meals,
            measurements=self.measurements,
            habits=self.habits,
            user=self.user,
            daily_calories=self._daily_calories,
        )

    def get_workout(self, workout_id: str) -> Optional[Workout]:
        workout = self._find(self._workouts, workout_id)
        return deepcopy(workout) if workout else None

    def get_meal(self, meal_id: str) -> Optional[Meal]:
        meal = self._find(self._meals, meal_id)
        return deepcopy(meal) if meal else None

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        habit = self._find(self._habits, habit_id)
        return deepcopy(habit) if habit else None

    # ----------------- workouts -----------------

    def add_workout(self, draft: WorkoutDraft) -> Workout:
        """Add a workout to the catalog under a fresh id.

        Returns:
            Workout: Copy of the stored catalog entry
        """
        workout = Workout.from_draft(self._ids.next_id(), draft)
        self._workouts.append(workout)
        self._changed(CollectionKey.WORKOUTS)
        return deepcopy(workout)

    def update_workout(self, workout: Workout) -> bool:
        """Replace the catalog entry with the same id. No-op if absent."""
        if not self._replace(self._workouts, deepcopy(workout)):
            logger.debug("Workout not found for update", extra={"workout_id": workout.id})
            return False
        self._changed(CollectionKey.WORKOUTS)
        return True

    def delete_workout(self, workout_id: str) -> bool:
        """Remove a catalog entry. Completed-workout history is left untouched."""
        if not self._remove(self._workouts, workout_id):
            logger.debug("Workout not found for delete", extra={"workout_id": workout_id})
            return False
        self._changed(CollectionKey.WORKOUTS)
        return True

    def complete_workout(
        self,
        workout_id: str,
        date: Optional[datetime] = None,
        exercise_results: Optional[Sequence[Exercise]] = None,
    ) -> Optional[CompletedWorkout]:
        """Log a completed workout.

        Args:
            workout_id: Catalog workout being completed
            date: Completion time (defaults to now)
            exercise_results: Performed exercises; when empty the catalog
                exercise list is recorded instead

        Returns:
            Optional[CompletedWorkout]: New log entry, None if the workout
            does not exist
        """
        workout = self._find(self._workouts, workout_id)
        if workout is None:
            logger.debug("Workout not found for completion", extra={"workout_id": workout_id})
            return None

        entry = CompletedWorkout.snapshot(
            entry_id=self._ids.next_id(),
            workout=workout,
            date=self._resolve_date(date),
            exercise_results=list(exercise_results or []),
        )
        self._completed_workouts.append(entry)
        logger.info(
            "Workout completed",
            extra={"workout_id": workout_id, "entry_id": entry.id, "calories": entry.calories},
        )
        self._changed(CollectionKey.COMPLETED_WORKOUTS)
        return deepcopy(entry)

    # ----------------- meals -----------------

    def add_meal(self, draft: MealDraft) -> Meal:
        """Add a meal to the catalog under a fresh id."""
        meal = Meal.from_draft(self._ids.next_id(), draft)
        self._meals.append(meal)
        self._changed(CollectionKey.MEALS)
        return deepcopy(meal)

    def update_meal(self, meal: Meal) -> bool:
        """Replace the catalog entry with the same id. No-op if absent."""
        if not self._replace(self._meals, deepcopy(meal)):
            logger.debug("Meal not found for update", extra={"meal_id": meal.id})
            return False
        self._changed(CollectionKey.MEALS)
        return True

    def delete_meal(self, meal_id: str) -> bool:
        """Remove a catalog entry. Consumed-meal history is left untouched."""
        if not self._remove(self._meals, meal_id):
            logger.debug("Meal not found for delete", extra={"meal_id": meal_id})
            return False
        self._changed(CollectionKey.MEALS)
        return True

    def consume_meal(
        self,
        meal_id: str,
        date: Optional[datetime] = None,
        quantity: float = 1,
    ) -> Optional[ConsumedMeal]:
        """Log a consumed meal, scaling calories and macros by quantity.

        Returns:
            Optional[ConsumedMeal]: New log entry, None if the meal does not exist
        """
        meal = self._find(self._meals, meal_id)
        if meal is None:
            logger.debug("Meal not found for consumption", extra={"meal_id": meal_id})
            return None

        entry = ConsumedMeal.snapshot(
            entry_id=self._ids.next_id(),
            meal=meal,
            date=self._resolve_date(date),
            quantity=quantity,
        )
        self._consumed_meals.append(entry)
        self._changed(CollectionKey.CONSUMED_MEALS)
        return deepcopy(entry)

    # ----------------- measurements -----------------

    def add_measurement(
        self,
        measurement_type: Union[MeasurementType, str],
        value: float,
        date: Optional[datetime] = None,
    ) -> Optional[MeasurementEntry]:
        """Append a value to a measurement series.

        Returns:
            Optional[MeasurementEntry]: New entry, None if the type is not tracked
        """
        try:
            resolved = MeasurementType.parse(measurement_type)
        except InvalidMeasurementTypeError as e:
            logger.debug("Unknown measurement type ignored", extra={"measurement_type": e.key})
            return None

        entry = MeasurementEntry(id=self._ids.next_id(), value=value, date=self._resolve_date(date))
        self._measurements[resolved].append(entry)
        self._changed(CollectionKey.MEASUREMENTS)
        return entry

    # ----------------- habits -----------------

    def add_habit(self, draft: HabitDraft) -> Habit:
        """Add a habit under a fresh id with an empty completion week.

        Any completion data on the draft is discarded.

        Raises:
            InvalidHabitError: If the draft target is outside 1-7
        """
        habit = Habit.from_draft(self._ids.next_id(), draft)
        self._habits.append(habit)
        self._changed(CollectionKey.HABITS)
        return deepcopy(habit)

    def update_habit(self, habit_id: str, day_index: int, completed: bool) -> bool:
        """Set one day of a habit's completion week.

        No-op if the habit does not exist or day_index is outside 0-6.
        """
        habit = self._find(self._habits, habit_id)
        if habit is None:
            logger.debug("Habit not found for update", extra={"habit_id": habit_id})
            return False
        try:
            habit.set_day(day_index, completed)
        except IndexError:
            logger.debug(
                "Habit day index out of range",
                extra={"habit_id": habit_id, "day_index": day_index},
            )
            return False
        self._changed(CollectionKey.HABITS)
        return True

    def edit_habit_details(
        self,
        habit_id: str,
        name: Optional[str] = None,
        target: Optional[int] = None,
        icon: Optional[str] = None,
    ) -> bool:
        """Edit name, target or icon of a habit, keeping this week's check-ins.

        Raises:
            InvalidHabitError: If the new target is outside 1-7
        """
        habit = self._find(self._habits, habit_id)
        if habit is None:
            logger.debug("Habit not found for edit", extra={"habit_id": habit_id})
            return False
        habit.edit_details(name=name, target=target, icon=icon)
        self._changed(CollectionKey.HABITS)
        return True

    def delete_habit(self, habit_id: str) -> bool:
        if not self._remove(self._habits, habit_id):
            logger.debug("Habit not found for delete", extra={"habit_id": habit_id})
            return False
        self._changed(CollectionKey.HABITS)
        return True

    # ----------------- user & targets -----------------

    def update_user(
        self, partial: Optional[Mapping[str, Any]] = None, **fields: Any
    ) -> UserProfile:
        """Shallow-merge fields into the user profile.

        Accepts a mapping, keyword arguments, or both (keywords win).
        Unknown keys are ignored.
        """
        changes = dict(partial or {})
        changes.update(fields)
        self._user = self._user.merge(changes)
        self._changed(CollectionKey.USER)
        return deepcopy(self._user)

    def update_daily_calories(self, value: int) -> None:
        self._daily_calories = value
        self._changed(CollectionKey.DAILY_CALORIES)

    # ----------------- persistence documents -----------------

    def collection_document(self, key: Union[CollectionKey, str]) -> Any:
        """JSON-compatible document of one collection."""
        key = CollectionKey(key)
        return encode_collection(key, self._collection_value(key))

    def restore(self, key: Union[CollectionKey, str], document: Any) -> None:
        """Replace a collection with a stored document. Publishes nothing.

        Raises:
            CorruptDocumentError: If the document cannot be decoded
        """
        key = CollectionKey(key)
        value = decode_collection(key, document)
        if key is CollectionKey.WORKOUTS:
            self._workouts = value
        elif key is CollectionKey.COMPLETED_WORKOUTS:
            self._completed_workouts = value
        elif key is CollectionKey.MEALS:
            self._meals = value
        elif key is CollectionKey.CONSUMED_MEALS:
            self._consumed_meals = value
        elif key is CollectionKey.MEASUREMENTS:
            self._measurements = value
        elif key is CollectionKey.HABITS:
            self._habits = value
        elif key is CollectionKey.USER:
            self._user = value
        else:
            self._daily_calories = value

    def _collection_value(self, key: CollectionKey) -> Any:
        return {
            CollectionKey.WORKOUTS: self._workouts,
            CollectionKey.COMPLETED_WORKOUTS: self._completed_workouts,
            CollectionKey.MEALS: self._meals,
            CollectionKey.CONSUMED_MEALS: self._consumed_meals,
            CollectionKey.MEASUREMENTS: self._measurements,
            CollectionKey.HABITS: self._habits,
            CollectionKey.USER: self._user,
            CollectionKey.DAILY_CALORIES: self._daily_calories,
        }[key]

    # ----------------- helpers -----------------

    def _changed(self, key: CollectionKey) -> None:
        if self._event_bus is None:
            return
        self._event_bus.publish(CollectionChanged.create(key.value, self.collection_document(key)))

    def _resolve_date(self, date: Optional[datetime]) -> datetime:
        if date is not None:
            return to_local_naive(date)
        return self._clock() if self._clock else datetime.now()

    @staticmethod
    def _find(items: list[Any], item_id: str) -> Optional[Any]:
        return next((item for item in items if item.id == item_id), None)

    @staticmethod
    def _replace(items: list[Any], replacement: Any) -> bool:
        for index, item in enumerate(items):
            if item.id == replacement.id:
                items[index] = replacement
                return True
        return False

    @staticmethod
    def _remove(items: list[Any], item_id: str) -> bool:
        for index, item in enumerate(items):
            if item.id == item_id:
                del items[index]
                return True
        return False
