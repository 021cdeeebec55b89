"""Mapping between tracking entities and their JSON documents.

``encode_collection`` turns the in-memory value of a collection into plain
JSON-compatible data; ``decode_collection`` validates such data and rebuilds
the entities. Both are keyed by ``CollectionKey`` so the persistence bridge
never needs to know entity types.
"""

from typing import Any, Union

from pydantic import TypeAdapter, ValidationError

from ..core.entities import (
    CompletedWorkout,
    ConsumedMeal,
    Exercise,
    Habit,
    Meal,
    MeasurementEntry,
    SetResult,
    UserProfile,
    Workout,
)
from ..core.exceptions.domain_errors import CorruptDocumentError, InvalidHabitError
from ..core.value_objects import CollectionKey, MeasurementType
from .models import (
    CompletedWorkoutDocument,
    ConsumedMealDocument,
    ExerciseDocument,
    HabitDocument,
    MealDocument,
    MeasurementEntryDocument,
    SetResultDocument,
    UserDocument,
    WorkoutDocument,
)

Measurements = dict[MeasurementType, list[MeasurementEntry]]

_WORKOUTS = TypeAdapter(list[WorkoutDocument])
_COMPLETED = TypeAdapter(list[CompletedWorkoutDocument])
_MEALS = TypeAdapter(list[MealDocument])
_CONSUMED = TypeAdapter(list[ConsumedMealDocument])
_MEASUREMENTS = TypeAdapter(dict[str, list[MeasurementEntryDocument]])
_HABITS = TypeAdapter(list[HabitDocument])
_DAILY_CALORIES = TypeAdapter(int)


def _dump(adapter: TypeAdapter, documents: Any) -> Any:
    return adapter.dump_python(documents, mode="json", by_alias=True, exclude_none=True)


# ----------------- entity -> document -----------------


def _exercise_document(exercise: Exercise) -> ExerciseDocument:
    completed_sets = None
    if exercise.completed_sets is not None:
        completed_sets = [
            SetResultDocument(reps=s.reps, weight=s.weight) for s in exercise.completed_sets
        ]
    return ExerciseDocument(
        id=exercise.id,
        name=exercise.name,
        sets=exercise.sets,
        reps=exercise.reps,
        duration=exercise.duration,
        weight=exercise.weight,
        completed_sets=completed_sets,
    )


def _workout_document(workout: Workout) -> WorkoutDocument:
    return WorkoutDocument(
        id=workout.id,
        name=workout.name,
        category=workout.category,
        duration=workout.duration,
        difficulty=workout.difficulty,
        calories=workout.calories,
        exercises=[_exercise_document(e) for e in workout.exercises],
    )


def _completed_document(entry: CompletedWorkout) -> CompletedWorkoutDocument:
    return CompletedWorkoutDocument(
        id=entry.id,
        workout_id=entry.workout_id,
        workout_name=entry.workout_name,
        date=entry.date,
        duration=entry.duration,
        calories=entry.calories,
        exercises=[_exercise_document(e) for e in entry.exercises],
    )


def _meal_document(meal: Meal) -> MealDocument:
    return MealDocument(
        id=meal.id,
        name=meal.name,
        category=meal.category,
        calories=meal.calories,
        protein=meal.protein,
        carbs=meal.carbs,
        fat=meal.fat,
        ingredients=list(meal.ingredients),
    )


def _consumed_document(entry: ConsumedMeal) -> ConsumedMealDocument:
    return ConsumedMealDocument(
        id=entry.id,
        meal_id=entry.meal_id,
        meal_name=entry.meal_name,
        date=entry.date,
        calories=entry.calories,
        protein=entry.protein,
        carbs=entry.carbs,
        fat=entry.fat,
        quantity=entry.quantity,
    )


def _habit_document(habit: Habit) -> HabitDocument:
    return HabitDocument(
        id=habit.id,
        name=habit.name,
        target=habit.target,
        icon=habit.icon,
        completed=list(habit.completed),
    )


def encode_collection(key: Union[CollectionKey, str], value: Any) -> Any:
    """Serialize a collection to JSON-compatible data.

    Args:
        key: Collection key
        value: In-memory collection (entity list, measurement mapping,
            UserProfile or calorie target)

    Returns:
        Any: Plain lists/dicts/numbers/strings
    """
    key = CollectionKey(key)
    if key is CollectionKey.WORKOUTS:
        return _dump(_WORKOUTS, [_workout_document(w) for w in value])
    if key is CollectionKey.COMPLETED_WORKOUTS:
        return _dump(_COMPLETED, [_completed_document(c) for c in value])
    if key is CollectionKey.MEALS:
        return _dump(_MEALS, [_meal_document(m) for m in value])
    if key is CollectionKey.CONSUMED_MEALS:
        return _dump(_CONSUMED, [_consumed_document(c) for c in value])
    if key is CollectionKey.MEASUREMENTS:
        documents = {
            measurement_type.value: [
                MeasurementEntryDocument(id=e.id, value=e.value, date=e.date) for e in entries
            ]
            for measurement_type, entries in value.items()
        }
        return _dump(_MEASUREMENTS, documents)
    if key is CollectionKey.HABITS:
        return _dump(_HABITS, [_habit_document(h) for h in value])
    if key is CollectionKey.USER:
        document = UserDocument(
            name=value.name,
            goal=value.goal,
            weight=value.weight,
            height=value.height,
            age=value.age,
        )
        return document.model_dump(mode="json", by_alias=True)
    return int(value)


# ----------------- document -> entity -----------------


def _exercise(document: ExerciseDocument) -> Exercise:
    completed_sets = None
    if document.completed_sets is not None:
        completed_sets = [SetResult(reps=s.reps, weight=s.weight) for s in document.completed_sets]
    return Exercise(
        id=document.id,
        name=document.name,
        sets=document.sets,
        reps=document.reps,
        duration=document.duration,
        weight=document.weight,
        completed_sets=completed_sets,
    )


def _decode(key: CollectionKey, document: Any) -> Any:
    if key is CollectionKey.WORKOUTS:
        return [
            Workout(
                id=d.id,
                name=d.name,
                category=d.category,
                duration=d.duration,
                difficulty=d.difficulty,
                calories=d.calories,
                exercises=[_exercise(e) for e in d.exercises],
            )
            for d in _WORKOUTS.validate_python(document)
        ]
    if key is CollectionKey.COMPLETED_WORKOUTS:
        return [
            CompletedWorkout(
                id=d.id,
                workout_id=d.workout_id,
                workout_name=d.workout_name,
                date=d.date,
                duration=d.duration,
                calories=d.calories,
                exercises=[_exercise(e) for e in d.exercises],
            )
            for d in _COMPLETED.validate_python(document)
        ]
    if key is CollectionKey.MEALS:
        return [
            Meal(
                id=d.id,
                name=d.name,
                category=d.category,
                calories=d.calories,
                protein=d.protein,
                carbs=d.carbs,
                fat=d.fat,
                ingredients=list(d.ingredients),
            )
            for d in _MEALS.validate_python(document)
        ]
    if key is CollectionKey.CONSUMED_MEALS:
        return [
            ConsumedMeal(
                id=d.id,
                meal_id=d.meal_id,
                meal_name=d.meal_name,
                date=d.date,
                calories=d.calories,
                protein=d.protein,
                carbs=d.carbs,
                fat=d.fat,
                quantity=d.quantity,
            )
            for d in _CONSUMED.validate_python(document)
        ]
    if key is CollectionKey.MEASUREMENTS:
        raw = _MEASUREMENTS.validate_python(document)
        measurements: Measurements = {measurement_type: [] for measurement_type in MeasurementType}
        for type_key, entries in raw.items():
            measurement_type = MeasurementType.lookup(type_key)
            if measurement_type is None:
                continue
            measurements[measurement_type] = [
                MeasurementEntry(id=e.id, value=e.value, date=e.date) for e in entries
            ]
        return measurements
    if key is CollectionKey.HABITS:
        return [
            Habit(
                id=d.id,
                name=d.name,
                target=d.target,
                icon=d.icon,
                completed=list(d.completed),
            )
            for d in _HABITS.validate_python(document)
        ]
    if key is CollectionKey.USER:
        d = UserDocument.model_validate(document)
        return UserProfile(name=d.name, goal=d.goal, weight=d.weight, height=d.height, age=d.age)
    return _DAILY_CALORIES.validate_python(document)


def decode_collection(key: Union[CollectionKey, str], document: Any) -> Any:
    """Validate a stored document and rebuild the collection.

    Args:
        key: Collection key
        document: JSON-compatible data as produced by ``encode_collection``

    Returns:
        Any: In-memory collection value

    Raises:
        CorruptDocumentError: If the document does not match the collection layout
    """
    key = CollectionKey(key)
    try:
        return _decode(key, document)
    except (ValidationError, InvalidHabitError, ValueError) as e:
        raise CorruptDocumentError(key.value, str(e)) from e
