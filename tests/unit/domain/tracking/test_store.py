"""Unit tests for FitnessStore.

Tests focus on:
- Seed data when collections are not supplied
- Mutators and their snapshots
- Silent no-ops for unknown ids and measurement types
- Exactly one CollectionChanged per applied mutation, none for no-ops
- Snapshot isolation (callers cannot mutate store state)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List

import pytest
from freezegun import freeze_time

from fittrack.domain.tracking.core.entities import (
    Exercise,
    HabitDraft,
    MealDraft,
    WorkoutDraft,
)
from fittrack.domain.tracking.core.events import CollectionChanged
from fittrack.domain.tracking.core.exceptions import CorruptDocumentError, InvalidHabitError
from fittrack.domain.tracking.core.value_objects import CollectionKey, MeasurementType
from fittrack.domain.tracking.store import FitnessStore


def collections(events: List[CollectionChanged]) -> List[str]:
    return [event.collection for event in events]


class TestSeedData:
    """Test the store starts from built-in data."""

    def test_seed_collections(self) -> None:
        store = FitnessStore()

        assert [w.name for w in store.workouts] == [
            "Full Body Blast",
            "HIIT Cardio",
            "Core Crusher",
        ]
        assert [m.name for m in store.meals] == [
            "Protein Breakfast",
            "Grilled Chicken Salad",
            "Post-Workout Shake",
        ]
        assert len(store.habits) == 3
        assert store.completed_workouts == []
        assert store.consumed_meals == []
        assert store.daily_calories == 2000
        assert store.user.name == "Alex"
        assert all(entries == [] for entries in store.measurements.values())
        assert set(store.measurements) == set(MeasurementType)

    def test_explicit_empty_collections_are_kept(self) -> None:
        """Test passing [] does not fall back to seed data."""
        store = FitnessStore(workouts=[], meals=[], habits=[])

        assert store.workouts == []
        assert store.meals == []
        assert store.habits == []


class TestWorkoutMutations:
    """Test workout catalog and completion log."""

    def test_add_workout_assigns_id(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        draft = WorkoutDraft(
            name="Yoga Flow",
            category="flexibility",
            duration=25,
            difficulty="beginner",
            calories=120,
            exercises=[Exercise(id="y1", name="Sun Salutation", sets=3, duration="1m")],
        )

        workout = store.add_workout(draft)

        assert workout.id
        assert store.get_workout(workout.id) == workout
        assert collections(published) == ["workouts"]

    def test_update_workout(self, store: FitnessStore, published: List[CollectionChanged]) -> None:
        workout = store.workouts[0]
        workout.name = "Full Body Blast v2"

        assert store.update_workout(workout) is True
        assert store.workouts[0].name == "Full Body Blast v2"
        assert collections(published) == ["workouts"]

    def test_update_unknown_workout_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        workout = store.workouts[0]
        workout.id = "missing"

        assert store.update_workout(workout) is False
        assert published == []

    def test_delete_workout_keeps_history(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        """Test completed entries survive deletion of their catalog workout."""
        entry = store.complete_workout("1")

        assert store.delete_workout("1") is True
        assert store.get_workout("1") is None
        assert [c.id for c in store.completed_workouts] == [entry.id]
        assert store.completed_workouts[0].workout_name == "Full Body Blast"
        assert collections(published) == ["completedWorkouts", "workouts"]

    def test_delete_unknown_workout_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        assert store.delete_workout("missing") is False
        assert len(store.workouts) == 3
        assert published == []

    def test_complete_workout_snapshots_catalog(
        self, store: FitnessStore, reference: datetime
    ) -> None:
        entry = store.complete_workout("2")

        assert entry is not None
        assert entry.workout_id == "2"
        assert entry.workout_name == "HIIT Cardio"
        assert entry.duration == 30
        assert entry.calories == 400
        assert entry.date == reference
        assert [e.name for e in entry.exercises] == [
            "Burpees",
            "Mountain Climbers",
            "Jump Rope",
            "High Knees",
        ]

    def test_complete_workout_with_results_and_date(self, store: FitnessStore) -> None:
        when = datetime(2025, 10, 19, 0, 0)
        results = [Exercise(id="e1", name="Push-ups", sets=1, reps=20)]

        entry = store.complete_workout("1", date=when, exercise_results=results)

        assert entry.date == when
        assert [e.reps for e in entry.exercises] == [20]

    def test_complete_workout_converts_aware_date(self, store: FitnessStore) -> None:
        """Test aware timestamps are stored as naive local time."""
        when = datetime(2025, 10, 19, 12, 0, tzinfo=timezone.utc)

        entry = store.complete_workout("1", date=when)

        assert entry.date.tzinfo is None
        assert entry.date == when.astimezone().replace(tzinfo=None)

    def test_complete_unknown_workout_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        assert store.complete_workout("missing") is None
        assert store.completed_workouts == []
        assert published == []

    def test_catalog_edit_does_not_rewrite_history(self, store: FitnessStore) -> None:
        store.complete_workout("1")
        workout = store.get_workout("1")
        workout.calories = 999

        store.update_workout(workout)

        assert store.completed_workouts[0].calories == 350


class TestMealMutations:
    """Test meal catalog and consumption log."""

    def test_add_meal(self, store: FitnessStore, published: List[CollectionChanged]) -> None:
        meal = store.add_meal(
            MealDraft(
                name="Greek Yogurt",
                category="snack",
                calories=150,
                protein=15,
                carbs=10,
                fat=4,
                ingredients=["200g yogurt"],
            )
        )

        assert store.get_meal(meal.id).ingredients == ["200g yogurt"]
        assert collections(published) == ["meals"]

    def test_consume_meal_scales_by_quantity(
        self, store: FitnessStore, published: List[CollectionChanged], reference: datetime
    ) -> None:
        entry = store.consume_meal("1", quantity=2)

        assert entry.meal_name == "Protein Breakfast"
        assert entry.calories == 900
        assert entry.protein == 70
        assert entry.carbs == 60
        assert entry.fat == 30
        assert entry.date == reference
        assert collections(published) == ["consumedMeals"]

    def test_consume_unknown_meal_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        assert store.consume_meal("missing") is None
        assert store.consumed_meals == []
        assert published == []

    def test_update_and_delete_meal(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        meal = store.get_meal("3")
        meal.calories = 260

        assert store.update_meal(meal) is True
        assert store.delete_meal("2") is True
        assert store.delete_meal("2") is False
        assert [m.id for m in store.meals] == ["1", "3"]
        assert store.get_meal("3").calories == 260
        assert collections(published) == ["meals", "meals"]


class TestMeasurementMutations:
    """Test measurement series."""

    def test_add_measurement_appends(self, store: FitnessStore, reference: datetime) -> None:
        first = store.add_measurement("weight", 75.2, datetime(2025, 10, 20, 7))
        second = store.add_measurement(MeasurementType.WEIGHT, 74.9)

        series = store.measurements[MeasurementType.WEIGHT]
        assert [e.id for e in series] == [first.id, second.id]
        assert [e.value for e in series] == [75.2, 74.9]
        assert series[1].date == reference

    def test_unknown_type_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        """Test unknown measurement types are silently rejected."""
        assert store.add_measurement("neck", 38) is None
        assert all(entries == [] for entries in store.measurements.values())
        assert published == []

    def test_unknown_type_is_logged(
        self, store: FitnessStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="fittrack.domain.tracking.store"):
            store.add_measurement("neck", 38)

        record = next(
            r for r in caplog.records if r.getMessage() == "Unknown measurement type ignored"
        )
        assert record.measurement_type == "neck"

    def test_series_are_independent(self, store: FitnessStore) -> None:
        store.add_measurement("waist", 82)

        assert len(store.measurements[MeasurementType.WAIST]) == 1
        assert store.measurements[MeasurementType.HIPS] == []


@freeze_time("2025-10-22 15:30:00")
class TestDefaultClock:
    """Test mutators fall back to the wall clock when the store has none."""

    def test_complete_workout_uses_now(self, reference: datetime) -> None:
        entry = FitnessStore().complete_workout("1")

        assert entry.date == reference

    def test_consume_meal_uses_now(self, reference: datetime) -> None:
        entry = FitnessStore().consume_meal("1")

        assert entry.date == reference

    def test_add_measurement_uses_now(self, reference: datetime) -> None:
        entry = FitnessStore().add_measurement("weight", 75)

        assert entry.date == reference

    def test_explicit_date_wins_over_now(self) -> None:
        when = datetime(2025, 10, 19, 9, 0)

        entry = FitnessStore().add_measurement("weight", 75, when)

        assert entry.date == when


class TestHabitMutations:
    """Test habits and weekly check-ins."""

    def test_add_habit_forces_empty_week(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        habit = store.add_habit(HabitDraft(name="Meditate", target=5, completed=[True] * 7))

        assert habit.completed == [False] * 7
        assert store.get_habit(habit.id).completed == [False] * 7
        assert collections(published) == ["habits"]

    def test_add_habit_invalid_target(self, store: FitnessStore) -> None:
        with pytest.raises(InvalidHabitError):
            store.add_habit(HabitDraft(name="Meditate", target=0))

    def test_update_habit_sets_single_day(self, store: FitnessStore) -> None:
        assert store.update_habit("1", 4, True) is True

        assert store.get_habit("1").completed == [False, True, True, False, True, False, False]

    def test_update_habit_unknown_id_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        assert store.update_habit("missing", 0, True) is False
        assert published == []

    def test_update_habit_bad_index_is_noop(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        before = store.get_habit("1").completed

        assert store.update_habit("1", 7, True) is False
        assert store.update_habit("1", -1, True) is False
        assert store.get_habit("1").completed == before
        assert published == []

    def test_edit_habit_details_preserves_week(self, store: FitnessStore) -> None:
        assert store.edit_habit_details("2", name="Drink water", target=6, icon="water") is True

        habit = store.get_habit("2")
        assert habit.name == "Drink water"
        assert habit.target == 6
        assert habit.icon == "water"
        assert habit.days_completed() == 4

    def test_edit_unknown_habit_is_noop(self, store: FitnessStore) -> None:
        assert store.edit_habit_details("missing", name="x") is False

    def test_delete_habit(self, store: FitnessStore) -> None:
        assert store.delete_habit("3") is True
        assert store.delete_habit("3") is False
        assert [h.id for h in store.habits] == ["1", "2"]


class TestUserAndTargets:
    """Test user profile and calorie target."""

    def test_update_user_merges(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        user = store.update_user({"weight": 76}, goal="Lose Fat")

        assert user.weight == 76
        assert user.goal == "Lose Fat"
        assert user.height == 180
        assert store.user == user
        assert collections(published) == ["user"]

    def test_update_daily_calories(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        store.update_daily_calories(2400)

        assert store.daily_calories == 2400
        assert published[0].document == 2400


class TestSnapshots:
    """Test read access never exposes internal state."""

    def test_mutating_returned_lists_does_not_change_store(self, store: FitnessStore) -> None:
        store.workouts.clear()
        store.habits[0].completed[0] = True
        store.measurements[MeasurementType.WEIGHT].append("garbage")

        assert len(store.workouts) == 3
        assert store.get_habit("1").completed[0] is False
        assert store.measurements[MeasurementType.WEIGHT] == []

    def test_snapshot_is_point_in_time(self, store: FitnessStore) -> None:
        snapshot = store.snapshot()
        store.complete_workout("1")

        assert snapshot.completed_workouts == []
        assert len(store.snapshot().completed_workouts) == 1


class TestDocuments:
    """Test collection documents and restore."""

    def test_event_carries_full_document(
        self, store: FitnessStore, published: List[CollectionChanged], reference: datetime
    ) -> None:
        store.complete_workout("1", date=reference - timedelta(days=1))

        document = published[0].document
        assert published[0].collection == CollectionKey.COMPLETED_WORKOUTS.value
        assert document[0]["workoutId"] == "1"
        assert document[0]["workoutName"] == "Full Body Blast"
        assert document[0]["date"] == "2025-10-21T15:30:00"

    def test_restore_replaces_collection_silently(
        self, store: FitnessStore, published: List[CollectionChanged]
    ) -> None:
        store.restore("dailyCalories", 1800)
        store.restore(
            "habits",
            [{"id": "h", "name": "Walk", "target": 7, "completed": [True] * 7}],
        )

        assert store.daily_calories == 1800
        assert [h.name for h in store.habits] == ["Walk"]
        assert published == []

    def test_restore_corrupt_document_raises(self, store: FitnessStore) -> None:
        with pytest.raises(CorruptDocumentError):
            store.restore("habits", [{"id": "h", "name": "Walk", "target": 9}])

        assert len(store.habits) == 3

    def test_documents_round_trip(self, store: FitnessStore) -> None:
        """Test every collection survives collection_document -> restore."""
        store.complete_workout("1")
        store.consume_meal("2", quantity=0.5)
        store.add_measurement("weight", 75.5)
        store.add_measurement("bodyFat", 18.2)
        store.update_habit("1", 0, True)

        other = FitnessStore(workouts=[], meals=[], habits=[])
        for key in CollectionKey:
            other.restore(key, store.collection_document(key))

        assert other.snapshot() == store.snapshot()
