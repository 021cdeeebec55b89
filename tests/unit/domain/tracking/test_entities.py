"""Unit tests for tracking entities."""

from datetime import datetime

import pytest

from fittrack.domain.tracking.core.entities import (
    CompletedWorkout,
    ConsumedMeal,
    Exercise,
    Habit,
    HabitDraft,
    Meal,
    UserProfile,
    Workout,
    WorkoutDraft,
)
from fittrack.domain.tracking.core.exceptions import InvalidHabitError


@pytest.fixture
def workout() -> Workout:
    return Workout(
        id="w1",
        name="Leg Day",
        category="strength",
        duration=40,
        difficulty="intermediate",
        calories=300,
        exercises=[
            Exercise(id="e1", name="Squats", sets=3, reps=10, weight=60),
            Exercise(id="e2", name="Plank", sets=2, duration="45s"),
        ],
    )


@pytest.fixture
def meal() -> Meal:
    return Meal(
        id="m1",
        name="Oats",
        category="breakfast",
        calories=300,
        protein=10,
        carbs=50,
        fat=6,
        ingredients=["oats", "milk"],
    )


class TestHabit:
    """Test Habit invariants and mutations."""

    def test_default_week_is_empty(self) -> None:
        """Test a new habit has seven unchecked days."""
        habit = Habit(id="h1", name="Read", target=3)

        assert habit.completed == [False] * 7
        assert habit.days_completed() == 0

    @pytest.mark.parametrize("target", [0, 8, -1])
    def test_target_out_of_range_raises(self, target: int) -> None:
        """Test target must be within 1-7."""
        with pytest.raises(InvalidHabitError):
            Habit(id="h1", name="Read", target=target)

    def test_week_length_must_be_seven(self) -> None:
        """Test completion week length is enforced."""
        with pytest.raises(InvalidHabitError):
            Habit(id="h1", name="Read", target=3, completed=[True, False])

    def test_from_draft_discards_completion(self) -> None:
        """Test drafts never carry completion data into the habit."""
        draft = HabitDraft(name="Stretch", target=4, icon="yoga", completed=[True] * 7)

        habit = Habit.from_draft("h9", draft)

        assert habit.id == "h9"
        assert habit.icon == "yoga"
        assert habit.completed == [False] * 7

    def test_set_day(self) -> None:
        """Test toggling a single day."""
        habit = Habit(id="h1", name="Read", target=3)

        habit.set_day(2, True)

        assert habit.completed == [False, False, True, False, False, False, False]
        assert habit.is_day_completed(2) is True

    def test_set_day_out_of_range(self) -> None:
        """Test day index outside 0-6 raises IndexError."""
        habit = Habit(id="h1", name="Read", target=3)

        with pytest.raises(IndexError):
            habit.set_day(7, True)

    def test_edit_details_keeps_completion(self) -> None:
        """Test editing details preserves this week's check-ins."""
        habit = Habit(id="h1", name="Read", target=3, completed=[True, True] + [False] * 5)

        habit.edit_details(name="Read 20 pages", target=5)

        assert habit.name == "Read 20 pages"
        assert habit.target == 5
        assert habit.days_completed() == 2

    def test_edit_details_validates_target(self) -> None:
        """Test invalid target is rejected without partial changes."""
        habit = Habit(id="h1", name="Read", target=3)

        with pytest.raises(InvalidHabitError):
            habit.edit_details(name="Other", target=9)

        assert habit.name == "Read"
        assert habit.target == 3


class TestWorkout:
    """Test Workout and CompletedWorkout."""

    def test_from_draft_copies_exercises(self, workout: Workout) -> None:
        """Test the catalog entry does not share the draft's exercise list."""
        draft = WorkoutDraft(
            name="Copy",
            category="core",
            duration=10,
            difficulty="beginner",
            calories=80,
            exercises=workout.exercises,
        )

        created = Workout.from_draft("w2", draft)
        draft.exercises[0].name = "Changed"

        assert created.exercises[0].name == "Squats"
        assert created.exercise_names() == ["Squats", "Plank"]

    def test_negative_sets_rejected(self) -> None:
        """Test exercise sets cannot be negative."""
        with pytest.raises(ValueError):
            Exercise(id="e", name="Bad", sets=-1)

    def test_snapshot_uses_catalog_exercises_when_no_results(self, workout: Workout) -> None:
        """Test empty results fall back to the workout's exercises."""
        when = datetime(2025, 10, 20, 7, 0)

        entry = CompletedWorkout.snapshot("c1", workout, when, [])

        assert entry.workout_id == "w1"
        assert entry.workout_name == "Leg Day"
        assert entry.duration == 40
        assert entry.calories == 300
        assert entry.date == when
        assert [e.name for e in entry.exercises] == ["Squats", "Plank"]
        assert entry.exercises is not workout.exercises

    def test_snapshot_keeps_given_results(self, workout: Workout) -> None:
        """Test performed exercises are recorded as given."""
        performed = [Exercise(id="e1", name="Squats", sets=1, reps=5)]

        entry = CompletedWorkout.snapshot("c1", workout, datetime(2025, 10, 20), performed)

        assert len(entry.exercises) == 1
        assert entry.exercises[0].sets == 1


class TestConsumedMeal:
    """Test ConsumedMeal snapshots."""

    def test_snapshot_scales_by_quantity(self, meal: Meal) -> None:
        """Test calories and macros are multiplied by quantity."""
        entry = ConsumedMeal.snapshot("c1", meal, datetime(2025, 10, 22, 8), quantity=1.5)

        assert entry.meal_name == "Oats"
        assert entry.calories == 450
        assert entry.protein == 15
        assert entry.carbs == 75
        assert entry.fat == 9
        assert entry.quantity == 1.5

    def test_negative_quantity_rejected(self, meal: Meal) -> None:
        with pytest.raises(ValueError):
            ConsumedMeal.snapshot("c1", meal, datetime(2025, 10, 22), quantity=-1)


class TestUserProfile:
    """Test UserProfile merge."""

    def test_merge_known_keys(self) -> None:
        """Test shallow merge keeps unspecified fields."""
        user = UserProfile(name="Alex", goal="Build Muscle", weight=75, height=180, age=28)

        merged = user.merge({"weight": 74.2, "nickname": "ignored"})

        assert merged.weight == 74.2
        assert merged.name == "Alex"
        assert not hasattr(merged, "nickname")
        assert user.weight == 75
