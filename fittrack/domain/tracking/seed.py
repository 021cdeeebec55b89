"""Built-in data the store starts from when storage has nothing for a collection."""

from .core.entities import Exercise, Habit, Meal, MeasurementEntry, UserProfile, Workout
from .core.value_objects import Difficulty, MealCategory, MeasurementType, WorkoutCategory

DEFAULT_DAILY_CALORIES = 2000


def seed_workouts() -> list[Workout]:
    return [
        Workout(
            id="1",
            name="Full Body Blast",
            category=WorkoutCategory.STRENGTH.value,
            duration=45,
            difficulty=Difficulty.INTERMEDIATE.value,
            calories=350,
            exercises=[
                Exercise(id="e1", name="Push-ups", sets=3, reps=15, weight=0),
                Exercise(id="e2", name="Squats", sets=4, reps=12, weight=0),
                Exercise(id="e3", name="Deadlifts", sets=3, reps=10, weight=50),
                Exercise(id="e4", name="Plank", sets=3, duration="45s", weight=0),
            ],
        ),
        Workout(
            id="2",
            name="HIIT Cardio",
            category=WorkoutCategory.CARDIO.value,
            duration=30,
            difficulty=Difficulty.ADVANCED.value,
            calories=400,
            exercises=[
                Exercise(id="e5", name="Burpees", sets=3, reps=15, weight=0),
                Exercise(id="e6", name="Mountain Climbers", sets=3, duration="45s", weight=0),
                Exercise(id="e7", name="Jump Rope", sets=3, duration="1m", weight=0),
                Exercise(id="e8", name="High Knees", sets=3, duration="45s", weight=0),
            ],
        ),
        Workout(
            id="3",
            name="Core Crusher",
            category=WorkoutCategory.CORE.value,
            duration=20,
            difficulty=Difficulty.BEGINNER.value,
            calories=200,
            exercises=[
                Exercise(id="e9", name="Crunches", sets=3, reps=20, weight=0),
                Exercise(id="e10", name="Russian Twists", sets=3, reps=16, weight=5),
                Exercise(id="e11", name="Leg Raises", sets=3, reps=12, weight=0),
                Exercise(id="e12", name="Bicycle Crunches", sets=3, reps=20, weight=0),
            ],
        ),
    ]


def seed_meals() -> list[Meal]:
    return [
        Meal(
            id="1",
            name="Protein Breakfast",
            category=MealCategory.BREAKFAST.value,
            calories=450,
            protein=35,
            carbs=30,
            fat=15,
            ingredients=[
                "3 egg whites",
                "1 whole egg",
                "1/2 cup oatmeal",
                "1 banana",
                "1 tbsp peanut butter",
            ],
        ),
        Meal(
            id="2",
            name="Grilled Chicken Salad",
            category=MealCategory.LUNCH.value,
            calories=380,
            protein=40,
            carbs=15,
            fat=12,
            ingredients=[
                "150g grilled chicken breast",
                "2 cups mixed greens",
                "1/4 avocado",
                "1 tbsp olive oil",
                "1 tbsp balsamic vinegar",
            ],
        ),
        Meal(
            id="3",
            name="Post-Workout Shake",
            category=MealCategory.SNACK.value,
            calories=250,
            protein=30,
            carbs=25,
            fat=5,
            ingredients=[
                "1 scoop whey protein",
                "1 banana",
                "1 cup almond milk",
                "1 tbsp honey",
            ],
        ),
    ]


def seed_measurements() -> dict[MeasurementType, list[MeasurementEntry]]:
    return {measurement_type: [] for measurement_type in MeasurementType}


def seed_habits() -> list[Habit]:
    return [
        Habit(
            id="1",
            name="Morning Workout",
            target=5,
            completed=[False, True, True, False, False, False, False],
        ),
        Habit(
            id="2",
            name="Drink 8 glasses of water",
            target=7,
            completed=[True, True, True, True, False, False, False],
        ),
        Habit(
            id="3",
            name="Take vitamins",
            target=7,
            completed=[True, True, True, True, True, False, False],
        ),
    ]


def seed_user() -> UserProfile:
    return UserProfile(name="Alex", goal="Build Muscle", weight=75, height=180, age=28)
