"""Value objects for the tracking context."""

from .categories import Difficulty, MealCategory, WorkoutCategory
from .collection_key import CollectionKey
from .entity_id import EntityIdGenerator
from .measurement_type import MeasurementType

__all__ = [
    "CollectionKey",
    "Difficulty",
    "EntityIdGenerator",
    "MealCategory",
    "MeasurementType",
    "WorkoutCategory",
]
