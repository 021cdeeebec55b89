"""MeasurementType value object - the fixed set of body measurements."""

from enum import Enum
from typing import Optional

from ..exceptions.domain_errors import InvalidMeasurementTypeError


class MeasurementType(str, Enum):
    """Body measurement series tracked by the store.

    Values are the storage keys used in the ``measurements`` document.
    """

    WEIGHT = "weight"
    BODY_FAT = "bodyFat"
    CHEST = "chest"
    WAIST = "waist"
    HIPS = "hips"
    ARMS = "arms"
    THIGHS = "thighs"

    @property
    def unit(self) -> str:
        """Display unit for the measurement."""
        if self is MeasurementType.WEIGHT:
            return "kg"
        if self is MeasurementType.BODY_FAT:
            return "%"
        return "cm"

    @classmethod
    def lookup(cls, key: "str | MeasurementType") -> Optional["MeasurementType"]:
        """Resolve a key to a type, or None if it is not tracked."""
        if isinstance(key, MeasurementType):
            return key
        try:
            return cls(key)
        except ValueError:
            return None

    @classmethod
    def parse(cls, key: str) -> "MeasurementType":
        """Resolve a key to a type.

        Raises:
            InvalidMeasurementTypeError: If the key is not tracked
        """
        measurement_type = cls.lookup(key)
        if measurement_type is None:
            raise InvalidMeasurementTypeError(key)
        return measurement_type
