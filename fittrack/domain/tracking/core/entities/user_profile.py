"""UserProfile entity - the single user's biometric data and goal."""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass
class UserProfile:
    """User profile.

    Attributes:
        name: Display name
        goal: Free-form goal (e.g. "Build Muscle")
        weight: Weight in kg
        height: Height in cm
        age: Age in years
    """

    name: str
    goal: str
    weight: float
    height: float
    age: int

    def merge(self, partial: Mapping[str, Any]) -> "UserProfile":
        """Return a copy with the known keys of ``partial`` applied.

        Unknown keys are ignored; absent keys keep their current value.
        """
        known = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({key: value for key, value in partial.items() if key in known})
        return UserProfile(**values)
