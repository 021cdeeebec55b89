"""Habit entity - weekly habit with a one-week completion record."""

from dataclasses import dataclass, field
from typing import Optional

from ..exceptions.domain_errors import InvalidHabitError

HABIT_WEEK_DAYS = 7


def _empty_week() -> list[bool]:
    return [False] * HABIT_WEEK_DAYS


@dataclass
class HabitDraft:
    """Habit data supplied by the user before an id is assigned.

    ``completed`` is accepted for convenience but always discarded by the
    store: new habits start with an empty week.
    """

    name: str
    target: int
    icon: Optional[str] = None
    completed: Optional[list[bool]] = None


@dataclass
class Habit:
    """Habit tracked against a days-per-week target.

    ``completed`` covers the current week only, index 0 = Sunday through
    6 = Saturday. There is no history beyond that week.

    Attributes:
        id: Unique id assigned by the store
        name: Display name
        target: Required days per week (1-7)
        icon: Optional icon identifier
        completed: Seven booleans, one per weekday
    """

    id: str
    name: str
    target: int
    icon: Optional[str] = None
    completed: list[bool] = field(default_factory=_empty_week)

    def __post_init__(self) -> None:
        """Validate habit invariants.

        Raises:
            InvalidHabitError: If target is outside 1-7 or the week is not 7 days
        """
        if not 1 <= self.target <= HABIT_WEEK_DAYS:
            raise InvalidHabitError(f"Target must be between 1 and 7, got {self.target}")
        if len(self.completed) != HABIT_WEEK_DAYS:
            raise InvalidHabitError(
                f"Completion week must have {HABIT_WEEK_DAYS} days, got {len(self.completed)}"
            )

    @staticmethod
    def from_draft(habit_id: str, draft: HabitDraft) -> "Habit":
        return Habit(
            id=habit_id,
            name=draft.name,
            target=draft.target,
            icon=draft.icon,
            completed=_empty_week(),
        )

    def days_completed(self) -> int:
        """Number of checked-in days this week."""
        return sum(1 for done in self.completed if done)

    def is_day_completed(self, day_index: int) -> bool:
        return self.completed[day_index]

    def set_day(self, day_index: int, completed: bool) -> None:
        """Set a single day of the week.

        Raises:
            IndexError: If day_index is outside 0-6
        """
        if not 0 <= day_index < HABIT_WEEK_DAYS:
            raise IndexError(f"Day index must be between 0 and 6, got {day_index}")
        self.completed[day_index] = bool(completed)

    def edit_details(
        self,
        name: Optional[str] = None,
        target: Optional[int] = None,
        icon: Optional[str] = None,
    ) -> None:
        """Edit habit details while keeping this week's check-ins."""
        new_target = target if target is not None else self.target
        if not 1 <= new_target <= HABIT_WEEK_DAYS:
            raise InvalidHabitError(f"Target must be between 1 and 7, got {new_target}")
        if name is not None:
            self.name = name
        if icon is not None:
            self.icon = icon
        self.target = new_target
