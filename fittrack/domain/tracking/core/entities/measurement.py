"""MeasurementEntry entity - single point of a body measurement series."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MeasurementEntry:
    """One recorded value of a measurement series (kg, % or cm by type)."""

    id: str
    value: float
    date: datetime

    def __str__(self) -> str:
        return f"{self.date:%Y-%m-%d}: {self.value}"
