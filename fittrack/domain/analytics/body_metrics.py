"""Body metrics: BMI and measurement history views."""

import math
from datetime import datetime
from enum import Enum
from typing import Optional, Sequence

from fittrack.domain.tracking.core.entities import MeasurementEntry

from .periods import MONTH_LABELS
from .series import ChartSeries

NO_DATA_LABEL = "No Data"


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index rounded to one decimal place.

    Returns 0.0 when the height is not positive.

    Examples:
        >>> bmi(75, 180)
        23.1
    """
    if height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    value = weight_kg / (height_m * height_m)
    return math.floor(value * 10 + 0.5) / 10


def bmi_category(value: float) -> BMICategory:
    """Classify a BMI value; each bound belongs to the higher category."""
    if value < 18.5:
        return BMICategory.UNDERWEIGHT
    if value < 24.9:
        return BMICategory.NORMAL
    if value < 29.9:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def latest_measurement(entries: Sequence[MeasurementEntry]) -> Optional[MeasurementEntry]:
    """Newest entry by date, or None for an empty series."""
    if not entries:
        return None
    return max(entries, key=lambda entry: entry.date)


def _short_date(moment: datetime) -> str:
    return f"{MONTH_LABELS[moment.month - 1]} {moment.day}"


def recent_measurement_series(
    entries: Sequence[MeasurementEntry], limit: int = 7
) -> ChartSeries:
    """The last ``limit`` entries by date as a chart series.

    Labels look like ``Oct 21``. An empty series yields a single
    ``No Data`` point at 0 so the chart always has something to draw.
    """
    if not entries:
        return ChartSeries(labels=[NO_DATA_LABEL], values=[0])
    recent = sorted(entries, key=lambda entry: entry.date)[-limit:]
    return ChartSeries(
        labels=[_short_date(entry.date) for entry in recent],
        values=[entry.value for entry in recent],
    )
