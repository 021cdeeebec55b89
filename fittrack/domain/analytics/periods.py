"""Period bucketing for chart series and period summaries.

Buckets are built oldest first, ending at the reference date:

* week: 7 calendar days, labelled with the short weekday name
* month: 4 windows of 7 calendar days stepping back 7 days from the
  reference day, labelled ``Week 1`` .. ``Week 4``
* sixMonths: 6 calendar months, labelled with the short month name

Windows are half-open ``[start, end)`` at midnight boundaries, so a
7-day window starting on day D covers D through D+6 inclusive. Aware
reference times are converted to naive local time first, matching how
entry dates are stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Union

from fittrack.domain.shared.datetime_helpers import shift_months, start_of_day, to_local_naive
from fittrack.domain.shared.types import Period

# Indexed by datetime.weekday() (Monday = 0); fixed so labels do not follow the process locale
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

MONTH_WINDOW_DAYS = 7


@dataclass(frozen=True)
class PeriodBucket:
    """One slot of a chart series.

    Attributes:
        label: Axis label
        representative: Reference point of the bucket (the reference time
            shifted back by whole days or months); used for nearest-match fills
        start: Window start (inclusive)
        end: Window end (exclusive)
    """

    label: str
    representative: datetime
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end


def build_buckets(period: Union[Period, str], reference: datetime) -> list[PeriodBucket]:
    """Split the period ending at ``reference`` into chart buckets.

    Args:
        period: Reporting period
        reference: "Now" for the chart

    Returns:
        list[PeriodBucket]: Buckets in chronological order (oldest first)
    """
    period = Period(period)
    reference = to_local_naive(reference)
    count = period.bucket_count()
    buckets: list[PeriodBucket] = []

    for offset in range(count - 1, -1, -1):
        if period is Period.WEEK:
            representative = reference - timedelta(days=offset)
            start = start_of_day(representative)
            end = start + timedelta(days=1)
            label = WEEKDAY_LABELS[representative.weekday()]
        elif period is Period.MONTH:
            representative = reference - timedelta(days=offset * MONTH_WINDOW_DAYS)
            start = start_of_day(representative)
            end = start + timedelta(days=MONTH_WINDOW_DAYS)
            label = f"Week {count - offset}"
        else:
            representative = shift_months(reference, -offset)
            start = start_of_day(representative.replace(day=1))
            end = shift_months(start, 1)
            label = MONTH_LABELS[representative.month - 1]
        buckets.append(PeriodBucket(label=label, representative=representative, start=start, end=end))

    return buckets


def period_window_start(period: Union[Period, str], reference: datetime) -> datetime:
    """Start of the summary window for a period (no upper bound).

    * week: midnight six days before the reference day (7 days inclusive)
    * month: midnight 28 days before the reference day
    * sixMonths: midnight of the same day six calendar months back

    Examples:
        >>> period_window_start(Period.WEEK, datetime(2025, 10, 22, 15, 0))
        datetime.datetime(2025, 10, 16, 0, 0)
    """
    period = Period(period)
    reference = to_local_naive(reference)
    if period is Period.WEEK:
        return start_of_day(reference - timedelta(days=6))
    if period is Period.MONTH:
        return start_of_day(reference - timedelta(days=28))
    return start_of_day(shift_months(reference, -6))
