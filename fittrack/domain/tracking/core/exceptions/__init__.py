"""Domain exceptions for the tracking context."""

from .domain_errors import (
    CorruptDocumentError,
    InvalidHabitError,
    InvalidMeasurementTypeError,
    TrackingDomainError,
)

__all__ = [
    "CorruptDocumentError",
    "InvalidHabitError",
    "InvalidMeasurementTypeError",
    "TrackingDomainError",
]
