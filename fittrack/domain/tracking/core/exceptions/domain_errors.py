"""Domain exceptions for fitness tracking."""


class TrackingDomainError(Exception):
    """Base exception for tracking domain errors."""

    pass


class InvalidHabitError(TrackingDomainError):
    """Raised when a habit violates its invariants (target range, week length)."""

    pass


class InvalidMeasurementTypeError(TrackingDomainError):
    """Raised when a measurement type key is not one of the tracked types.

    Raised by ``MeasurementType.parse``. The store catches it and treats the
    write as a no-op.
    """

    def __init__(self, key: str):
        super().__init__(f"Unknown measurement type: {key}")
        self.key = key


class CorruptDocumentError(TrackingDomainError):
    """Raised when a persisted collection document cannot be decoded."""

    def __init__(self, collection: str, reason: str):
        super().__init__(f"Corrupt document for {collection}: {reason}")
        self.collection = collection
        self.reason = reason
