"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or missing input.

    Reported to the caller verbatim and never retried.
    """

    pass


class DataIntegrityError(DomainError):
    """Stored data violates an invariant the domain relies on."""

    pass


class InvalidAttendanceValueError(DataIntegrityError):
    """Raised when a vote carries an attendance value outside the known set."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unrecognized attendance value: {value!r}")


class StoreUnavailableError(DomainError):
    """Raised when the persistence backend cannot be reached.

    The domain has no retry policy of its own, the caller decides.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Store unavailable during {operation}: {reason}")
