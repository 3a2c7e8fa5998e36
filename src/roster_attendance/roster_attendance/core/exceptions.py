class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class InvalidTime(ValidationError):
    """Raised for a malformed date or clock value."""

    code = "invalid_time"


class InvalidRange(ValidationError):
    """Raised when an end instant is not strictly after its start."""

    code = "invalid_range"


class NoCheckIn(ValidationError):
    """Raised when a check-out is written for a day without a check-in."""

    code = "no_check_in"


class StatusConflict(ValidationError):
    """Raised when a timestamp is written against a non-working status."""

    code = "status_conflict"


class InvalidThreshold(ValidationError):
    code = "invalid_threshold"


class NotFound(ValidationError):
    """Raised when an employee or record does not exist."""

    code = "not_found"
