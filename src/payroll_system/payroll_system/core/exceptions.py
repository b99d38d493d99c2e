class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AttendanceParseError(ValidationError):
    """Raised when an attendance line cannot be parsed (fields, date or time)."""


class InvalidPunchError(ValidationError):
    """Raised when a logout timestamp is earlier than the login timestamp."""


class EmployeeNotFoundError(DomainError):
    """Raised when no employee matches the requested id."""


class NoAttendanceDataError(DomainError):
    """Raised when no attendance was processed for the requested week or month.

    Distinct from an employee having worked zero hours.
    """
