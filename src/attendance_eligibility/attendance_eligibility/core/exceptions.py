class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class HolidayBlocked(ValidationError):
    """Raised when attendance is written on a holiday."""


class InvalidDateRange(ValidationError):
    """Raised when a medical leave ends before it starts."""


class InvalidDateFormat(ValidationError):
    """Raised when a date string is not YYYY-MM-DD."""


class DuplicateKey(ValidationError):
    """Raised when a registration number already exists."""


class UnknownStudent(ValidationError):
    """Raised when a registration number is not in the store."""


class PersistenceError(DomainError):
    """Base for store file problems."""


class PersistenceCorrupt(PersistenceError):
    """Raised when the store file cannot be decoded."""


class PersistenceWriteFailed(PersistenceError):
    """Raised when the store file cannot be written."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
