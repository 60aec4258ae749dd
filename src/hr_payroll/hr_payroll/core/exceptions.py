class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidPeriod(ValidationError):
    """Raised when a month/year pair does not name a calendar month."""


class NotFound(DomainError):
    """Raised when an identifier does not resolve."""


class EmployeeNotFound(NotFound):
    pass


class RecordNotFound(NotFound):
    pass


class InvalidStatus(DomainError):
    """Raised when a payroll status is not one of the recognized values."""


class InvalidTransition(DomainError):
    """Raised when a payroll status change would move backwards or leave Paid."""


class StorageError(DomainError):
    """Raised when the persistence layer fails."""
