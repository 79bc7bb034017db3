class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInputError(ValidationError):
    """Raised when compensation figures are negative, non-finite or missing."""


class InvalidEmployeeRecordError(ValidationError):
    """Raised when a stored employee record cannot be run through payroll."""

    def __init__(self, employee_id: int, reason: str):
        super().__init__(f"Employee {employee_id}: {reason}")
        self.employee_id = employee_id
        self.reason = reason


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class PayrollAlreadyProcessedError(DomainError):
    """Raised when a payroll run is attempted twice for the same period."""
