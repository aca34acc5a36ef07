"""
Exception hierarchy for the employee record service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Storage-layer failures (sqlalchemy.exc.*) are deliberately absent here:
they reach the caller untranslated.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class EmployeeServiceError(Exception):
    """Base exception for all employee service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(EmployeeServiceError):
    """Raised when a required argument is missing."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Name of the offending argument
            details: Additional context
        """
        details = dict(details or {})
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class EmployeeNotFoundError(EmployeeServiceError):
    """Raised when no employee row exists for an identifier."""

    def __init__(self, employee_id: int | None, details: dict[str, Any] | None = None) -> None:
        """
        Initialize employee not found error.

        Args:
            employee_id: ID of the missing employee
            details: Additional context
        """
        self.employee_id = employee_id
        details = dict(details or {})
        details["employee_id"] = employee_id
        super().__init__(f"Employee with ID {employee_id} not found.", details)
