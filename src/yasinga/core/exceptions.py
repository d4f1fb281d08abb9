"""Custom exception classes for the expense tracker.

Each exception maps to an error code defined in errors.py and carries the
HTTP status the API layer should answer with.
"""

from typing import Any


class ExpenseTrackerError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "TXN_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    default_status = 500

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        super().__init__(error_code)


class NotFoundError(ExpenseTrackerError):
    """Raised when a user-scoped record does not exist (or is not theirs)."""

    default_status = 404


class ValidationError(ExpenseTrackerError):
    """Raised when a request is well-formed but breaks a business rule.

    This includes:
    - Assigning another user's category
    - Inverted date ranges
    - Unsafe report file names
    """

    default_status = 400


class ReportError(ExpenseTrackerError):
    """Raised when a report artifact cannot be produced or stored."""

    pass
