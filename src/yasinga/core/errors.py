"""Error codes and user-friendly messages.

This module defines the error catalog for the expense tracker API.
Each error has:
- error_code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "CAT_001": {
        "code": "CAT_001",
        "message": "Category not found",
        "user_message": "We couldn't find this category.",
        "suggestion": "Please refresh your category list and try again.",
        "retry_allowed": False,
    },
    "TXN_001": {
        "code": "TXN_001",
        "message": "Transaction not found",
        "user_message": "We couldn't find this transaction.",
        "suggestion": "Please refresh and try again.",
        "retry_allowed": False,
    },
    "TXN_002": {
        "code": "TXN_002",
        "message": "Category does not belong to the current user",
        "user_message": "That category isn't available for your account.",
        "suggestion": "Please choose one of your own categories.",
        "retry_allowed": False,
    },
    "TXN_003": {
        "code": "TXN_003",
        "message": "Invalid date range",
        "user_message": "The start date must be on or before the end date.",
        "suggestion": "Check the selected dates and try again.",
        "retry_allowed": False,
    },
    "SUP_001": {
        "code": "SUP_001",
        "message": "Supplier not found",
        "user_message": "We couldn't find this supplier.",
        "suggestion": "Please refresh your supplier list and try again.",
        "retry_allowed": False,
    },
    "RPT_001": {
        "code": "RPT_001",
        "message": "Report file not found",
        "user_message": "We couldn't find this report.",
        "suggestion": "Generate a new report and try again.",
        "retry_allowed": False,
    },
    "RPT_002": {
        "code": "RPT_002",
        "message": "Invalid report file name",
        "user_message": "That report name isn't valid.",
        "suggestion": "Pick a report from the list of saved reports.",
        "retry_allowed": False,
    },
    "RPT_003": {
        "code": "RPT_003",
        "message": "Report rendering failed",
        "user_message": "We couldn't build your report.",
        "suggestion": "Please try again. Contact support if the problem persists.",
        "retry_allowed": True,
    },
    "DB_001": {
        "code": "DB_001",
        "message": "Database operation failed",
        "user_message": "A database error occurred.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "DB_002": {
        "code": "DB_002",
        "message": "Resource already exists",
        "user_message": "This record already exists.",
        "suggestion": "Please check if the record was already created.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data.",
        "suggestion": "Please check your input and try again.",
        "retry_allowed": True,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred.",
        "suggestion": "Please try again later or contact support.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic entry for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
