"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
HTTP status mapping and user-facing messages live alongside them so the
API layer can turn any domain error into a response without guessing.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    PAYLOAD_MISSING = "payload_missing"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INVALID_KEY = "invalid_key"
    FILE_NOT_FOUND = "file_not_found"
    STORAGE_WRITE_FAILED = "storage_write_failed"
    STORAGE_READ_FAILED = "storage_read_failed"
    STORAGE_LIST_FAILED = "storage_list_failed"
    STORAGE_DELETE_FAILED = "storage_delete_failed"
    SYSTEM_ERROR = "system_error"


# User-friendly error messages, safe to return to clients
ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.PAYLOAD_MISSING: "No file provided",
    ErrorCategory.PAYLOAD_TOO_LARGE: "File size exceeds the upload limit",
    ErrorCategory.INVALID_KEY: "Invalid file path",
    ErrorCategory.FILE_NOT_FOUND: "File not found",
    ErrorCategory.STORAGE_WRITE_FAILED: "Upload failed",
    ErrorCategory.STORAGE_READ_FAILED: "Failed to read file",
    ErrorCategory.STORAGE_LIST_FAILED: "Failed to list files",
    ErrorCategory.STORAGE_DELETE_FAILED: "Failed to delete file",
    ErrorCategory.SYSTEM_ERROR: "Internal server error",
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions are pure and have no external dependencies.
    They can optionally wrap original errors for context.
    """

    category = ErrorCategory.SYSTEM_ERROR
    http_status_code = 500

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        category: Optional[ErrorCategory] = None,
    ):
        """
        Initialize domain error.

        Args:
            message: Technical error message (for logs)
            original_error: Optional original exception that caused this error
            category: Overrides the class-level category
        """
        super().__init__(message)
        self.original_error = original_error
        if category is not None:
            self.category = category

    @property
    def user_message(self) -> str:
        """Message that is safe to show to API clients."""
        return ERROR_MESSAGES.get(self.category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR])


class ValidationError(DomainError):
    """
    Raised when client input is missing, oversized or otherwise invalid.

    User-correctable; maps to a 400 response.
    """

    category = ErrorCategory.PAYLOAD_MISSING
    http_status_code = 400


class InvalidKeyError(ValidationError):
    """Raised when a requested object key cannot be a stored key."""

    category = ErrorCategory.INVALID_KEY


class NotFoundError(DomainError):
    """Raised when the requested object is absent from the store."""

    category = ErrorCategory.FILE_NOT_FOUND
    http_status_code = 404


class StorageError(DomainError):
    """
    Raised when an object store call fails.

    The original error is preserved for logging; only the category's
    generic message reaches the client.
    """

    category = ErrorCategory.SYSTEM_ERROR
    http_status_code = 500


class MalformedKeyError(DomainError, ValueError):
    """
    Raised when an object key does not follow the expiration naming scheme.

    The sweep job skips such keys; this error is never surfaced to a caller.
    """

    pass


class ConfigurationError(ValueError):
    """Raised at startup when an environment setting cannot be parsed."""

    pass


def create_error_response(
    category: ErrorCategory,
    status_code: int = 400,
    context: Optional[Dict[str, Any]] = None,
) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        category: Error category
        status_code: HTTP status code
        context: Additional fields merged into the response body

    Returns:
        Tuple of (error_dict, status_code)
    """
    body: Dict[str, Any] = {
        "success": False,
        "error": ERROR_MESSAGES.get(category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]),
        "code": category.value,
    }
    if context:
        body.update(context)
    return body, status_code


def error_response_from(error: DomainError) -> tuple[Dict[str, Any], int]:
    """Build the API response for a domain error using its category and status."""
    return create_error_response(error.category, status_code=error.http_status_code)
