"""
Error Code Definitions and Classification.

Centralized error code management for the submission governance core.
The core raises exactly two business error kinds; everything else is
total and degrades to defaults.

Key Features:
    - Explicit error codes for all failure modes
    - HTTP status mapping for the outer (routing) layer
    - Consistent error response dictionaries

Exports:
    ErrorCode: Standardized error codes enum
    get_http_status_code: Map an error code to an HTTP status
    create_error_response: Build a standardized error response dict
    error_response_from_exception: Build a response from a raised BusinessLogicError
"""

from enum import Enum
from typing import Dict, Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for all application errors.

    These codes travel with raised exceptions so the routing layer can
    translate them without inspecting messages.
    """

    # ========================================================================
    # AUTHORIZATION ERRORS - CLIENT ERRORS (HTTP 403/404)
    # ========================================================================

    # Staff role without a village assignment (HTTP 403)
    FORBIDDEN = "FORBIDDEN"

    # Record missing OR caller not allowed to see it (HTTP 404, deliberately conflated)
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # ========================================================================
    # DATA ERRORS (HTTP 400)
    # ========================================================================

    VALIDATION_ERROR = "VALIDATION_ERROR"  # Persistence rows failed validation
    INVALID_FORMAT = "INVALID_FORMAT"  # Uploaded KMZ/KML unreadable

    # ========================================================================
    # GENERIC ERRORS
    # ========================================================================

    CONFIG_ERROR = "CONFIG_ERROR"  # Configuration error
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"  # Unexpected exception


_HTTP_STATUS: Dict[ErrorCode, int] = {
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_FORMAT: 400,
}


def get_http_status_code(error_code: ErrorCode) -> int:
    """
    Get the appropriate HTTP status code for an error code.

    Args:
        error_code: ErrorCode enum value

    Returns:
        HTTP status code (400, 403, 404, 500)

    Example:
        >>> get_http_status_code(ErrorCode.FORBIDDEN)
        403
        >>> get_http_status_code(ErrorCode.RESOURCE_NOT_FOUND)
        404
    """
    # All unmapped errors → 500 (internal server error)
    return _HTTP_STATUS.get(error_code, 500)


def create_error_response(
    error_code: ErrorCode,
    message: str,
    **kwargs: Any
) -> Dict[str, Any]:
    """
    Create a standardized error response dictionary.

    Args:
        error_code: ErrorCode enum value
        message: Human-readable error message
        **kwargs: Additional fields to include in response

    Returns:
        Dict with standardized error response structure

    Example:
        >>> create_error_response(
        ...     ErrorCode.RESOURCE_NOT_FOUND,
        ...     "Pengajuan tidak ditemukan",
        ...     error_type="ResourceNotFoundError"
        ... )
        {
            "success": False,
            "error": "RESOURCE_NOT_FOUND",
            "error_type": "ResourceNotFoundError",
            "message": "Pengajuan tidak ditemukan",
            "http_status": 404
        }
    """
    response = {
        "success": False,
        "error": error_code.value,
        "error_type": kwargs.pop("error_type", "BusinessLogicError"),
        "message": message,
        "http_status": get_http_status_code(error_code),
        **kwargs  # Additional context fields
    }

    return response


def error_response_from_exception(error: Exception) -> Dict[str, Any]:
    """
    Build an error response from a raised exception.

    BusinessLogicError subclasses carry their own ErrorCode; anything else
    is reported as UNEXPECTED_ERROR without leaking its message.
    """
    error_code = getattr(error, "error_code", None)
    if isinstance(error_code, ErrorCode):
        return create_error_response(
            error_code,
            str(error),
            error_type=type(error).__name__
        )
    return create_error_response(
        ErrorCode.UNEXPECTED_ERROR,
        "Terjadi kesalahan tak terduga",
        error_type=type(error).__name__
    )
