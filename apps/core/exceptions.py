"""
Standardized error handling for the Newsroom API.

Provides error codes, exception classes, and the {success: false, message}
response envelope shared by every endpoint.
"""

import logging
import traceback
import uuid
from enum import Enum
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VALUE = "INVALID_VALUE"

    # Authentication/Authorization (401/403)
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    RATE_LIMITED = "RATE_LIMITED"

    # Resource errors (404/409)
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"

    # Server errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Custom Exceptions
# =============================================================================

class NewsroomException(APIException):
    """Base exception for Newsroom API errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.INTERNAL_ERROR
    default_detail = "An error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[ErrorCode] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_detail
        self.error_code = code or self.error_code
        self.field = field
        self.error_details = details or {}

        if status_code:
            self.status_code = status_code

        super().__init__(detail=self.message)


class ValidationError(NewsroomException):
    """Missing or malformed input. Always raised before any write."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = ErrorCode.VALIDATION_ERROR
    default_detail = "Validation failed"


class NotFoundError(NewsroomException):
    """Resource not found."""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = ErrorCode.NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(NewsroomException):
    """Unique constraint or concurrent-write conflict, raised after rollback."""
    status_code = status.HTTP_409_CONFLICT
    error_code = ErrorCode.CONFLICT
    default_detail = "Resource conflict"


class PermissionDeniedError(NewsroomException):
    """Permission denied."""
    status_code = status.HTTP_403_FORBIDDEN
    error_code = ErrorCode.PERMISSION_DENIED
    default_detail = "Permission denied"


class PersistenceError(NewsroomException):
    """Datastore failure mid-transaction. The transaction has been rolled back."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = ErrorCode.DATABASE_ERROR
    default_detail = "Database operation failed"


# =============================================================================
# Exception Handler
# =============================================================================

def get_request_id(request) -> str:
    """Get or generate request ID from request."""
    request_id = getattr(request, 'request_id', None)
    if request_id:
        return request_id
    return str(uuid.uuid4())


def build_error_body(
    message: str,
    code: ErrorCode,
    request_id: str,
    field: Optional[str] = None,
    error_detail: Optional[Any] = None,
) -> Dict[str, Any]:
    """
    Build the error envelope.

    Raw error detail is only included when EXPOSE_ERROR_DETAIL is on,
    which production settings force off.
    """
    body = {
        "success": False,
        "message": message,
        "code": code.value if isinstance(code, ErrorCode) else code,
        "request_id": request_id,
    }
    if field:
        body["field"] = field
    if error_detail and getattr(settings, 'EXPOSE_ERROR_DETAIL', False):
        body["error"] = error_detail
    return body


def newsroom_exception_handler(exc, context):
    """
    Custom exception handler for the Newsroom API.

    Converts all exceptions to the standardized error envelope.
    """
    request = context.get('request')
    request_id = get_request_id(request) if request else str(uuid.uuid4())

    # Handle our custom exceptions
    if isinstance(exc, NewsroomException):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"API Error: {exc.error_code.value}: {exc.message}",
            extra={
                "error_code": exc.error_code.value,
                "field": exc.field,
                "status_code": exc.status_code,
            }
        )
        body = build_error_body(
            exc.message,
            exc.error_code,
            request_id,
            field=exc.field,
            error_detail=exc.error_details or None,
        )
        return Response(body, status=exc.status_code)

    # Handle Django validation errors
    if isinstance(exc, DjangoValidationError):
        message = exc.messages[0] if exc.messages else "Validation failed"
        body = build_error_body(
            message,
            ErrorCode.VALIDATION_ERROR,
            request_id,
            error_detail={"errors": exc.messages},
        )
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    # Handle 404
    if isinstance(exc, Http404):
        body = build_error_body(
            str(exc) if str(exc) else "Resource not found",
            ErrorCode.NOT_FOUND,
            request_id,
        )
        return Response(body, status=status.HTTP_404_NOT_FOUND)

    # Use DRF's default handler for standard exceptions
    response = drf_exception_handler(exc, context)

    if response is not None:
        error_code = ErrorCode.VALIDATION_ERROR
        if response.status_code == 401:
            error_code = ErrorCode.AUTHENTICATION_REQUIRED
        elif response.status_code == 403:
            error_code = ErrorCode.PERMISSION_DENIED
        elif response.status_code == 404:
            error_code = ErrorCode.NOT_FOUND
        elif response.status_code == 429:
            error_code = ErrorCode.RATE_LIMITED
        elif response.status_code >= 500:
            error_code = ErrorCode.INTERNAL_ERROR

        # Extract message from DRF response
        details = None
        if isinstance(response.data, dict):
            if 'detail' in response.data:
                message = str(response.data['detail'])
            else:
                message = "Validation failed"
                details = response.data
        elif isinstance(response.data, list):
            message = str(response.data[0]) if response.data else "Error"
            details = {"errors": response.data}
        else:
            message = str(response.data)

        response.data = build_error_body(message, error_code, request_id, error_detail=details)
        return response

    # Unhandled exception - log and return generic error
    logger.exception(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exc(),
        }
    )

    body = build_error_body(
        "An unexpected error occurred",
        ErrorCode.INTERNAL_ERROR,
        request_id,
        error_detail=str(exc),
    )
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
