"""
Error types and error logging for the Shopify REST client.

Expected API failures (missing parameters, 4xx/5xx, network errors) travel
back to callers as failed ``Response`` objects. The exceptions below cover
bad configuration, and failures a caller chooses to raise through
``Response.raise_for_error()``. ``log_error`` is the one place failures are
logged with structured context.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """Stable machine-readable error codes."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    SHOPIFY_CONNECTION_FAILED = "SHOPIFY_CONNECTION_FAILED"
    SHOPIFY_API_ERROR = "SHOPIFY_API_ERROR"
    SHOPIFY_DECODE_ERROR = "SHOPIFY_DECODE_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"


class ErrorSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AppException(Exception):
    """
    Base for every exception raised by the client.

    Args:
        message: Human readable description
        error_code: Stable code for the failure
        details: Extra context, merged into log records
        status_code: HTTP status the failure maps to
        severity: How loud the failure should be
        is_retryable: Whether repeating the same call may succeed
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = dict(details or {})
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ValidationException(AppException):
    """A configuration value is missing or malformed."""

    def __init__(self, message: str, field: str, expected_format: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            error_code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.expected_format = expected_format
        self.details.update({"field": field, "expected_format": expected_format})


class MissingParametersException(AppException):
    """An operation was called without some of its required parameters."""

    def __init__(self, message: str, missing: List[str], **kwargs):
        super().__init__(
            message,
            error_code=ErrorCode.MISSING_REQUIRED_FIELD,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.missing = list(missing)
        self.details["missing"] = self.missing


class ShopifyAPIException(AppException):
    """
    A Shopify request failed or returned something unusable.

    ``api_response_code`` is None when no HTTP response was received. Rate
    limits, network failures and 5xx are retryable; other 4xx are not.
    """

    def __init__(
        self,
        message: str,
        api_response_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        rate_limited: bool = False,
        retry_after: Optional[int] = None,
        error_code: Optional[ErrorCode] = None,
        **kwargs,
    ):
        if error_code is None:
            if rate_limited:
                error_code = ErrorCode.RATE_LIMIT_EXCEEDED
            elif api_response_code is None:
                error_code = ErrorCode.SHOPIFY_CONNECTION_FAILED
            else:
                error_code = ErrorCode.SHOPIFY_API_ERROR

        server_side = api_response_code is not None and api_response_code >= 500
        super().__init__(
            message,
            error_code=error_code,
            status_code=api_response_code or 503,
            severity=ErrorSeverity.HIGH if server_side else ErrorSeverity.MEDIUM,
            is_retryable=rate_limited or api_response_code is None or server_side,
            **kwargs,
        )
        self.api_response_code = api_response_code
        self.endpoint = endpoint
        self.rate_limited = rate_limited
        self.retry_after = retry_after
        self.details.update(
            {
                "api_response_code": api_response_code,
                "endpoint": endpoint,
                "retry_after": retry_after,
            }
        )


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an exception with its code and details as record extras.

    Args:
        exception: Exception to log
        context: Extra fields for the record (method, url, ...)
        level: Logging level
    """
    extra: Dict[str, Any] = {"exception_type": type(exception).__name__, **(context or {})}

    if isinstance(exception, AppException):
        extra.update(exception.details)
        extra["error_code"] = exception.error_code.value
        extra["is_retryable"] = exception.is_retryable
        message = str(exception)
    else:
        extra["traceback"] = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
        message = f"Unhandled exception: {type(exception).__name__}: {exception}"

    logger.log(level, message, extra=extra)
