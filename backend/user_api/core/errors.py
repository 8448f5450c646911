"""Error Hierarchy — typed, categorized exceptions for every HTTP-visible failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the response envelope: success=False + message + error block
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserApiError base: FastAPI global handler catches all
    - The store never raises these — it returns StoreResults; the HTTP layer
      converts failures with error_from_result()
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from user_api.core.store_results import Conflict, Invalid, NotFound


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MALFORMED_INPUT = "malformed_input"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class UserApiError(Exception):
    """Base exception for all User Records API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard failure envelope."""
        return {
            "success": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UserValidationError(UserApiError):
    """One or more user fields violated their constraints."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Validation failed", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["errors"] = self.errors
        return response


class MalformedPayloadError(UserApiError):
    """Request body could not be parsed into candidate field values."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid JSON format", "MALFORMED_PAYLOAD",
            ErrorCategory.MALFORMED_INPUT, ErrorSeverity.WARNING, context, 400,
        )


class UserNotFoundError(UserApiError):
    """Requested user id has no live record."""
    def __init__(self, user_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            "User not found", "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


class RouteNotFoundError(UserApiError):
    """No route matches the request method and path."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Route not found", "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


class EmailConflictError(UserApiError):
    """Normalized email already belongs to another user."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "Email already exists", "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.email = email


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalServerError(UserApiError):
    """Unexpected fault — message is generic, detail only when configured."""
    def __init__(self, detail: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Something went wrong!", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail

    def to_response(self) -> dict:
        response = super().to_response()
        if self.detail is not None:
            response["error"]["detail"] = self.detail
        return response


def error_from_result(
    result: NotFound | Invalid | Conflict, context: ErrorContext | None = None,
) -> UserApiError:
    """Map a failed StoreResult to the exception the HTTP layer raises."""
    match result:
        case NotFound(user_id=user_id):
            return UserNotFoundError(user_id, context)
        case Invalid(messages=messages):
            return UserValidationError(list(messages), context)
        case Conflict(email=email):
            return EmailConflictError(email, context)
    raise TypeError(f"Not a failure result: {result!r}")
