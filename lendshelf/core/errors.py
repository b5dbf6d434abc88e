"""Error Hierarchy: typed, categorized exceptions for every LendShelf failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error kind maps to exactly one human-readable user_message
    - Domain errors (400-level) are detected before any store write
    - Store errors (500-level) are surfaced verbatim, never retried here
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with LendShelfError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    listing_id: str | None = None
    user_id: str | None = None
    debug_info: dict[str, Any] | None = None


class LendShelfError(Exception):
    """Base exception for all LendShelf errors."""

    user_message = "Something went wrong. Please try again."

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "user_message": self.user_message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "listing_id": self.context.listing_id,
                    "user_id": self.context.user_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(LendShelfError):
    """No signed-in identity where one is required."""

    user_message = "Please sign in to continue."

    def __init__(
        self, message: str = "Sign-in required", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationError(LendShelfError):
    """Identity present but does not own the resource."""

    user_message = "You can only change your own listings."

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_OWNER", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ValidationError(LendShelfError):
    """A required field is missing or malformed, or a date range is invalid."""

    user_message = "Please check the highlighted fields and try again."

    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class DuplicateError(LendShelfError):
    """Interest already recorded for this (listing, borrower) pair."""

    user_message = "You've already shown interest in this item."

    def __init__(
        self, listing_id: str, borrower_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Interest already exists for listing '{listing_id}'",
            "DUPLICATE_INTEREST", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.listing_id = listing_id
        self.borrower_id = borrower_id


class NotFoundError(LendShelfError):
    """Requested resource does not exist."""

    user_message = "That item could not be found. It may have been removed."

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(LendShelfError):
    """Persistence or transport failure. Cause is opaque to callers."""

    user_message = "We couldn't save your changes. Please try again."

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class UploadError(LendShelfError):
    """Blob store rejected or failed to store an upload."""

    user_message = "Failed to upload image."

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Upload failed: {message}",
            "UPLOAD_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
