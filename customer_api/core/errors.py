"""Error Hierarchy — typed, categorized exceptions for every Customers API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors map to 400/404; store errors map to 500
    - to_response() produces the REST envelope {"message": ..., "error": {...}}
    - No driver or SQL details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CustomerApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability without coupling to the logging framework
"""

from dataclasses import dataclass, field, replace
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
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response body."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    customer_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CustomerApiError(Exception):
    """Base exception for all Customers API errors."""

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

    def details(self) -> dict:
        """Error-specific fields merged into the envelope."""
        return {}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "details": self.details(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class CustomerValidationError(CustomerApiError):
    """A customer field violates its constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def details(self) -> dict:
        return {"field": self.field}


class CustomerNotFoundError(CustomerApiError):
    """No customer row for the given id."""
    def __init__(self, customer_id: int, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), customer_id=customer_id)
        super().__init__(
            f"Customer with ID {customer_id} not found",
            "CUSTOMER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.customer_id = customer_id

    def details(self) -> dict:
        return {"customer_id": self.customer_id}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(CustomerApiError):
    """Backing store operation failed (connectivity or unexpected backend error)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), operation=operation)
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    def details(self) -> dict:
        return {"operation": self.operation}
