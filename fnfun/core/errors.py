"""Error Hierarchy — typed, categorized exceptions for FnFun failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Misuse of a combinator (wrong arity, empty composition) is a 400-level error
    - to_response() produces the REST envelope used by the API error handlers
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
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    function_name: str | None = None
    arity: int | None = None
    debug_info: dict[str, Any] | None = None


class FnFunError(Exception):
    """Base exception for all FnFun errors."""

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
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "function_name": self.context.function_name,
                    "arity": self.context.arity,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ArityError(FnFunError):
    """A function was called, tupled or curried with the wrong number of arguments."""
    def __init__(
        self,
        message: str,
        function_name: str | None = None,
        arity: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.function_name = function_name
        ctx.arity = arity
        super().__init__(
            message, "ARITY_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class CompositionError(FnFunError):
    """compose / and_then called without enough functions."""
    def __init__(self, count: int, context: ErrorContext | None = None):
        super().__init__(
            f"Composition requires at least 2 functions, got {count}.",
            "COMPOSITION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.count = count


class ResourceNotFoundError(FnFunError):
    """Requested resource does not exist."""
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
