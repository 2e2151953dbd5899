"""Error Hierarchy — typed, categorized exceptions for all Showcase failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces REST envelope; to_sse_event() produces SSE envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ShowcaseError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
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
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    user_message: str | None = None


class ShowcaseError(Exception):
    """Base exception for all Showcase errors."""

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
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                    "operation": self.context.operation,
                },
            }
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ShowcaseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ShowcaseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
