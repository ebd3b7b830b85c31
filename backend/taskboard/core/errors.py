"""Error Hierarchy — typed, categorized exceptions for all Taskboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are reported to the caller and never retried
    - PersistenceError never carries driver/SQL detail in its user-facing message
    - to_response() produces the REST envelope used by every endpoint

Design Decisions:
    - Single hierarchy with TaskboardError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Foreign-owned entities raise ResourceNotFoundError, not a distinct error (ADR: ownership not leaked)
    - PersistenceError.committed exposes whether the write landed, so callers never
      blindly retry a non-idempotent recurrence advance
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
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    task_id: str | None = None
    note_id: str | None = None
    category_id: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskboardError(Exception):
    """Base exception for all Taskboard errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(TaskboardError):
    """Malformed or missing request fields."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidOperationError(InvalidInputError):
    """Operation not valid for the entity's current state."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, None, context)
        self.code = "INVALID_OPERATION"
        self.category = ErrorCategory.BUSINESS_RULE


class UnauthorizedError(TaskboardError):
    """No valid caller identity on the request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(TaskboardError):
    """Requested resource does not exist or is not owned by the caller."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type


class StalePositionError(TaskboardError):
    """Caller's reported position disagrees with the stored one."""
    def __init__(
        self, reported: int, actual: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Note moved concurrently: reported position {reported}, "
            f"stored position {actual}. Reload and retry.",
            "STALE_POSITION", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.reported = reported
        self.actual = actual


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(TaskboardError):
    """Storage transaction failed. committed is None when the outcome is unknown."""
    def __init__(
        self, operation: str, committed: bool | None = False,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Unable to {operation}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.committed = committed

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["committed"] = self.committed
        return response
