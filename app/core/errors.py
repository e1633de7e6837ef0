"""Error Hierarchy — typed, categorized exceptions for all todo API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the REST envelope — always carries success=False
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoAppError base: FastAPI global handler catches all
    - HTTP status lives on the error so routes never translate codes by hand
"""

from enum import Enum


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


class TodoAppError(Exception):
    """Base exception for all todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "message": self.message,
            "code": self.code,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(TodoAppError):
    """Request field is missing, malformed or out of range."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.field = field


class TodoNotFoundError(TodoAppError):
    """Referenced todo id does not exist."""
    def __init__(self, todo_id: object):
        super().__init__(
            "Todo not found", "NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR, 404,
        )
        self.todo_id = todo_id


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(TodoAppError):
    """Unexpected failure while handling a request."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
