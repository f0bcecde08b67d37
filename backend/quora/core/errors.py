"""Error Hierarchy — typed, categorized exceptions for all Quora API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Codes follow the "XXX-NNN" convention (ATHR-*, QUE-*, QUES-*, USR-*)
    - Domain errors (400-level) are raised immediately, never recovered by services
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with QuoraError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Duplicate content is its own class (QUE-999, 409), separate from invalid content (QUE-888, 400)
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    question_id: str | None = None
    user_id: str | None = None
    activity: str | None = None


class QuoraError(Exception):
    """Base exception for all Quora API errors."""

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
                    "question_id": self.context.question_id,
                    "user_id": self.context.user_id,
                    "activity": self.context.activity,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationFailedError(QuoraError):
    """Bearer token missing, unknown, expired or signed out."""
    def __init__(self, code: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthorizationFailedError(QuoraError):
    """Valid identity, insufficient rights (not owner, not admin)."""
    def __init__(self, code: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class InvalidQuestionError(QuoraError):
    """Question content is empty, whitespace-only, or a no-op edit."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "QUE-888", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DuplicateQuestionError(QuoraError):
    """A question with identical trimmed content already exists."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Question already exists. Duplicate question not allowed",
            "QUE-999", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class QuestionNotFoundError(QuoraError):
    """No question with the given public identifier."""
    def __init__(
        self,
        message: str = "Entered question uuid does not exist",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "QUES-001", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class UserNotFoundError(QuoraError):
    """No user with the given public identifier."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User with entered uuid whose question details are to be seen does not exist",
            "USR-001", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(QuoraError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
