"""Error Hierarchy — typed, categorized exceptions for all dashboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DashboardError base: FastAPI global handler catches all
    - AuthError carries a `type` discriminator; only "CredentialsSignin" is
      classified by the authenticate action, every other type is generic
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
    AUTHENTICATION = "authentication"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    invoice_id: str | None = None
    action: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class DashboardError(Exception):
    """Base exception for all dashboard errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "invoice_id": self.context.invoice_id,
                    "action": self.context.action,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvoiceValidationError(DashboardError):
    """One or more invoice form fields failed validation."""
    def __init__(
        self, field_errors: dict[str, list[str]], context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid fields: {', '.join(sorted(field_errors))}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field_errors = field_errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["fields"] = self.field_errors
        return response


class AuthError(DashboardError):
    """Sign-in failed. `type` tells bad credentials apart from other failures."""

    CREDENTIALS_SIGNIN = "CredentialsSignin"

    def __init__(
        self, error_type: str, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message or f"Authentication failed ({error_type})",
            "AUTH_ERROR", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.type = error_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DashboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
