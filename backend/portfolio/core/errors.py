"""Error Hierarchy - typed, categorized exceptions for every portfolio failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found errors are 404; store/infrastructure errors are 500
    - to_response() always carries a top-level "message" the front-end can display
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PortfolioError base: one FastAPI handler catches all
    - Absence is not an error in the data access layer (repositories return None);
      RecordNotFoundError is raised only by route handlers
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
    DATABASE = "database"
    INTERNAL = "internal"


class PortfolioError(Exception):
    """Base exception for all portfolio backend errors."""

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

    def public_message(self) -> str:
        """Message safe to show to API callers."""
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.public_message(),
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
            },
        }


# --- Caller errors (400-level) ------------------------------------------------

class RecordNotFoundError(PortfolioError):
    """No record matches the requested identifier or unique key."""
    def __init__(self, label: str):
        super().__init__(
            f"{label} not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.label = label


# --- Infrastructure errors (500-level) ----------------------------------------

class StoreError(PortfolioError):
    """A statement against the relational store failed.

    Covers connectivity loss and constraint violations that input
    validation cannot anticipate (duplicate slug or username). The
    underlying cause is kept on ``__cause__`` for logging only.
    """
    def __init__(self, operation: str, entity: str, reason: str = "failed"):
        super().__init__(
            f"Store {operation} on {entity} {reason}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
        self.entity = entity
        self.reason = reason

    def public_message(self) -> str:
        return "Internal server error"
