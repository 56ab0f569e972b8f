"""Error Hierarchy — typed, categorized exceptions for all planner failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; subclasses add fields via response_context()
    - ShardRevalidationError's envelope lists refreshed and failed shards by name
    - Classification and grouping never raise — nothing here is used by them

Design Decisions:
    - Single hierarchy with LifePlannerError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - ShardRevalidationError reports refreshed AND failed shards: a coordinated refresh
      is not atomic, so callers must know what was already applied
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from life_planner.core.domain_types import ShardKey


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    CACHE = "cache"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    viewed_year: int | None = None
    user_message: str | None = None


class LifePlannerError(Exception):
    """Base exception for all planner errors."""

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
                    "operation": self.context.operation,
                    "viewed_year": self.context.viewed_year,
                    **self.response_context(),
                },
            }
        }

    def response_context(self) -> dict[str, Any]:
        """Error-specific fields merged into the envelope's context."""
        return {}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidGoalWriteError(LifePlannerError):
    """Write target does not match the operation (record vs id handle)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_GOAL_WRITE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(LifePlannerError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class GoalConflictError(LifePlannerError):
    """A goal already occupies the slot (e.g. one weekly goal per week)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "GOAL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ShardRevalidationError(LifePlannerError):
    """One or more shard refreshes failed. Refreshed shards are not rolled back."""
    def __init__(
        self,
        refreshed: list[ShardKey],
        failed: list[ShardKey],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or (
            "The change was saved but some views could not be refreshed."
        )
        super().__init__(
            f"Shard revalidation failed for {', '.join(map(str, failed))}",
            "SHARD_REVALIDATION_FAILED", ErrorCategory.CACHE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.refreshed = refreshed
        self.failed = failed

    def response_context(self) -> dict[str, Any]:
        return {
            "refreshed": [str(s) for s in self.refreshed],
            "failed": [str(s) for s in self.failed],
        }
