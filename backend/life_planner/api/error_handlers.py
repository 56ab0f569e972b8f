"""Error Handlers — map planner errors, bad requests and crashes onto one JSON envelope.

Invariants:
    - Every error response has the shape {"error": {code, message, category, severity, ...}}
    - 4xx planner errors log at WARNING, 5xx at ERROR with the operation and viewed year
    - A failed shard refresh reports which shards were refreshed and which failed: the
      goal write itself was applied, only some views may be out of date
    - Bad request bodies and query strings → 400 with one detail entry per field
    - Anything else → 500 without internals

Design Decisions:
    - Envelope fields built from ErrorCategory/ErrorSeverity for all three handlers,
      so clients switch on the same vocabulary whatever failed
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from life_planner.core.errors import (
    ErrorCategory, ErrorSeverity, LifePlannerError, ShardRevalidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(LifePlannerError, planner_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def planner_error_handler(request: Request, exc: LifePlannerError):
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "operation": exc.context.operation,
        "viewed_year": exc.context.viewed_year,
    }
    if isinstance(exc, ShardRevalidationError):
        extra["shard"] = [str(s) for s in exc.failed]
        logger.error(
            f"Goal {exc.context.operation} applied, but {len(exc.failed)} shard(s) "
            f"were not refreshed ({len(exc.refreshed)} refreshed)",
            extra=extra,
        )
    elif exc.http_status >= 500:
        logger.error(exc.message, extra=extra)
    else:
        logger.warning(exc.message, extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request: {', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}",
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **fields,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }
