"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.  The table is
ordered most specific first.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ghfs.domain.exceptions import (
    AccessDeniedError,
    ContentDecodeError,
    GhfsError,
    InvalidArgumentError,
    InvalidRepositoryError,
    IsDirectoryError,
    NotExistError,
    RateLimitError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[GhfsError], int]] = [
    (InvalidRepositoryError, 422),
    (InvalidArgumentError, 422),
    (NotExistError, 404),
    (IsDirectoryError, 400),
    (AccessDeniedError, 403),
    (RateLimitError, 429),
    (ContentDecodeError, 502),
    (UpstreamError, 502),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def status_for(exc: GhfsError) -> int:
    for exc_type, code in _EXCEPTION_STATUS:
        if isinstance(exc, exc_type):
            return code
    return 500


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(GhfsError)
    async def domain_handler(request: Request, exc: GhfsError) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_for(exc), str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
