"""Global exception handlers — translate domain errors to HTTP responses.

Every failure uses the ``{"error": "..."}`` envelope.  Domain errors expose
only their opaque ``public_message``; the internal message is logged.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from trivia_service.domain.exceptions import InvalidRequestError, TriviaServiceError

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[TriviaServiceError], int]] = [
    (InvalidRequestError, 400),
    (TriviaServiceError, 500),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(
            status_code: int,
        ):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> JSONResponse:
                kind = getattr(exc, "kind", None)
                logger.warning("%s [%s]: %s", type(exc).__name__, kind and kind.value, exc)
                public = getattr(exc, "public_message", "Request failed.")
                return _error_json(status_code, public)

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        logger.warning("Invalid request body: %s", "; ".join(messages))
        return _error_json(400, InvalidRequestError.public_message)

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
