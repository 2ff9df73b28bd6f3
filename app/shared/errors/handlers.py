"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses by error kind only,
never by parsing exception text.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.cats.errors import (
    CatConflictError,
    CatDomainError,
    CatNotFoundError,
    CatValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500

_LOCATION_PREFIXES = ("body", "query", "path")
_VALUE_ERROR_PREFIX = "Value error, "


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    fields: list[dict[str, str]] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, Any] = {"error": error}
    if detail:
        body["detail"] = detail
    if fields:
        body["fields"] = fields
    return JSONResponse(status_code=status_code, content=body)


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def format_request_errors(errors: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """Turn pydantic error dicts into ``{"field", "message"}`` pairs."""
    formatted = []
    for err in errors:
        message = str(err.get("msg", "Invalid value"))
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        formatted.append({"field": _field_name(err.get("loc", ())), "message": message})
    return formatted


async def handle_unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected errors. Never exposes internals."""
    logger.exception("Unexpected error: %s", type(exc).__name__)
    return _error_response(HTTP_500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle schema failures: bad body, bad query, malformed id."""
        fields = format_request_errors(exc.errors())
        logger.info("Request validation failed: %s", [f["field"] for f in fields])
        return _error_response(HTTP_400, "Validation failed", fields=fields)

    @app.exception_handler(CatValidationError)
    async def handle_cat_validation(
        _request: Request, exc: CatValidationError
    ) -> JSONResponse:
        """Handle business-rule validation failures."""
        logger.info("Cat validation failed: %s", sorted(exc.errors))
        return _error_response(
            HTTP_400,
            "Validation failed",
            detail=exc.message,
            fields=[
                {"field": field, "message": reason}
                for field, reason in exc.errors.items()
            ],
        )

    @app.exception_handler(CatNotFoundError)
    async def handle_cat_not_found(
        _request: Request, exc: CatNotFoundError
    ) -> JSONResponse:
        """Handle missing cat errors. Expected traffic, not a fault."""
        logger.info("Cat not found: %s", exc.cat_id)
        return _error_response(HTTP_404, "Cat not found", detail=exc.message)

    @app.exception_handler(CatConflictError)
    async def handle_cat_conflict(
        _request: Request, exc: CatConflictError
    ) -> JSONResponse:
        """Handle duplicate cat names."""
        logger.warning("Cat name conflict: %s", exc.name)
        return _error_response(HTTP_409, "Cat already exists", detail=exc.message)

    @app.exception_handler(CatDomainError)
    async def handle_cat_domain(
        _request: Request, exc: CatDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled cat domain errors."""
        logger.error("Unhandled cat domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    app.add_exception_handler(Exception, handle_unexpected_error)
