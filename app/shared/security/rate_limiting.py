"""
Rate limiting configuration and setup.

Uses a slowapi Limiter (and the limits storage behind it) to enforce a
per-client default limit on every request. Each application instance
gets its own limiter so counters never leak between apps (or between
tests).
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

HTTP_429 = 429
DEFAULT_SCOPE = "default"


def build_limiter(enabled: bool = True) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        enabled: When False every request is let through.
    """
    return Limiter(key_func=get_remote_address, enabled=enabled)


def rate_limit_exceeded_response(detail: str) -> JSONResponse:
    """Build the 429 response body."""
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": detail},
    )


class DefaultRateLimitMiddleware(BaseHTTPMiddleware):
    """Counts every request against one limit per client address.

    The count is kept in the limiter's storage and does not depend on
    which route, if any, matches the request.
    """

    def __init__(
        self,
        app: ASGIApp,
        limiter: Limiter,
        limit: str,
        key_func: Callable[[Request], str] = get_remote_address,
    ) -> None:
        super().__init__(app)
        self._limiter = limiter
        self._limit = parse(limit)
        self._key_func = key_func

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._limiter.enabled:
            key = self._key_func(request)
            if not self._limiter.limiter.hit(self._limit, DEFAULT_SCOPE, key):
                logger.warning("Rate limit exceeded: client=%s limit=%s", key, self._limit)
                return rate_limit_exceeded_response(str(self._limit))
        return await call_next(request)


def install_rate_limiting(app: FastAPI, limiter: Limiter, default_limit: str) -> None:
    """Attach the limiter and its middleware to the app.

    Args:
        app: The FastAPI application instance.
        limiter: The per-app limiter.
        default_limit: Limit string such as "60/minute".
    """
    app.state.limiter = limiter
    app.add_middleware(DefaultRateLimitMiddleware, limiter=limiter, limit=default_limit)
