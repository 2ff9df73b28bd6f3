"""
Secure HTTP headers middleware.

Adds security-related headers to every response, including the generic
500 built for an unexpected error raised further in. The interactive
documentation pages load their assets from a CDN, so they are served
without the restrictive Content-Security-Policy.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.handlers import handle_unexpected_error

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
}
CSP_HEADER = "Content-Security-Policy"
CSP_VALUE = "default-src 'self'"
DOCS_PATHS = ("/docs", "/redoc")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response."""

    def __init__(self, app: ASGIApp, csp_exempt_paths: tuple[str, ...] = DOCS_PATHS) -> None:
        super().__init__(app)
        self._csp_exempt_paths = csp_exempt_paths

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await handle_unexpected_error(request, exc)
        response.headers.update(SECURE_HEADERS)
        if not request.url.path.startswith(self._csp_exempt_paths):
            response.headers[CSP_HEADER] = CSP_VALUE
        return response
