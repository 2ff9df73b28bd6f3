"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The cat repository, created once per application

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.domain.cats.ports import CatRepository
from app.infrastructure.cats.in_memory_cat_repository import InMemoryCatRepository
from app.interfaces.cats.router import router as cats_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter, install_rate_limiting

API_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {"name": "cats", "description": "Cat management endpoints for CRUD operations"},
    {"name": "system", "description": "System health and information endpoints"},
]


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[CatRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use. Defaults to the environment-loaded settings.
        repository: Cat store to serve. Defaults to a new in-memory repository.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level, app_name=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.cat_repository = (
        repository if repository is not None else InMemoryCatRepository()
    )

    # --- Rate Limiting ---
    install_rate_limiting(
        app,
        build_limiter(enabled=settings.rate_limit_enabled),
        settings.rate_limit_default,
    )

    # --- Security Middleware (outermost, so 429s get headers too) ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(cats_router, prefix=API_PREFIX)

    return app


app = create_app()
