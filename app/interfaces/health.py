"""
System routers: health check and API information.

Provides a liveness endpoint and a short index of the available routes.
No business logic. Returns application status and version.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from app.interfaces.cats.schemas import ApiInfoResponse, HealthResponse

router = APIRouter(tags=["system"])

ENDPOINTS = [
    "GET /api/v1/health - Health check",
    "GET /api/v1/cats - List all cats",
    "POST /api/v1/cats - Create a new cat",
    "GET /api/v1/cats/{id} - Get a specific cat",
    "PUT /api/v1/cats/{id} - Update a specific cat",
    "DELETE /api/v1/cats/{id} - Delete a specific cat",
]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the current status and timestamp of the API server.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        version=request.app.version,
    )


@router.get(
    "/",
    response_model=ApiInfoResponse,
    summary="API information",
    description="Returns information about the API and its endpoints.",
)
def api_info(request: Request) -> ApiInfoResponse:
    """Describe the running API."""
    return ApiInfoResponse(
        message=f"{request.app.title} is running",
        version=request.app.version,
        endpoints=ENDPOINTS,
    )
