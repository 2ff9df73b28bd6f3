"""
Dependency injection for the cats bounded context.

Provides FastAPI dependency functions that hand the application's single
repository instance to the service via constructor injection.
The repository itself is created once per application in ``create_app``.
"""

from typing import Optional

from fastapi import Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.application.cats.cat_service import CatService
from app.domain.cats.ports import CatRepository
from app.interfaces.cats.schemas import CatQueryParams


def get_cat_repository(request: Request) -> CatRepository:
    """Return the repository owned by the running application."""
    return request.app.state.cat_repository


def get_cat_service(request: Request) -> CatService:
    """Build a CatService around the application's repository."""
    return CatService(repository=get_cat_repository(request))


def get_cat_query_params(
    page: Optional[str] = Query(default=None, description="Page number (starts from 1)"),
    limit: Optional[str] = Query(default=None, description="Items per page (1-100)"),
    breed: Optional[str] = Query(default=None, description="Filter cats by breed"),
    is_adopted: Optional[str] = Query(
        default=None, alias="isAdopted", description="Filter cats by adoption status"
    ),
) -> CatQueryParams:
    """Parse the raw query string into validated CatQueryParams.

    Raises:
        RequestValidationError: If page or limit is malformed or out of range.
    """
    raw = {
        "page": page,
        "limit": limit,
        "breed": breed,
        "isAdopted": is_adopted,
    }
    try:
        return CatQueryParams.model_validate(
            {key: value for key, value in raw.items() if value not in (None, "")}
        )
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("query", *err["loc"])} for err in exc.errors()]
        ) from exc
