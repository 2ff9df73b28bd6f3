"""
FastAPI router for the cats bounded context.

All routes delegate to the CatService. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.

Handlers are ``async def`` so they run on the event loop one at a time;
the in-memory repository and the service's uniqueness check rely on that.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from app.application.cats.cat_service import CatService
from app.application.cats.dtos import (
    CatListResult,
    CreateCatCommand,
    ListCatsQuery,
    UpdateCatCommand,
)
from app.domain.cats.entities import Cat
from app.domain.cats.errors import CatNotFoundError
from app.interfaces.cats.dependencies import get_cat_query_params, get_cat_service
from app.interfaces.cats.schemas import (
    CatListResponse,
    CatQueryParams,
    CatResponse,
    CreateCatRequest,
    DeleteCatResponse,
    ErrorResponse,
    PaginationSchema,
    UpdateCatRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cats", tags=["cats"])

CatId = Annotated[
    UUID,
    Path(
        description="Unique identifier of the cat",
        examples=["123e4567-e89b-12d3-a456-426614174000"],
    ),
]


def _to_response(cat: Cat) -> CatResponse:
    return CatResponse(
        id=cat.id,
        name=cat.name,
        age=cat.age,
        breed=cat.breed,
        color=cat.color,
        is_adopted=cat.is_adopted,
        created_at=cat.created_at,
        updated_at=cat.updated_at,
    )


def _to_list_response(result: CatListResult) -> CatListResponse:
    return CatListResponse(
        cats=[_to_response(cat) for cat in result.cats],
        pagination=PaginationSchema(
            page=result.pagination.page,
            limit=result.pagination.limit,
            total=result.pagination.total,
            total_pages=result.pagination.total_pages,
        ),
    )


@router.get(
    "",
    response_model=CatListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Get all cats with pagination and filtering",
    description=(
        "Returns one page of cats, optionally filtered by a breed substring "
        "(case-insensitive) and adoption status."
    ),
)
async def get_all_cats(
    params: CatQueryParams = Depends(get_cat_query_params),
    service: CatService = Depends(get_cat_service),
) -> CatListResponse:
    """List cats with pagination metadata."""
    query = ListCatsQuery(
        page=params.page,
        limit=params.limit,
        breed=params.breed,
        is_adopted=params.is_adopted,
    )
    return _to_list_response(service.get_all_cats(query))


@router.post(
    "",
    response_model=CatResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a new cat",
    description=(
        "Creates a new cat. All fields are required except isAdopted, which "
        "defaults to false. The id and timestamps are assigned by the server."
    ),
)
async def create_cat(
    request: CreateCatRequest,
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Create a cat."""
    command = CreateCatCommand(
        name=request.name,
        age=request.age,
        breed=request.breed,
        color=request.color,
        is_adopted=request.is_adopted,
    )
    return _to_response(service.create_cat(command))


@router.get(
    "/{cat_id}",
    response_model=CatResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a cat by ID",
    description="Retrieves a cat by its unique identifier.",
)
async def get_cat(
    cat_id: CatId,
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Fetch a single cat."""
    cat = service.get_cat_by_id(str(cat_id))
    if cat is None:
        raise CatNotFoundError(str(cat_id))
    return _to_response(cat)


@router.put(
    "/{cat_id}",
    response_model=CatResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Update a cat by ID",
    description="Updates only the provided fields of an existing cat.",
)
async def update_cat(
    request: UpdateCatRequest,
    cat_id: CatId,
    service: CatService = Depends(get_cat_service),
) -> CatResponse:
    """Partially update a cat."""
    logger.info(
        "Update requested for cat id=%s fields=%s",
        cat_id,
        sorted(request.model_fields_set),
    )
    command = UpdateCatCommand(
        cat_id=str(cat_id),
        name=request.name,
        age=request.age,
        breed=request.breed,
        color=request.color,
        is_adopted=request.is_adopted,
    )
    return _to_response(service.update_cat(command))


@router.delete(
    "/{cat_id}",
    response_model=DeleteCatResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a cat by ID",
    description="Permanently deletes a cat by its unique identifier.",
)
async def delete_cat(
    cat_id: CatId,
    service: CatService = Depends(get_cat_service),
) -> DeleteCatResponse:
    """Delete a cat."""
    deleted_id = str(cat_id)
    if not service.delete_cat(deleted_id):
        raise CatNotFoundError(deleted_id)
    return DeleteCatResponse(
        success=True,
        message=f"Cat with ID {deleted_id} has been successfully deleted",
        deleted_id=deleted_id,
    )
