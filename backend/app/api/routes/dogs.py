"""Dog Routes — create/list/get/update/delete over the Dog store.

Invariants:
    - Validation is delegated to core/dog_validation (pure); routes only map
      results to status codes
    - A rejected POST never touches the store
    - GET/DELETE answer 400 for a non-numeric id before any store access
    - Absence on GET/DELETE is 204 with an empty body, not 404
    - PATCH forwards allow-listed fields even when invalid keys were sent, and
      answers 201 whether or not key errors were collected
    - A missing or null body is read as an empty object
    - PATCH does not check the id before calling the store; a bad id surfaces
      as DogNotFoundError through the global error handlers

Design Decisions:
    - Store reached through the DogRepository protocol, injected per request
    - Path ids taken as raw strings: coercion follows JavaScript Number()
      rules, which FastAPI's int converter does not
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dog_validation import (
    INVALID_ID_MESSAGE,
    as_dog_id,
    coerce_numeric_id,
    invalid_key_errors,
    select_dog_fields,
    validate_new_dog,
)
from app.core.repository_protocols import DogRepository
from app.infrastructure.database import get_db
from app.infrastructure.dog_repository import SqlDogRepository
from app.schemas.dog import DogResponse, ErrorListResponse, MessageResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dogs", tags=["dogs"])

JsonObject = Annotated[dict[str, Any] | None, Body()]


def get_dog_repository(
    db: AsyncSession = Depends(get_db),
) -> DogRepository:
    """FastAPI dependency — the only place routes learn which store they use."""
    return SqlDogRepository(db)


Repository = Annotated[DogRepository, Depends(get_dog_repository)]


def _invalid_id_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_ID_MESSAGE},
    )


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "", response_model=DogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorListResponse}},
)
async def create_dog(repository: Repository, body: JsonObject = None):
    """Create a dog. All four fields required, no other keys allowed."""
    body = {} if body is None else body
    errors = validate_new_dog(body)
    if errors:
        logger.warning(
            f"Rejected dog creation: {errors}",
            extra={"path": "/dogs", "method": "POST"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": errors},
        )
    dog = await repository.create(body)
    logger.info(f"Created dog {dog.id}", extra={"dog_id": dog.id})
    return DogResponse.model_validate(dog)


@router.get("/", response_model=list[DogResponse])
async def list_dogs(repository: Repository):
    """List every dog in ascending id order."""
    dogs = await repository.list_all()
    return [DogResponse.model_validate(d) for d in dogs]


@router.get(
    "/{dog_id}", response_model=DogResponse,
    responses={204: {"description": "No dog with this id"},
               400: {"model": MessageResponse}},
)
async def get_dog(dog_id: str, repository: Repository):
    """Get one dog by id."""
    value = coerce_numeric_id(dog_id)
    if value is None:
        return _invalid_id_response()
    storable_id = as_dog_id(value)
    dog = await repository.get_by_id(storable_id) if storable_id is not None else None
    if dog is None:
        return _no_content()
    return DogResponse.model_validate(dog)


@router.patch(
    "/{dog_id}", response_model=DogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={201: {"description": "Updated dog, or {errors} when unknown keys were sent"}},
)
async def update_dog(dog_id: str, repository: Repository, body: JsonObject = None):
    """Update some or all fields of a dog. Unknown keys are reported, not stored."""
    body = {} if body is None else body
    errors = invalid_key_errors(body)
    storable_id = as_dog_id(coerce_numeric_id(dog_id))
    dog = await repository.update(storable_id, select_dog_fields(body))
    logger.info(f"Updated dog {dog.id}", extra={"dog_id": dog.id})
    if errors:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content={"errors": errors},
        )
    return DogResponse.model_validate(dog)


@router.delete(
    "/{dog_id}", response_model=DogResponse,
    responses={204: {"description": "No dog with this id"},
               400: {"model": MessageResponse}},
)
async def delete_dog(dog_id: str, repository: Repository):
    """Delete a dog, answering with the record as it was before deletion."""
    value = coerce_numeric_id(dog_id)
    if value is None:
        return _invalid_id_response()
    storable_id = as_dog_id(value)
    dog = await repository.delete(storable_id) if storable_id is not None else None
    if dog is None:
        return _no_content()
    logger.info(f"Deleted dog {dog.id}", extra={"dog_id": dog.id})
    return DogResponse.model_validate(dog)
