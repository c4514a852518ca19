from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict, Field

from src.api.error import raise_for_error
from src.api.utils.authorization import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.films import (
    CreateFilmCommand,
    CreateFilmUseCase,
    DeleteFilmUseCase,
    FilmMessageResponse,
    FilmResponse,
    FilmScope,
    GetFilmUseCase,
    ListFilmsUseCase,
    UpdateFilmCommand,
    UpdateFilmUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.base import CamelModel
from src.domain.entities import Role

router = APIRouter(
    prefix="/films", tags=["Films"], dependencies=[Depends(get_current_principal)]
)


class FilmRequest(CamelModel):
    """Create film HTTP request payload"""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255)
    director: str = Field(..., min_length=1, max_length=255)
    cast: str = Field(..., min_length=1)
    plot: str = Field(..., min_length=1)
    cover_image: Optional[str] = Field(None, max_length=500, description="Poster reference")
    scheduled_date: datetime


class FilmUpdateRequest(CamelModel):
    """Partial film update payload"""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    director: Optional[str] = Field(None, min_length=1, max_length=255)
    cast: Optional[str] = Field(None, min_length=1)
    plot: Optional[str] = Field(None, min_length=1)
    cover_image: Optional[str] = Field(None, max_length=500)
    scheduled_date: Optional[datetime] = None


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=FilmResponse,
    dependencies=[Depends(require(Role.admin))],
)
async def create_film(request: FilmRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Schedule a new screening"""
    command = CreateFilmCommand(**request.model_dump())
    result = await CreateFilmUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[FilmResponse])
async def list_films(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All films by date, each with its attendance count"""
    result = await ListFilmsUseCase(uow).execute(FilmScope.all)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/upcoming", status_code=status.HTTP_200_OK, response_model=List[FilmResponse])
async def list_upcoming_films(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Films scheduled from now on, soonest first"""
    result = await ListFilmsUseCase(uow).execute(FilmScope.upcoming)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/past", status_code=status.HTTP_200_OK, response_model=List[FilmResponse])
async def list_past_films(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Films already screened, most recent first"""
    result = await ListFilmsUseCase(uow).execute(FilmScope.past)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{film_id}", status_code=status.HTTP_200_OK, response_model=FilmResponse)
async def get_film(film_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: FILM_NOT_FOUND
    """
    result = await GetFilmUseCase(uow).execute(film_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/{film_id}",
    status_code=status.HTTP_200_OK,
    response_model=FilmResponse,
    dependencies=[Depends(require(Role.admin))],
)
async def update_film(
    film_id: int, request: FilmUpdateRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Raises:
        - 404 Not Found: FILM_NOT_FOUND
    """
    command = UpdateFilmCommand(**request.model_dump(exclude_none=True))
    result = await UpdateFilmUseCase(uow).execute(film_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{film_id}",
    status_code=status.HTTP_200_OK,
    response_model=FilmMessageResponse,
    dependencies=[Depends(require(Role.admin))],
)
async def delete_film(film_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Deletes the film and its attendance records.

    Raises:
        - 404 Not Found: FILM_NOT_FOUND
    """
    result = await DeleteFilmUseCase(uow).execute(film_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
