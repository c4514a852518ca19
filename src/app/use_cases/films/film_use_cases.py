"""
Film Catalog Use Cases

Screening catalog: create, list (all / upcoming / past), get, update,
delete. Attendance counts are read from the ledger, never stored.
"""

import logging
from typing import List

from src.app.repositories.errors import PersistenceFailure
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import Film
from src.libs.result import Error, Result, Return

from .dtos import (
    CreateFilmCommand,
    FilmMessageResponse,
    FilmResponse,
    FilmScope,
    UpdateFilmCommand,
)

logger = logging.getLogger(__name__)

FILM_NOT_FOUND = Error("FILM_NOT_FOUND", "Film not found")


class CreateFilmUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateFilmCommand) -> Result[FilmResponse]:
        film = Film(**command.model_dump())
        film.scheduled_date = to_naive_utc(film.scheduled_date)
        async with self.uow:
            try:
                film = await self.uow.films.create(film)
            except PersistenceFailure as exc:
                logger.error(f"Film creation failed: {exc.detail}")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to create film"))
            await self.uow.commit()
        return Return.ok(FilmResponse.from_film(film))


class ListFilmsUseCase:
    """
    Business Rules:
    - all: ascending by scheduled date
    - upcoming: scheduled at or after now, soonest first
    - past: scheduled before now, most recent first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, scope: FilmScope = FilmScope.all) -> Result[List[FilmResponse]]:
        async with self.uow:
            if scope == FilmScope.upcoming:
                films = await self.uow.films.list_upcoming(utcnow())
            elif scope == FilmScope.past:
                films = await self.uow.films.list_past(utcnow())
            else:
                films = await self.uow.films.list_all()
            counts = await self.uow.attendance.count_by_film()
            return Return.ok(
                [FilmResponse.from_film(film, counts.get(film.id, 0)) for film in films]
            )


class GetFilmUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: int) -> Result[FilmResponse]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(FILM_NOT_FOUND)
            attendance = await self.uow.attendance.list_by_film(film_id)
            return Return.ok(FilmResponse.from_film(film, len(attendance)))


class UpdateFilmUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, film_id: int, command: UpdateFilmCommand
    ) -> Result[FilmResponse]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(FILM_NOT_FOUND)

            for field, value in command.model_dump(exclude_none=True).items():
                setattr(film, field, value)
            film.scheduled_date = to_naive_utc(film.scheduled_date)

            film = await self.uow.films.update(film)
            attendance = await self.uow.attendance.list_by_film(film_id)
            await self.uow.commit()
        return Return.ok(FilmResponse.from_film(film, len(attendance)))


class DeleteFilmUseCase:
    """Deleting a film also removes its attendance records"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: int) -> Result[FilmMessageResponse]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(FILM_NOT_FOUND)
            await self.uow.films.delete(film)
            await self.uow.commit()

        logger.info(f"Film {film_id} deleted")
        return Return.ok(FilmMessageResponse(message="Film deleted successfully"))
