from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.film_repository import IFilmRepository
from src.domain.entities import Attendance, Film

from .integrity import flush_checked


class FilmRepository(IFilmRepository):
    """Film repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, film_id: int) -> Optional[Film]:
        """Get film by ID"""
        stmt = select(Film).where(Film.id == film_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Film]:
        """List all films by scheduled date"""
        stmt = select(Film).order_by(Film.scheduled_date.asc(), Film.id.asc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_upcoming(self, now: datetime) -> List[Film]:
        """List films scheduled at or after now"""
        stmt = (
            select(Film)
            .where(Film.scheduled_date >= now)
            .order_by(Film.scheduled_date.asc(), Film.id.asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_past(self, now: datetime) -> List[Film]:
        """List films scheduled before now"""
        stmt = (
            select(Film)
            .where(Film.scheduled_date < now)
            .order_by(Film.scheduled_date.desc(), Film.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, film: Film) -> Film:
        """Create a new film"""
        self.session.add(film)
        await flush_checked(self.session, Film.__table__)
        await self.session.refresh(film)
        return film

    async def update(self, film: Film) -> Film:
        """Update existing film"""
        self.session.add(film)
        await flush_checked(self.session, Film.__table__)
        await self.session.refresh(film)
        return film

    async def delete(self, film: Film) -> None:
        """Delete film with its attendance"""
        await self.session.execute(
            delete(Attendance).where(Attendance.film_id == film.id)
        )
        await self.session.delete(film)
        await flush_checked(self.session, Film.__table__)
