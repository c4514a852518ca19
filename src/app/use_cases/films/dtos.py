"""
Film Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.domain.entities import Film


class FilmScope(str, Enum):
    """Which part of the programme to list"""

    all = "all"
    upcoming = "upcoming"
    past = "past"


class CreateFilmCommand(BaseModel):
    """Validated film data"""

    title: str
    director: str
    cast: str
    plot: str
    cover_image: Optional[str] = None
    scheduled_date: datetime


class UpdateFilmCommand(BaseModel):
    """Partial film update; None means "leave unchanged" """

    title: Optional[str] = None
    director: Optional[str] = None
    cast: Optional[str] = None
    plot: Optional[str] = None
    cover_image: Optional[str] = None
    scheduled_date: Optional[datetime] = None


class FilmResponse(CamelModel):
    """Film with its attendance count derived from the ledger"""

    id: int
    title: str
    director: str
    cast: str
    plot: str
    cover_image: Optional[str] = None
    scheduled_date: datetime
    created_at: datetime
    attendance_count: int = 0

    @classmethod
    def from_film(cls, film: Film, attendance_count: int = 0) -> "FilmResponse":
        return cls(
            id=film.id,
            title=film.title,
            director=film.director,
            cast=film.cast,
            plot=film.plot,
            cover_image=film.cover_image,
            scheduled_date=film.scheduled_date,
            created_at=film.created_at,
            attendance_count=attendance_count,
        )


class FilmMessageResponse(CamelModel):
    """Plain acknowledgement"""

    message: str
