"""
Film Entity

A scheduled screening in the club catalog.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Film(SQLModel, table=True):
    """
    Film entity - one scheduled screening.

    Business Rules:
    - Upcoming when scheduled_date >= now, past otherwise
    - cover_image is an optional poster reference (path or URL)
    """

    __tablename__ = "films"

    id: Optional[int] = Field(default=None, primary_key=True)

    title: str = Field(max_length=255)
    director: str = Field(max_length=255)
    cast: str = Field(sa_column=Column(Text, nullable=False))
    plot: str = Field(sa_column=Column(Text, nullable=False))
    cover_image: Optional[str] = Field(default=None, max_length=500)

    scheduled_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_film_scheduled_date", "scheduled_date"),)
