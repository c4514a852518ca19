"""
Attendance Entity

Proof that a member attended a screening.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Attendance(SQLModel, table=True):
    """
    Attendance entity - one row per (member, film) pair.

    Business Rules:
    - (member_id, film_id) is unique, enforced by the database
    - Never updated once recorded
    - attended_at is assigned by the server
    """

    __tablename__ = "attendance"

    id: Optional[int] = Field(default=None, primary_key=True)

    member_id: int = Field(foreign_key="members.id", nullable=False, index=True)
    film_id: int = Field(foreign_key="films.id", nullable=False, index=True)

    attended_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("member_id", "film_id", name="uq_attendance_member_film"),
        Index("idx_attendance_attended_at", "attended_at"),
    )
