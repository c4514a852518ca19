"""
Admin Entity

Club administrator account.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Admin(SQLModel, table=True):
    """
    Admin entity - club administrator.

    Business Rules:
    - Username must be unique across all admins
    - Password stored as bcrypt hash
    - One default admin is seeded at startup when missing
    """

    __tablename__ = "admins"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (UniqueConstraint("username", name="uq_admins_username"),)
