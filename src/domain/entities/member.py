"""
Member Entity

Registered club member with a membership card.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlmodel import Column, Date, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Member(SQLModel, table=True):
    """
    Member entity - a club member holding a membership card.

    Business Rules:
    - username, tax_code and membership_code are globally unique
    - membership_code is "CF" followed by 6 zero-padded digits
    - qr_code is rendered once from membership_code and stored as a data URL
    - expiry_date is one year after registration, reset on renewal
    """

    __tablename__ = "members"

    id: Optional[int] = Field(default=None, primary_key=True)

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    birth_date: date = Field(sa_column=Column(Date, nullable=False))
    tax_code: str = Field(max_length=16)
    email: str = Field(max_length=255)

    username: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)

    membership_code: str = Field(max_length=8)
    qr_code: str = Field(sa_column=Column(Text, nullable=False))

    expiry_date: date = Field(sa_column=Column(Date, nullable=False))
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("username", name="uq_members_username"),
        UniqueConstraint("tax_code", name="uq_members_tax_code"),
        UniqueConstraint("membership_code", name="uq_members_membership_code"),
        Index("idx_member_created_at", "created_at"),
        Index("idx_member_expiry_date", "expiry_date"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
