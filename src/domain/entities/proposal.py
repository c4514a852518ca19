"""
FilmProposal Entity

Member suggestion for a future screening.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ProposalStatus


class FilmProposal(SQLModel, table=True):
    """
    FilmProposal entity - a member's suggestion for the programme.

    Business Rules:
    - Created with status=pending
    - Only admins review, pending -> approved | rejected (no revert)
    """

    __tablename__ = "film_proposals"

    id: Optional[int] = Field(default=None, primary_key=True)

    member_id: int = Field(foreign_key="members.id", nullable=False, index=True)
    title: str = Field(max_length=255)
    director: str = Field(max_length=255)
    reason: str = Field(sa_column=Column(Text, nullable=False))

    status: ProposalStatus = Field(default=ProposalStatus.pending)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_proposal_status", "status"),)
