"""
Proposal Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.base import CamelModel
from src.domain.entities import FilmProposal, ProposalStatus


class SubmitProposalCommand(BaseModel):
    """Validated proposal data"""

    title: str
    director: str
    reason: str


class ProposalResponse(CamelModel):
    """Proposal; member_name is filled in for admin listings"""

    id: int
    member_id: int
    title: str
    director: str
    reason: str
    status: ProposalStatus
    created_at: datetime
    member_name: Optional[str] = None

    @classmethod
    def from_proposal(
        cls, proposal: FilmProposal, member_name: Optional[str] = None
    ) -> "ProposalResponse":
        return cls(
            id=proposal.id,
            member_id=proposal.member_id,
            title=proposal.title,
            director=proposal.director,
            reason=proposal.reason,
            status=proposal.status,
            created_at=proposal.created_at,
            member_name=member_name,
        )
