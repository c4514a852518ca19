from typing import List, Optional, Tuple

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.proposal_repository import IProposalRepository
from src.domain.entities import FilmProposal, Member, ProposalStatus

from .integrity import flush_checked


class ProposalRepository(IProposalRepository):
    """FilmProposal repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, proposal_id: int) -> Optional[FilmProposal]:
        """Get proposal by ID"""
        stmt = select(FilmProposal).where(FilmProposal.id == proposal_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_member(self, member_id: int) -> List[FilmProposal]:
        """List a member's proposals, newest first"""
        stmt = (
            select(FilmProposal)
            .where(FilmProposal.member_id == member_id)
            .order_by(FilmProposal.created_at.desc(), FilmProposal.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_all_with_members(self) -> List[Tuple[FilmProposal, Member]]:
        """List all proposals with their author, newest first"""
        stmt = (
            select(FilmProposal, Member)
            .join(Member, FilmProposal.member_id == Member.id)
            .order_by(FilmProposal.created_at.desc(), FilmProposal.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, proposal: FilmProposal) -> FilmProposal:
        """Create a new proposal"""
        self.session.add(proposal)
        await flush_checked(self.session, FilmProposal.__table__)
        await self.session.refresh(proposal)
        return proposal

    async def resolve_pending(
        self, proposal_id: int, status: ProposalStatus
    ) -> Optional[FilmProposal]:
        """UPDATE ... WHERE status = pending; rowcount tells who won"""
        result = await self.session.execute(
            update(FilmProposal)
            .where(
                FilmProposal.id == proposal_id,
                FilmProposal.status == ProposalStatus.pending,
            )
            .values(status=status)
        )
        if result.rowcount != 1:
            return None

        stmt = (
            select(FilmProposal)
            .where(FilmProposal.id == proposal_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one()
