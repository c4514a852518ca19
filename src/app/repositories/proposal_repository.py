from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import FilmProposal, Member, ProposalStatus


class IProposalRepository(ABC):
    """FilmProposal repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, proposal_id: int) -> Optional[FilmProposal]:
        """Get proposal by ID"""
        pass

    @abstractmethod
    async def list_by_member(self, member_id: int) -> List[FilmProposal]:
        """List a member's proposals, newest first"""
        pass

    @abstractmethod
    async def list_all_with_members(self) -> List[Tuple[FilmProposal, Member]]:
        """List all proposals joined with their author, newest first"""
        pass

    @abstractmethod
    async def create(self, proposal: FilmProposal) -> FilmProposal:
        """Create a new proposal"""
        pass

    @abstractmethod
    async def resolve_pending(
        self, proposal_id: int, status: ProposalStatus
    ) -> Optional[FilmProposal]:
        """Move a pending proposal to status in one conditional write

        Returns None when the proposal was no longer pending.
        """
        pass
