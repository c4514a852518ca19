"""
Proposal Register Use Cases

Members suggest films; admins approve or reject each suggestion once.
"""

from typing import List

from src.app.repositories.errors import PersistenceFailure
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import FilmProposal, ProposalStatus, Role
from src.domain.principal import Principal
from src.libs.result import Error, Result, Return

from .dtos import ProposalResponse, SubmitProposalCommand


class SubmitProposalUseCase:
    """New proposals always start as pending"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, member_id: int, command: SubmitProposalCommand
    ) -> Result[ProposalResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            try:
                proposal = await self.uow.proposals.create(
                    FilmProposal(
                        member_id=member_id,
                        title=command.title,
                        director=command.director,
                        reason=command.reason,
                        status=ProposalStatus.pending,
                    )
                )
            except PersistenceFailure:
                return Return.err(
                    Error("PERSISTENCE_ERROR", "Failed to create proposal")
                )
            await self.uow.commit()

        return Return.ok(ProposalResponse.from_proposal(proposal))


class ListProposalsUseCase:
    """
    Business Rules:
    - Admins see every proposal with the author's name
    - Members see only their own proposals
    - Newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[List[ProposalResponse]]:
        async with self.uow:
            if principal.role == Role.admin:
                rows = await self.uow.proposals.list_all_with_members()
                return Return.ok(
                    [
                        ProposalResponse.from_proposal(proposal, member.full_name)
                        for proposal, member in rows
                    ]
                )

            proposals = await self.uow.proposals.list_by_member(principal.id)
            return Return.ok([ProposalResponse.from_proposal(p) for p in proposals])


class ReviewProposalUseCase:
    """
    Business Rules:
    - Target status must be approved or rejected
    - Only pending proposals can be reviewed (no revert); the store
      applies the transition only while the row is still pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, proposal_id: int, status: str) -> Result[ProposalResponse]:
        if status not in (ProposalStatus.approved.value, ProposalStatus.rejected.value):
            return Return.err(
                Error(
                    "INVALID_STATUS",
                    f"Invalid status: {status}. Must be one of: approved, rejected",
                )
            )

        async with self.uow:
            proposal = await self.uow.proposals.get_by_id(proposal_id)
            if proposal is None:
                return Return.err(Error("PROPOSAL_NOT_FOUND", "Proposal not found"))

            if proposal.status != ProposalStatus.pending:
                return Return.err(
                    Error(
                        "PROPOSAL_ALREADY_REVIEWED",
                        f"Proposal already {ProposalStatus(proposal.status).value}",
                    )
                )

            # Another reviewer may have got there since the read above
            proposal = await self.uow.proposals.resolve_pending(
                proposal_id, ProposalStatus(status)
            )
            if proposal is None:
                return Return.err(
                    Error("PROPOSAL_ALREADY_REVIEWED", "Proposal already reviewed")
                )
            await self.uow.commit()

        return Return.ok(ProposalResponse.from_proposal(proposal))
