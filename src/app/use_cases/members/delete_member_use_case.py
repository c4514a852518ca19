"""
Delete Member Use Case
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import MessageResponse
from .errors import MEMBER_NOT_FOUND

logger = logging.getLogger(__name__)


class DeleteMemberUseCase:
    """
    Use case for removing a member.

    Business Rules:
    - The member's attendance and proposals are removed with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: int) -> Result[MessageResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            await self.uow.members.delete(member)
            await self.uow.commit()

        logger.info(f"Member {member_id} deleted")
        return Return.ok(MessageResponse(message="Member deleted successfully"))
