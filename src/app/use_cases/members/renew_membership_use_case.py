"""
Renew Membership Use Case

Pushes a member's expiry to one year from today.
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import today
from src.domain.membership import one_year_after
from src.libs.result import Result, Return

from .dtos import RenewMembershipResponse
from .errors import MEMBER_NOT_FOUND

logger = logging.getLogger(__name__)


class RenewMembershipUseCase:
    """
    Use case for membership renewal.

    Business Rules:
    - New expiry is always today + 1 year, never added to the old expiry
    - Applies to expired members as well
    - Repeated calls on the same day yield the same expiry
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: int) -> Result[RenewMembershipResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            member.expiry_date = one_year_after(today())
            member = await self.uow.members.update(member)
            await self.uow.commit()

        logger.info(f"Member {member_id} renewed until {member.expiry_date}")
        return Return.ok(
            RenewMembershipResponse(
                message="Membership renewed successfully",
                expiry_date=member.expiry_date,
            )
        )
