"""
List Members Use Cases

Member directory for admins, with status derived at read time.
"""

from datetime import timedelta
from typing import List, Optional

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import today
from src.libs.result import Error, Result, Return

from .dtos import MemberResponse
from .errors import MEMBER_NOT_FOUND


class ListMembersUseCase:
    """All members, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[MemberResponse]]:
        async with self.uow:
            members = await self.uow.members.list_all()
            current_day = today()
            return Return.ok(
                [MemberResponse.from_member(m, current_day) for m in members]
            )


class GetMemberUseCase:
    """Single member by ID"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: int) -> Result[MemberResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)
            return Return.ok(MemberResponse.from_member(member, today()))


class ListExpiringMembersUseCase:
    """
    Members whose card expires between today and today + days.

    Business Rules:
    - days defaults to EXPIRING_SOON_DAYS
    - Already expired members are not included
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, days: Optional[int] = None) -> Result[List[MemberResponse]]:
        if days is None:
            days = ApplicationConfig.EXPIRING_SOON_DAYS
        if days < 0:
            return Return.err(Error("VALIDATION_ERROR", "days must not be negative"))

        current_day = today()
        async with self.uow:
            members = await self.uow.members.list_expiring_between(
                current_day, current_day + timedelta(days=days)
            )
            return Return.ok(
                [MemberResponse.from_member(m, current_day) for m in members]
            )
