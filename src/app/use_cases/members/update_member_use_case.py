"""
Update Member Use Case

Partial update of a member's profile fields.
"""

from src.app.repositories.errors import PersistenceFailure, UniqueViolation
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import today
from src.libs.result import Error, Result, Return

from .dtos import MemberResponse, UpdateMemberCommand
from .errors import MEMBER_NOT_FOUND, duplicate_error


class UpdateMemberUseCase:
    """
    Use case for editing a member's profile.

    Business Rules:
    - Only profile fields change; credentials, code and expiry have
      their own operations
    - Changing the tax code to one already in use -> DUPLICATE_TAX_CODE
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, member_id: int, command: UpdateMemberCommand
    ) -> Result[MemberResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            for field, value in command.model_dump(exclude_none=True).items():
                setattr(member, field, value)

            try:
                member = await self.uow.members.update(member)
            except UniqueViolation as exc:
                return Return.err(duplicate_error(exc.constraint))
            except PersistenceFailure:
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to update member"))

            await self.uow.commit()

        return Return.ok(MemberResponse.from_member(member, today()))
