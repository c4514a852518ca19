"""
Reset Password Use Case

Replaces a member's password with a freshly generated one.
"""

import logging

from config import ApplicationConfig
from src.app.services.credentials import generate_password
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return

from .dtos import ResetPasswordResponse
from .errors import MEMBER_NOT_FOUND

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for admin-driven credential reset.

    Business Rules:
    - Only the bcrypt hash is stored
    - The cleartext password is returned once, in this response
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: int) -> Result[ResetPasswordResponse]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            new_password = generate_password(ApplicationConfig.MEMBER_PASSWORD_LENGTH)
            member.password_hash = hash_password(new_password)
            await self.uow.members.update(member)
            await self.uow.commit()

        logger.info(f"Password reset for member {member_id}")
        return Return.ok(
            ResetPasswordResponse(
                message="Password reset successfully", new_password=new_password
            )
        )
