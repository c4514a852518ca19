"""
Ensure Default Admin Use Case

Seeds the first administrator at startup.
"""

import logging

from pydantic import BaseModel

from src.app.repositories.errors import UniqueViolation
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Admin
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class EnsureDefaultAdminResponse(BaseModel):
    """Response for ensure default admin use case"""

    username: str
    created: bool


class EnsureDefaultAdminUseCase:
    """
    Idempotent bootstrap of the default admin account.

    Business Rules:
    - Credentials come from configuration (operator must rotate them)
    - An existing admin with the same username is left untouched
    - A concurrent bootstrap losing the insert race counts as "exists"
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, username: str, password: str
    ) -> Result[EnsureDefaultAdminResponse]:
        async with self.uow:
            existing = await self.uow.admins.get_by_username(username)
            if existing is not None:
                return Return.ok(
                    EnsureDefaultAdminResponse(username=username, created=False)
                )

            try:
                await self.uow.admins.create(
                    Admin(username=username, password_hash=hash_password(password))
                )
            except UniqueViolation:
                return Return.ok(
                    EnsureDefaultAdminResponse(username=username, created=False)
                )

            await self.uow.commit()

        logger.warning(
            f"Default admin '{username}' created; change its password after first login"
        )
        return Return.ok(EnsureDefaultAdminResponse(username=username, created=True))
