"""
Load Profile Use Case

Resolves the token principal to its current account and, for members,
the membership card.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role
from src.domain.principal import Principal
from src.libs.result import Error, Result, Return

from .dtos import PrincipalInfo
from .login_use_case import member_principal_info


class LoadProfileUseCase:
    """
    Use case for GET /auth/me.

    Business Rules:
    - Account deleted after token issuance -> AUTHENTICATION_ERROR
    - Membership status is derived on every read
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[PrincipalInfo]:
        async with self.uow:
            if principal.role == Role.admin:
                admin = await self.uow.admins.get_by_id(principal.id)
                if admin is None:
                    return Return.err(
                        Error("AUTHENTICATION_ERROR", "Account no longer exists")
                    )
                return Return.ok(
                    PrincipalInfo(id=admin.id, username=admin.username, role=Role.admin)
                )

            member = await self.uow.members.get_by_id(principal.id)
            if member is None:
                return Return.err(
                    Error("AUTHENTICATION_ERROR", "Account no longer exists")
                )
            return Return.ok(member_principal_info(member))
