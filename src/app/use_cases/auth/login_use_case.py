"""
Login Use Case

Verifies admin or member credentials and issues a 24-hour access token.
"""

from config import ApplicationConfig
from src.api.utils.jwt import create_access_token
from src.app.services.passwords import burn_verification, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import today
from src.domain.entities import Member, Role
from src.domain.membership import classify_membership
from src.libs.result import Error, Result, Return

from .dtos import LoginResponse, PrincipalInfo


def member_principal_info(member: Member) -> PrincipalInfo:
    return PrincipalInfo(
        id=member.id,
        username=member.username,
        role=Role.member,
        full_name=member.full_name,
        membership_code=member.membership_code,
        expiry_date=member.expiry_date,
        qr_code=member.qr_code,
        status=classify_membership(
            member.expiry_date, today(), ApplicationConfig.EXPIRING_SOON_DAYS
        ),
    )


class LoginUseCase:
    """
    Use case for admin/member login and token issuance.

    Business Rules:
    - Username is looked up among admins first, then among members
    - Constant-time password comparison (bcrypt.checkpw)
    - Unknown username still costs one hash verification
    - Failure is always INVALID_CREDENTIALS: it never tells which of
      username/password was wrong, nor which kind of account was tried
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, username: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Admin or member username
            password: Plain text password

        Returns:
            Result with LoginResponse (token + principal), or Error
        """
        async with self.uow:
            admin = await self.uow.admins.get_by_username(username)
            if admin is not None and verify_password(password, admin.password_hash):
                token = create_access_token(admin.id, admin.username, Role.admin)
                return Return.ok(
                    LoginResponse(
                        token=token,
                        user=PrincipalInfo(
                            id=admin.id, username=admin.username, role=Role.admin
                        ),
                    )
                )

            member = await self.uow.members.get_by_username(username)
            if member is not None and verify_password(password, member.password_hash):
                token = create_access_token(member.id, member.username, Role.member)
                return Return.ok(
                    LoginResponse(token=token, user=member_principal_info(member))
                )

            if admin is None and member is None:
                burn_verification(password)

            return Return.err(Error("INVALID_CREDENTIALS", "Invalid credentials"))
