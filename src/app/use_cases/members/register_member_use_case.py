"""
Register Member Use Case

Onboards a new member: credentials, membership code, QR card, expiry.
"""

import logging

from config import ApplicationConfig
from src.app.repositories.errors import PersistenceFailure, UniqueViolation
from src.app.services.credentials import (
    generate_membership_code,
    generate_password,
    generate_username,
)
from src.app.services.passwords import hash_password
from src.app.services.qr_code import render_qr_data_url
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Member
from src.domain.membership import one_year_after
from src.libs.result import Error, Result, Return

from .dtos import MemberResponse, RegisterMemberCommand, RegisterMemberResponse
from .errors import duplicate_error

logger = logging.getLogger(__name__)


class RegisterMemberUseCase:
    """
    Register Member Use Case

    Command/Response Pattern:
    - Input: RegisterMemberCommand (validated profile)
    - Output: Result[RegisterMemberResponse] (member + one-time password)

    Business Logic:
    1. Generate username from sanitized first+last name + 3 random digits
    2. Generate random alphanumeric password, store only its bcrypt hash
    3. Generate membership code CF###### and render its QR card
    4. Set expiry to one year after the creation date
    5. Insert; the database arbitrates uniqueness of username, tax code
       and membership code. A collision is terminal for this call
       (DUPLICATE_USERNAME / DUPLICATE_TAX_CODE / DUPLICATE_MEMBERSHIP_CODE)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: RegisterMemberCommand
    ) -> Result[RegisterMemberResponse]:
        username = generate_username(command.first_name, command.last_name)
        plain_password = generate_password(ApplicationConfig.MEMBER_PASSWORD_LENGTH)
        membership_code = generate_membership_code()
        created_at = utcnow()

        member = Member(
            first_name=command.first_name,
            last_name=command.last_name,
            birth_date=command.birth_date,
            tax_code=command.tax_code,
            email=command.email,
            username=username,
            password_hash=hash_password(plain_password),
            membership_code=membership_code,
            qr_code=render_qr_data_url(membership_code),
            expiry_date=one_year_after(created_at.date()),
            is_active=True,
            created_at=created_at,
        )

        async with self.uow:
            try:
                member = await self.uow.members.create(member)
            except UniqueViolation as exc:
                return Return.err(duplicate_error(exc.constraint))
            except PersistenceFailure as exc:
                logger.error(f"Member registration failed: {exc.detail}")
                return Return.err(
                    Error("PERSISTENCE_ERROR", "Failed to create member")
                )

            await self.uow.commit()

        logger.info(f"Member {member.id} registered with code {member.membership_code}")

        response = RegisterMemberResponse(
            **MemberResponse.from_member(member, created_at.date()).model_dump(),
            plain_password=plain_password,
        )
        return Return.ok(response)
