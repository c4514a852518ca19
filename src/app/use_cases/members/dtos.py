"""
Member Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the membership lifecycle.
Provides type safety and clear contracts between layers.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from config import ApplicationConfig
from src.domain.base import CamelModel
from src.domain.entities import Member, MembershipStatus
from src.domain.membership import classify_membership


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterMemberCommand(BaseModel):
    """
    Register member command - validated profile of a new member

    Created by API layer after request validation passes.
    """

    first_name: str
    last_name: str
    birth_date: date
    tax_code: str
    email: str


class UpdateMemberCommand(BaseModel):
    """Partial profile update; None means "leave unchanged" """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[date] = None
    tax_code: Optional[str] = None
    email: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class MemberResponse(CamelModel):
    """Member as exposed to admins (password hash never leaves the service)"""

    id: int
    first_name: str
    last_name: str
    birth_date: date
    tax_code: str
    email: str
    username: str
    membership_code: str
    qr_code: str
    expiry_date: date
    is_active: bool
    status: MembershipStatus
    created_at: datetime

    @classmethod
    def from_member(cls, member: Member, today: date) -> "MemberResponse":
        return cls(
            id=member.id,
            first_name=member.first_name,
            last_name=member.last_name,
            birth_date=member.birth_date,
            tax_code=member.tax_code,
            email=member.email,
            username=member.username,
            membership_code=member.membership_code,
            qr_code=member.qr_code,
            expiry_date=member.expiry_date,
            is_active=member.is_active,
            status=classify_membership(
                member.expiry_date, today, ApplicationConfig.EXPIRING_SOON_DAYS
            ),
            created_at=member.created_at,
        )


class RegisterMemberResponse(MemberResponse):
    """Created member plus the cleartext password, returned only once"""

    plain_password: str


class RenewMembershipResponse(CamelModel):
    """Response for renew membership use case"""

    message: str
    expiry_date: date


class ResetPasswordResponse(CamelModel):
    """Response for reset password use case"""

    message: str
    new_password: str


class MessageResponse(CamelModel):
    """Plain acknowledgement"""

    message: str
