"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import date
from typing import Optional

from src.domain.base import CamelModel
from src.domain.entities import MembershipStatus, Role


# ============================================================================
# Response DTOs
# ============================================================================


class PrincipalInfo(CamelModel):
    """Authenticated principal in login and profile responses

    Member-only fields are None for admins.
    """

    id: int
    username: str
    role: Role
    full_name: Optional[str] = None
    membership_code: Optional[str] = None
    expiry_date: Optional[date] = None
    qr_code: Optional[str] = None
    status: Optional[MembershipStatus] = None


class LoginResponse(CamelModel):
    """Response for login use case"""

    token: str
    user: PrincipalInfo
