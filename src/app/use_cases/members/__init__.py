"""
Member Use Cases

Membership lifecycle: registration, renewal, credential reset, directory.
"""

from .register_member_use_case import RegisterMemberUseCase
from .renew_membership_use_case import RenewMembershipUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .delete_member_use_case import DeleteMemberUseCase
from .update_member_use_case import UpdateMemberUseCase
from .list_members_use_case import (
    GetMemberUseCase,
    ListExpiringMembersUseCase,
    ListMembersUseCase,
)
from .dtos import (
    MemberResponse,
    MessageResponse,
    RegisterMemberCommand,
    RegisterMemberResponse,
    RenewMembershipResponse,
    ResetPasswordResponse,
    UpdateMemberCommand,
)

__all__ = [
    # Use Cases
    "RegisterMemberUseCase",
    "RenewMembershipUseCase",
    "ResetPasswordUseCase",
    "DeleteMemberUseCase",
    "UpdateMemberUseCase",
    "ListMembersUseCase",
    "GetMemberUseCase",
    "ListExpiringMembersUseCase",
    # DTOs - Commands
    "RegisterMemberCommand",
    "UpdateMemberCommand",
    # DTOs - Responses
    "MemberResponse",
    "RegisterMemberResponse",
    "RenewMembershipResponse",
    "ResetPasswordResponse",
    "MessageResponse",
]
