"""
Use Cases

Organized into domain folders:
- auth/: Login and profile
- admin/: Startup administration
- members/: Membership lifecycle
- attendance/: Attendance ledger
- films/: Screening catalog
- proposals/: Film proposals

Import from subdirectories for better organization.
"""

from .auth import LoginUseCase, LoadProfileUseCase
from .admin import EnsureDefaultAdminUseCase
from .members import (
    RegisterMemberUseCase,
    RenewMembershipUseCase,
    ResetPasswordUseCase,
)
from .attendance import (
    RegisterAttendanceUseCase,
    GetMemberAttendanceUseCase,
    GetFilmAttendanceUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "LoadProfileUseCase",
    # Admin
    "EnsureDefaultAdminUseCase",
    # Members
    "RegisterMemberUseCase",
    "RenewMembershipUseCase",
    "ResetPasswordUseCase",
    # Attendance
    "RegisterAttendanceUseCase",
    "GetMemberAttendanceUseCase",
    "GetFilmAttendanceUseCase",
]
