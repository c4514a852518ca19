"""
Attendance Use Cases

Attendance ledger: registration by membership code and queries.
"""

from .register_attendance_use_case import RegisterAttendanceUseCase
from .list_attendance_use_case import (
    GetFilmAttendanceUseCase,
    GetMemberAttendanceUseCase,
)
from .dtos import (
    AttendanceRecord,
    FilmAttendanceEntry,
    MemberAttendanceEntry,
    RegisterAttendanceResponse,
)

__all__ = [
    # Use Cases
    "RegisterAttendanceUseCase",
    "GetMemberAttendanceUseCase",
    "GetFilmAttendanceUseCase",
    # DTOs - Responses
    "AttendanceRecord",
    "RegisterAttendanceResponse",
    "MemberAttendanceEntry",
    "FilmAttendanceEntry",
]
