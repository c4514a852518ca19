"""
Attendance Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime

from src.domain.base import CamelModel


class AttendanceRecord(CamelModel):
    """A single ledger row"""

    id: int
    member_id: int
    film_id: int
    attended_at: datetime


class RegisterAttendanceResponse(CamelModel):
    """Recorded attendance plus the resolved member's display name"""

    message: str
    attendance: AttendanceRecord
    member_name: str


class MemberAttendanceEntry(AttendanceRecord):
    """Attendance of a member, with film display fields"""

    film_title: str
    film_date: datetime


class FilmAttendanceEntry(AttendanceRecord):
    """Attendance of a film, with member display fields"""

    member_name: str
    membership_code: str
