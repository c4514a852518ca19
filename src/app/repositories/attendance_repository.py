from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from src.domain.entities import Attendance, Film, Member


class IAttendanceRepository(ABC):
    """Attendance repository interface - application layer

    create raises UniqueViolation("uq_attendance_member_film") when the
    (member, film) pair is already recorded.
    """

    @abstractmethod
    async def get_by_member_and_film(
        self, member_id: int, film_id: int
    ) -> Optional[Attendance]:
        """Get the attendance record for a (member, film) pair"""
        pass

    @abstractmethod
    async def create(self, attendance: Attendance) -> Attendance:
        """Append a new attendance record"""
        pass

    @abstractmethod
    async def list_by_member(self, member_id: int) -> List[Tuple[Attendance, Film]]:
        """Attendance of a member joined with the film, most recent first"""
        pass

    @abstractmethod
    async def list_by_film(self, film_id: int) -> List[Tuple[Attendance, Member]]:
        """Attendance of a film joined with the member, most recent first"""
        pass

    @abstractmethod
    async def count_by_film(self) -> Dict[int, int]:
        """Number of attendance records per film id"""
        pass
