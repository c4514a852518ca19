from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.attendance_repository import IAttendanceRepository
from src.domain.entities import Attendance, Film, Member

from .integrity import flush_checked


class AttendanceRepository(IAttendanceRepository):
    """Attendance repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_member_and_film(
        self, member_id: int, film_id: int
    ) -> Optional[Attendance]:
        """Get the attendance record for a (member, film) pair"""
        stmt = select(Attendance).where(
            Attendance.member_id == member_id, Attendance.film_id == film_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, attendance: Attendance) -> Attendance:
        """Append a new attendance record (unique per member and film)"""
        self.session.add(attendance)
        await flush_checked(self.session, Attendance.__table__)
        await self.session.refresh(attendance)
        return attendance

    async def list_by_member(self, member_id: int) -> List[Tuple[Attendance, Film]]:
        """Attendance of a member with the film, most recent first"""
        stmt = (
            select(Attendance, Film)
            .join(Film, Attendance.film_id == Film.id)
            .where(Attendance.member_id == member_id)
            .order_by(Attendance.attended_at.desc(), Attendance.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_film(self, film_id: int) -> List[Tuple[Attendance, Member]]:
        """Attendance of a film with the member, most recent first"""
        stmt = (
            select(Attendance, Member)
            .join(Member, Attendance.member_id == Member.id)
            .where(Attendance.film_id == film_id)
            .order_by(Attendance.attended_at.desc(), Attendance.id.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_by_film(self) -> Dict[int, int]:
        """Number of attendance records per film id"""
        stmt = select(Attendance.film_id, func.count(Attendance.id)).group_by(
            Attendance.film_id
        )
        result = await self.session.exec(stmt)
        return {film_id: count for film_id, count in result.all()}
