"""
Attendance Query Use Cases

Read side of the ledger. Access control (admin, or the member themself)
is decided by the caller from the token principal.
"""

from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, Result, Return

from .dtos import FilmAttendanceEntry, MemberAttendanceEntry


class GetMemberAttendanceUseCase:
    """Screenings attended by a member, most recent first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, member_id: int) -> Result[List[MemberAttendanceEntry]]:
        async with self.uow:
            member = await self.uow.members.get_by_id(member_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            rows = await self.uow.attendance.list_by_member(member_id)
            return Return.ok(
                [
                    MemberAttendanceEntry(
                        id=attendance.id,
                        member_id=attendance.member_id,
                        film_id=attendance.film_id,
                        attended_at=attendance.attended_at,
                        film_title=film.title,
                        film_date=film.scheduled_date,
                    )
                    for attendance, film in rows
                ]
            )


class GetFilmAttendanceUseCase:
    """Members who attended a film, most recent first

    The attendance count of a film is the length of this list.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, film_id: int) -> Result[List[FilmAttendanceEntry]]:
        async with self.uow:
            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            rows = await self.uow.attendance.list_by_film(film_id)
            return Return.ok(
                [
                    FilmAttendanceEntry(
                        id=attendance.id,
                        member_id=attendance.member_id,
                        film_id=attendance.film_id,
                        attended_at=attendance.attended_at,
                        member_name=member.full_name,
                        membership_code=member.membership_code,
                    )
                    for attendance, member in rows
                ]
            )
