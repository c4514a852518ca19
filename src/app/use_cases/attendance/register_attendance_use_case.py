"""
Register Attendance Use Case

Records that the holder of a membership code attended a screening.
"""

import logging

from src.app.repositories.errors import PersistenceFailure, UniqueViolation
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Attendance
from src.libs.result import Error, Result, Return

from .dtos import AttendanceRecord, RegisterAttendanceResponse

logger = logging.getLogger(__name__)


def already_recorded(member_name: str) -> Error:
    return Error(
        "ALREADY_RECORDED",
        f"Attendance already recorded for {member_name}",
        {"memberName": member_name, "alreadyMarked": True},
    )


class RegisterAttendanceUseCase:
    """
    Use case for scanning a membership card at a screening.

    Business Rules:
    - Membership code is matched exactly (case-sensitive)
    - At most one record per (member, film): the unique constraint in the
      store is authoritative, the prior lookup only gives a friendly error
    - A concurrent duplicate that loses the insert race is reported as
      ALREADY_RECORDED as well
    - attended_at is assigned by the server
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, membership_code: str, film_id: int
    ) -> Result[RegisterAttendanceResponse]:
        """
        Execute register attendance use case.

        Args:
            membership_code: Scanned or typed membership code
            film_id: Screening ID

        Returns:
            Result with RegisterAttendanceResponse, or Error MEMBER_NOT_FOUND /
            FILM_NOT_FOUND / ALREADY_RECORDED (details carry memberName) /
            PERSISTENCE_ERROR
        """
        async with self.uow:
            member = await self.uow.members.get_by_membership_code(membership_code)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            # A failed insert expires ORM state, so keep plain values
            member_id = member.id
            member_name = member.full_name

            film = await self.uow.films.get_by_id(film_id)
            if film is None:
                return Return.err(Error("FILM_NOT_FOUND", "Film not found"))

            existing = await self.uow.attendance.get_by_member_and_film(
                member_id, film_id
            )
            if existing is not None:
                return Return.err(already_recorded(member_name))

            try:
                attendance = await self.uow.attendance.create(
                    Attendance(member_id=member_id, film_id=film_id)
                )
            except UniqueViolation:
                return Return.err(already_recorded(member_name))
            except PersistenceFailure as exc:
                logger.error(f"Attendance insert failed: {exc.detail}")
                return Return.err(
                    Error("PERSISTENCE_ERROR", "Failed to mark attendance")
                )

            await self.uow.commit()

        logger.info(f"Attendance recorded: member {member_id}, film {film_id}")
        return Return.ok(
            RegisterAttendanceResponse(
                message="Attendance marked successfully",
                attendance=AttendanceRecord(
                    id=attendance.id,
                    member_id=attendance.member_id,
                    film_id=attendance.film_id,
                    attended_at=attendance.attended_at,
                ),
                member_name=member_name,
            )
        )
