from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict, Field

from src.api.error import raise_for_error
from src.api.utils.authorization import require
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.attendance import (
    FilmAttendanceEntry,
    GetFilmAttendanceUseCase,
    GetMemberAttendanceUseCase,
    MemberAttendanceEntry,
    RegisterAttendanceResponse,
    RegisterAttendanceUseCase,
)
from src.depends import get_unit_of_work
from src.domain.base import CamelModel
from src.domain.entities import Role

router = APIRouter(prefix="/attendance", tags=["Attendance"])


class RegisterAttendanceRequest(CamelModel):
    """
    Register attendance HTTP request payload

    membershipCode comes from a QR scan or manual entry.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    membership_code: str = Field(..., min_length=1, description="Membership code")
    film_id: int = Field(..., description="Screening ID")


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=RegisterAttendanceResponse,
    dependencies=[Depends(require(Role.admin))],
)
async def register_attendance(
    request: RegisterAttendanceRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register Attendance

    Resolves the membership code and records the member as present.

    Raises:
        - 400 Bad Request: ALREADY_RECORDED (body carries memberName and
          alreadyMarked=true)
        - 404 Not Found: MEMBER_NOT_FOUND, FILM_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = RegisterAttendanceUseCase(uow)
    result = await use_case.execute(request.membership_code, request.film_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/member/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[MemberAttendanceEntry],
    dependencies=[Depends(require(Role.admin, owner_param="member_id"))],
)
async def get_member_attendance(
    member_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Attendance of a member, most recent first.

    Admins may read any member; members only themselves.

    Raises:
        - 403 Forbidden: ACCESS_DENIED
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await GetMemberAttendanceUseCase(uow).execute(member_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/film/{film_id}",
    status_code=status.HTTP_200_OK,
    response_model=List[FilmAttendanceEntry],
    dependencies=[Depends(require(Role.admin))],
)
async def get_film_attendance(film_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Attendance of a film, most recent first.

    Raises:
        - 404 Not Found: FILM_NOT_FOUND
    """
    result = await GetFilmAttendanceUseCase(uow).execute(film_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
