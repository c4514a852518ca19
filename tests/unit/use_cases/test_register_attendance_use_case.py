from datetime import datetime

import pytest

from src.app.repositories.errors import PersistenceFailure, UniqueViolation
from src.app.use_cases.attendance import (
    GetFilmAttendanceUseCase,
    GetMemberAttendanceUseCase,
    RegisterAttendanceUseCase,
)
from src.domain.entities import Attendance


def stored_attendance(attendance):
    attendance.id = 31
    return attendance


@pytest.mark.asyncio
async def test_attendance_recorded(mock_uow, make_member, make_film):
    """Membership code resolves to the member, who is marked present"""
    mock_uow.members.get_by_membership_code.return_value = make_member(member_id=4)
    mock_uow.films.get_by_id.return_value = make_film(film_id=7)
    mock_uow.attendance.create.side_effect = stored_attendance

    result = await RegisterAttendanceUseCase(mock_uow).execute("CF004821", 7)

    assert result.is_ok()
    response = result.value
    assert response.message == "Attendance marked successfully"
    assert response.member_name == "Mario Rossi"
    assert response.attendance.id == 31
    assert response.attendance.member_id == 4
    assert response.attendance.film_id == 7
    assert isinstance(response.attendance.attended_at, datetime)
    mock_uow.members.get_by_membership_code.assert_awaited_once_with("CF004821")
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_unknown_membership_code(mock_uow):
    result = await RegisterAttendanceUseCase(mock_uow).execute("CF999999", 7)

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"
    mock_uow.attendance.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_film(mock_uow, make_member):
    mock_uow.members.get_by_membership_code.return_value = make_member()

    result = await RegisterAttendanceUseCase(mock_uow).execute("CF004821", 404)

    assert result.is_err()
    assert result.error.code == "FILM_NOT_FOUND"
    mock_uow.attendance.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_already_recorded_names_the_member(mock_uow, make_member, make_film):
    """Second scan is rejected and still tells who was scanned"""
    mock_uow.members.get_by_membership_code.return_value = make_member(member_id=4)
    mock_uow.films.get_by_id.return_value = make_film()
    mock_uow.attendance.get_by_member_and_film.return_value = Attendance(
        id=30, member_id=4, film_id=7
    )

    result = await RegisterAttendanceUseCase(mock_uow).execute("CF004821", 7)

    assert result.is_err()
    assert result.error.code == "ALREADY_RECORDED"
    assert result.error.details == {"memberName": "Mario Rossi", "alreadyMarked": True}
    mock_uow.attendance.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_lost_insert_race_is_already_recorded(mock_uow, make_member, make_film):
    """The unique constraint has the last word on concurrent scans"""
    mock_uow.members.get_by_membership_code.return_value = make_member()
    mock_uow.films.get_by_id.return_value = make_film()
    mock_uow.attendance.create.side_effect = UniqueViolation("uq_attendance_member_film")

    result = await RegisterAttendanceUseCase(mock_uow).execute("CF004821", 7)

    assert result.is_err()
    assert result.error.code == "ALREADY_RECORDED"
    assert result.error.details["memberName"] == "Mario Rossi"
    mock_uow.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_storage_failure(mock_uow, make_member, make_film):
    mock_uow.members.get_by_membership_code.return_value = make_member()
    mock_uow.films.get_by_id.return_value = make_film()
    mock_uow.attendance.create.side_effect = PersistenceFailure("locked")

    result = await RegisterAttendanceUseCase(mock_uow).execute("CF004821", 7)

    assert result.is_err()
    assert result.error.code == "PERSISTENCE_ERROR"


@pytest.mark.asyncio
async def test_member_attendance_entries(mock_uow, make_member, make_film):
    film = make_film(film_id=7)
    mock_uow.members.get_by_id.return_value = make_member(member_id=4)
    mock_uow.attendance.list_by_member.return_value = [
        (Attendance(id=1, member_id=4, film_id=7, attended_at=datetime(2026, 1, 9, 21)), film)
    ]

    result = await GetMemberAttendanceUseCase(mock_uow).execute(4)

    assert result.is_ok()
    [entry] = result.value
    assert entry.film_title == "Nuovo Cinema Paradiso"
    assert entry.film_date == film.scheduled_date


@pytest.mark.asyncio
async def test_member_attendance_unknown_member(mock_uow):
    result = await GetMemberAttendanceUseCase(mock_uow).execute(404)

    assert result.is_err()
    assert result.error.code == "MEMBER_NOT_FOUND"


@pytest.mark.asyncio
async def test_film_attendance_entries(mock_uow, make_member, make_film):
    mock_uow.films.get_by_id.return_value = make_film(film_id=7)
    mock_uow.attendance.list_by_film.return_value = [
        (Attendance(id=2, member_id=4, film_id=7, attended_at=datetime(2026, 1, 9, 21)),
         make_member(member_id=4)),
    ]

    result = await GetFilmAttendanceUseCase(mock_uow).execute(7)

    assert result.is_ok()
    [entry] = result.value
    assert entry.member_name == "Mario Rossi"
    assert entry.membership_code == "CF004821"


@pytest.mark.asyncio
async def test_film_attendance_unknown_film(mock_uow):
    result = await GetFilmAttendanceUseCase(mock_uow).execute(404)

    assert result.is_err()
    assert result.error.code == "FILM_NOT_FOUND"
