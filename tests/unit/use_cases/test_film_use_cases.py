from datetime import datetime, timedelta, timezone

import pytest

from src.app.use_cases.films import (
    CreateFilmCommand,
    DeleteFilmUseCase,
    FilmScope,
    GetFilmUseCase,
    ListFilmsUseCase,
    UpdateFilmCommand,
    UpdateFilmUseCase,
    CreateFilmUseCase,
)


def stored_film(film):
    film.id = 7
    film.created_at = datetime(2026, 10, 1, 12, 0)
    return film


@pytest.mark.asyncio
async def test_create_film_stores_naive_utc(mock_uow):
    mock_uow.films.create.side_effect = stored_film
    command = CreateFilmCommand(
        title="La dolce vita",
        director="Federico Fellini",
        cast="Marcello Mastroianni, Anita Ekberg",
        plot="A week in the life of a Roman gossip journalist.",
        scheduled_date=datetime(2026, 11, 20, 21, 0, tzinfo=timezone(timedelta(hours=1))),
    )

    result = await CreateFilmUseCase(mock_uow).execute(command)

    assert result.is_ok()
    assert result.value.scheduled_date == datetime(2026, 11, 20, 20, 0)
    assert result.value.attendance_count == 0


@pytest.mark.asyncio
async def test_list_films_with_counts(mock_uow, make_film):
    mock_uow.films.list_upcoming.return_value = [make_film(film_id=7), make_film(film_id=8)]
    mock_uow.attendance.count_by_film.return_value = {7: 12}

    result = await ListFilmsUseCase(mock_uow).execute(FilmScope.upcoming)

    assert [f.attendance_count for f in result.value] == [12, 0]
    mock_uow.films.list_all.assert_not_awaited()


@pytest.mark.asyncio
async def test_past_scope(mock_uow):
    await ListFilmsUseCase(mock_uow).execute(FilmScope.past)

    mock_uow.films.list_past.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_unknown_film(mock_uow):
    result = await GetFilmUseCase(mock_uow).execute(404)

    assert result.is_err()
    assert result.error.code == "FILM_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_film_keeps_other_fields(mock_uow, make_film):
    mock_uow.films.get_by_id.return_value = make_film()

    result = await UpdateFilmUseCase(mock_uow).execute(
        7, UpdateFilmCommand(title="Cinema Paradiso")
    )

    assert result.value.title == "Cinema Paradiso"
    assert result.value.director == "Giuseppe Tornatore"


@pytest.mark.asyncio
async def test_delete_film(mock_uow, make_film):
    film = make_film()
    mock_uow.films.get_by_id.return_value = film

    result = await DeleteFilmUseCase(mock_uow).execute(7)

    assert result.is_ok()
    mock_uow.films.delete.assert_awaited_once_with(film)
