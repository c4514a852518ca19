from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.passwords import hash_password
from src.domain.base import today, utcnow
from src.domain.entities import Admin, Film, Member


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.admins = MagicMock()
    uow.admins.get_by_username = AsyncMock(return_value=None)
    uow.admins.get_by_id = AsyncMock(return_value=None)
    uow.admins.create = AsyncMock()

    uow.members = MagicMock()
    uow.members.get_by_id = AsyncMock(return_value=None)
    uow.members.get_by_username = AsyncMock(return_value=None)
    uow.members.get_by_membership_code = AsyncMock(return_value=None)
    uow.members.list_all = AsyncMock(return_value=[])
    uow.members.list_expiring_between = AsyncMock(return_value=[])
    uow.members.create = AsyncMock()
    uow.members.update = AsyncMock(side_effect=lambda member: member)
    uow.members.delete = AsyncMock()

    uow.films = MagicMock()
    uow.films.get_by_id = AsyncMock(return_value=None)
    uow.films.list_all = AsyncMock(return_value=[])
    uow.films.list_upcoming = AsyncMock(return_value=[])
    uow.films.list_past = AsyncMock(return_value=[])
    uow.films.create = AsyncMock()
    uow.films.update = AsyncMock(side_effect=lambda film: film)
    uow.films.delete = AsyncMock()

    uow.proposals = MagicMock()
    uow.proposals.get_by_id = AsyncMock(return_value=None)
    uow.proposals.list_by_member = AsyncMock(return_value=[])
    uow.proposals.list_all_with_members = AsyncMock(return_value=[])
    uow.proposals.create = AsyncMock()
    uow.proposals.resolve_pending = AsyncMock(return_value=None)

    uow.attendance = MagicMock()
    uow.attendance.get_by_member_and_film = AsyncMock(return_value=None)
    uow.attendance.create = AsyncMock()
    uow.attendance.list_by_member = AsyncMock(return_value=[])
    uow.attendance.list_by_film = AsyncMock(return_value=[])
    uow.attendance.count_by_film = AsyncMock(return_value={})

    return uow


@pytest.fixture
def make_member():
    """Factory for persisted-looking Member entities"""

    def _make(member_id=1, password="Secret12", expiry_date=None, **overrides):
        fields = dict(
            id=member_id,
            first_name="Mario",
            last_name="Rossi",
            birth_date=date(1990, 5, 17),
            tax_code="RSSMRA90E17H501X",
            email="mario.rossi@example.com",
            username="mariorossi042",
            password_hash=hash_password(password),
            membership_code="CF004821",
            qr_code="data:image/png;base64,AAAA",
            expiry_date=expiry_date or today() + timedelta(days=200),
            is_active=True,
            created_at=utcnow(),
        )
        fields.update(overrides)
        return Member(**fields)

    return _make


@pytest.fixture
def make_admin():
    def _make(admin_id=1, username="admin", password="CineForum2024!"):
        return Admin(
            id=admin_id,
            username=username,
            password_hash=hash_password(password),
            created_at=utcnow(),
        )

    return _make


@pytest.fixture
def make_film():
    def _make(film_id=7, title="Nuovo Cinema Paradiso", scheduled_date=None):
        return Film(
            id=film_id,
            title=title,
            director="Giuseppe Tornatore",
            cast="Philippe Noiret, Salvatore Cascio",
            plot="A filmmaker recalls his childhood in a Sicilian village cinema.",
            scheduled_date=scheduled_date or datetime(2026, 11, 20, 21, 0),
            created_at=utcnow(),
        )

    return _make
