import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.adapter.database import build_engine, build_session_factory, create_tables
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.admin import EnsureDefaultAdminUseCase
from src.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = build_session_factory(engine)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    # ASGITransport does not run the lifespan, so the admin is seeded here
    await EnsureDefaultAdminUseCase(SqlAlchemyUnitOfWork(db_session)).execute(
        ApplicationConfig.DEFAULT_ADMIN_USERNAME,
        ApplicationConfig.DEFAULT_ADMIN_PASSWORD,
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client):
    response = await client.post(
        "/auth/login",
        json={
            "username": ApplicationConfig.DEFAULT_ADMIN_USERNAME,
            "password": ApplicationConfig.DEFAULT_ADMIN_PASSWORD,
        },
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def registered_member(client, admin_headers, test_data):
    """Member registered through the API (response includes plainPassword)"""
    response = await client.post(
        "/members", json=test_data.get_copy("mario"), headers=admin_headers
    )
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def member_headers(client, registered_member):
    response = await client.post(
        "/auth/login",
        json={
            "username": registered_member["username"],
            "password": registered_member["plainPassword"],
        },
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def film(client, admin_headers, test_data):
    response = await client.post(
        "/films", json=test_data.get_copy("upcoming_film"), headers=admin_headers
    )
    assert response.status_code == 200
    return response.json()
