import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_admin_login(client: AsyncClient):
    """Default admin seeded at startup can log in"""
    response = await client.post(
        "/auth/login", json={"username": "admin", "password": "CineForum2024!"}
    )

    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["token"], str) and data["token"]
    assert data["user"]["role"] == "admin"
    assert data["user"]["username"] == "admin"


@pytest.mark.asyncio
async def test_member_login_returns_card(client: AsyncClient, registered_member):
    response = await client.post(
        "/auth/login",
        json={
            "username": registered_member["username"],
            "password": registered_member["plainPassword"],
        },
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["role"] == "member"
    assert user["id"] == registered_member["id"]
    assert user["fullName"] == "Mario Rossi"
    assert user["membershipCode"] == registered_member["membershipCode"]
    assert user["qrCode"].startswith("data:image/png;base64,")
    assert user["status"] == "active"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "username, password",
    [("admin", "wrong"), ("nobody", "CineForum2024!")],
)
async def test_invalid_credentials(client: AsyncClient, username, password):
    """Unknown user and wrong password get the same answer"""
    response = await client.post(
        "/auth/login", json={"username": username, "password": password}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid credentials",
    }


@pytest.mark.asyncio
async def test_login_missing_fields(client: AsyncClient):
    response = await client.post("/auth/login", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_me_as_member(client: AsyncClient, member_headers, registered_member):
    response = await client.get("/auth/me", headers=member_headers)

    assert response.status_code == 200
    assert response.json()["membershipCode"] == registered_member["membershipCode"]


@pytest.mark.asyncio
async def test_me_without_token(client: AsyncClient):
    response = await client.get("/auth/me")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "MISSING_TOKEN"


@pytest.mark.asyncio
async def test_me_with_garbage_token(client: AsyncClient):
    response = await client.get(
        "/auth/me", headers={"Authorization": "Bearer not.a.token"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
