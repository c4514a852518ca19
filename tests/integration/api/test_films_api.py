import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_and_get_film(client: AsyncClient, admin_headers, film):
    response = await client.get(f"/films/{film['id']}", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Nuovo Cinema Paradiso"
    assert data["coverImage"] is None
    assert data["attendanceCount"] == 0


@pytest.mark.asyncio
async def test_upcoming_and_past(client: AsyncClient, admin_headers, film, test_data):
    past = await client.post(
        "/films", json=test_data.get_copy("past_film"), headers=admin_headers
    )
    assert past.status_code == 200

    upcoming = await client.get("/films/upcoming", headers=admin_headers)
    assert [f["id"] for f in upcoming.json()] == [film["id"]]

    past_list = await client.get("/films/past", headers=admin_headers)
    assert [f["id"] for f in past_list.json()] == [past.json()["id"]]

    everything = await client.get("/films", headers=admin_headers)
    assert [f["id"] for f in everything.json()] == [past.json()["id"], film["id"]]


@pytest.mark.asyncio
async def test_members_can_browse_films(client: AsyncClient, member_headers, film):
    response = await client.get("/films", headers=member_headers)

    assert response.status_code == 200
    assert len(response.json()) == 1


@pytest.mark.asyncio
async def test_members_cannot_create_films(
    client: AsyncClient, member_headers, test_data
):
    response = await client.post(
        "/films", json=test_data.get_copy("past_film"), headers=member_headers
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_films_require_token(client: AsyncClient):
    response = await client.get("/films")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_update_film(client: AsyncClient, admin_headers, film):
    response = await client.put(
        f"/films/{film['id']}",
        json={"coverImage": "/covers/paradiso.jpg"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["coverImage"] == "/covers/paradiso.jpg"
    assert response.json()["title"] == film["title"]


@pytest.mark.asyncio
async def test_delete_film_removes_attendance(
    client: AsyncClient, admin_headers, registered_member, film
):
    await client.post(
        "/attendance",
        json={"membershipCode": registered_member["membershipCode"], "filmId": film["id"]},
        headers=admin_headers,
    )

    response = await client.delete(f"/films/{film['id']}", headers=admin_headers)
    assert response.status_code == 200

    response = await client.get(f"/films/{film['id']}", headers=admin_headers)
    assert response.status_code == 404

    history = await client.get(
        f"/attendance/member/{registered_member['id']}", headers=admin_headers
    )
    assert history.json() == []
