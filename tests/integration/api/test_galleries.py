"""
Integration tests for /galleries
"""
import pytest
from httpx import AsyncClient


async def signin(client: AsyncClient, email: str) -> None:
    response = await client.post("/signin", json={"email": email, "password": "SecurePass123"})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_create_and_list_galleries(client: AsyncClient, make_user):
    owner = await make_user("owner@example.com")
    await signin(client, "owner@example.com")

    first = await client.post("/galleries", json={"title": "Holiday"})
    second = await client.post("/galleries", json={"title": "  Birthday "})

    assert first.status_code == 201
    assert first.json()["user_id"] == owner.id
    assert second.json()["title"] == "Birthday"

    listing = await client.get("/galleries")
    assert listing.status_code == 200
    assert [g["title"] for g in listing.json()["galleries"]] == ["Holiday", "Birthday"]


@pytest.mark.asyncio
async def test_list_only_shows_own_galleries(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await make_user("other@example.com")
    await signin(client, "owner@example.com")
    await client.post("/galleries", json={"title": "Mine"})

    await signin(client, "other@example.com")
    listing = await client.get("/galleries")

    assert listing.json() == {"galleries": []}


@pytest.mark.asyncio
async def test_show_gallery_is_public(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await signin(client, "owner@example.com")
    created = (await client.post("/galleries", json={"title": "Holiday"})).json()

    client.cookies.clear()
    response = await client.get(f"/galleries/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_show_missing_gallery(client: AsyncClient):
    response = await client.get("/galleries/999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_create_gallery_requires_session(client: AsyncClient):
    response = await client.post("/galleries", json={"title": "Holiday"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_gallery_blank_title(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await signin(client, "owner@example.com")

    response = await client.post("/galleries", json={"title": "   "})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_update_gallery(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await signin(client, "owner@example.com")
    created = (await client.post("/galleries", json={"title": "Holiday"})).json()

    response = await client.put(f"/galleries/{created['id']}", json={"title": "Summer"})

    assert response.status_code == 200
    assert response.json()["title"] == "Summer"


@pytest.mark.asyncio
async def test_other_user_cannot_edit_or_delete(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await make_user("other@example.com")
    await signin(client, "owner@example.com")
    created = (await client.post("/galleries", json={"title": "Holiday"})).json()

    await signin(client, "other@example.com")
    update = await client.put(f"/galleries/{created['id']}", json={"title": "Stolen"})
    delete = await client.delete(f"/galleries/{created['id']}")

    assert update.status_code == 403
    assert delete.status_code == 403
    assert update.json()["error"]["code"] == "FORBIDDEN"
    assert (await client.get(f"/galleries/{created['id']}")).json()["title"] == "Holiday"


@pytest.mark.asyncio
async def test_delete_gallery(client: AsyncClient, make_user):
    await make_user("owner@example.com")
    await signin(client, "owner@example.com")
    created = (await client.post("/galleries", json={"title": "Holiday"})).json()

    response = await client.delete(f"/galleries/{created['id']}")

    assert response.status_code == 204
    assert (await client.get(f"/galleries/{created['id']}")).status_code == 404
