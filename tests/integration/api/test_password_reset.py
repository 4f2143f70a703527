"""
Integration tests for POST /forgot-pw and POST /reset-pw
"""
from datetime import timedelta

import pytest
from httpx import AsyncClient

from config import ApplicationConfig
from src.depends import get_password_reset_duration

COOKIE = ApplicationConfig.SESSION_COOKIE_NAME


@pytest.mark.asyncio
async def test_forgot_password_sends_link(client: AsyncClient, make_user, outbox):
    await make_user()

    response = await client.post("/forgot-pw", json={"email": "user@example.com"})

    assert response.status_code == 200
    assert response.json()["status"] == "sent"
    email, reset_url = outbox.sent[0]
    assert email == "user@example.com"
    assert reset_url.startswith(ApplicationConfig.PASSWORD_RESET_URL + "?token=")
    # The token only travels by email
    assert outbox.last_token() not in response.text


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(client: AsyncClient, outbox):
    response = await client.post("/forgot-pw", json={"email": "nobody@example.com"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_DOES_NOT_EXIST"
    assert outbox.sent == []


@pytest.mark.asyncio
async def test_reset_password_sets_password_and_signs_in(
    client: AsyncClient, make_user, outbox
):
    user = await make_user()
    await client.post("/forgot-pw", json={"email": "user@example.com"})

    response = await client.post(
        "/reset-pw", json={"token": outbox.last_token(), "password": "BrandNewPass1"}
    )

    assert response.status_code == 200
    assert response.json() == {"id": user.id, "email": "user@example.com"}
    assert response.cookies.get(COOKIE)

    old = await client.post(
        "/signin", json={"email": "user@example.com", "password": "SecurePass123"}
    )
    assert old.status_code == 401
    new = await client.post(
        "/signin", json={"email": "user@example.com", "password": "BrandNewPass1"}
    )
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_reset_token_is_single_use(client: AsyncClient, make_user, outbox):
    await make_user()
    await client.post("/forgot-pw", json={"email": "user@example.com"})
    token = outbox.last_token()

    first = await client.post("/reset-pw", json={"token": token, "password": "BrandNewPass1"})
    second = await client.post("/reset-pw", json={"token": token, "password": "OtherNewPass1"})

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_new_request_invalidates_previous_link(client: AsyncClient, make_user, outbox):
    await make_user()
    await client.post("/forgot-pw", json={"email": "user@example.com"})
    first_token = outbox.last_token()
    await client.post("/forgot-pw", json={"email": "user@example.com"})
    second_token = outbox.last_token()

    stale = await client.post("/reset-pw", json={"token": first_token, "password": "BrandNewPass1"})
    fresh = await client.post("/reset-pw", json={"token": second_token, "password": "BrandNewPass1"})

    assert stale.status_code == 400
    assert fresh.status_code == 200


@pytest.mark.asyncio
async def test_expired_reset_token(client: AsyncClient, app, make_user, outbox):
    await make_user()
    app.dependency_overrides[get_password_reset_duration] = lambda: timedelta(seconds=-60)
    await client.post("/forgot-pw", json={"email": "user@example.com"})

    response = await client.post(
        "/reset-pw", json={"token": outbox.last_token(), "password": "BrandNewPass1"}
    )

    assert response.status_code == 410
    assert response.json()["error"]["code"] == "TOKEN_EXPIRED"


@pytest.mark.asyncio
async def test_reset_with_unknown_token(client: AsyncClient):
    response = await client.post(
        "/reset-pw", json={"token": "never-issued", "password": "BrandNewPass1"}
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_reset_with_lone_surrogate_token(client: AsyncClient):
    response = await client.post(
        "/reset-pw",
        content='{"token": "\\ud800abc", "password": "BrandNewPass1"}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NOT_FOUND"
