import pytest
from httpx import AsyncClient

from spendwise.api.utils.jwt import JwtSessionTokenCodec
from spendwise.config import ApplicationConfig


async def register(client: AsyncClient, email="alice@example.com", password="Secret1"):
    response = await client.post("/api/auth/register", json={
        "email": email,
        "password": password,
        "name": "Alice",
    })
    assert response.status_code == 201
    return response.json()["user"]


@pytest.mark.asyncio
async def test_successful_login(client: AsyncClient):
    """Login returns the user summary and a session token for that user"""
    user = await register(client)

    response = await client.post("/api/auth/login", json={
        "email": "alice@example.com",
        "password": "Secret1",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["user"] == user
    assert isinstance(data["token"], str)

    codec = JwtSessionTokenCodec(secret=ApplicationConfig.JWT_SECRET)
    assert codec.verify(data["token"]) == user["id"]


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient):
    await register(client)

    response = await client.post("/api/auth/login", json={
        "email": "alice@example.com",
        "password": "WrongPassword",
    })

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_nonexistent_user(client: AsyncClient):
    response = await client.post("/api/auth/login", json={
        "email": "nobody@example.com",
        "password": "Secret1",
    })

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_unknown_email_and_wrong_password_are_byte_identical(client: AsyncClient):
    """No user enumeration through the login response"""
    await register(client)

    wrong_password = await client.post("/api/auth/login", json={
        "email": "alice@example.com",
        "password": "WrongPassword",
    })
    unknown_email = await client.post("/api/auth/login", json={
        "email": "nobody@example.com",
        "password": "WrongPassword",
    })

    assert wrong_password.status_code == unknown_email.status_code
    assert wrong_password.content == unknown_email.content


@pytest.mark.asyncio
async def test_email_lookup_is_case_sensitive_in_local_part(client: AsyncClient):
    await register(client)

    response = await client.post("/api/auth/login", json={
        "email": "Alice@example.com",
        "password": "Secret1",
    })

    assert response.status_code == 401
