import pytest
from httpx import AsyncClient


def auth_headers(sid: str, token: str) -> dict:
    return {"Authorization": f"Bearer {token}", "Cookie": f"sid={sid}"}


@pytest.mark.asyncio
async def test_renew_access_token(client: AsyncClient, login):
    sid, access_token, refresh_token = await login()

    response = await client.get(
        "/api/v1/auth/renew-access-token", headers=auth_headers(sid, refresh_token)
    )

    assert response.status_code == 200
    data = response.json()
    assert data["access_token"]
    assert data["expired_at"]


@pytest.mark.asyncio
async def test_renew_after_cache_eviction_uses_durable_store(
    client: AsyncClient, login, session_cache
):
    """A cache miss falls back to the durable row and repopulates the cache"""
    sid, _, refresh_token = await login()
    session_cache.sessions.clear()

    response = await client.get(
        "/api/v1/auth/renew-access-token", headers=auth_headers(sid, refresh_token)
    )

    assert response.status_code == 200
    assert session_cache.sessions[sid]["valid"] == "1"


@pytest.mark.asyncio
async def test_renew_with_access_token_is_rejected(client: AsyncClient, login):
    sid, access_token, _ = await login()

    response = await client.get(
        "/api/v1/auth/renew-access-token", headers=auth_headers(sid, access_token)
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_renew_unknown_session(client: AsyncClient, login):
    _, _, refresh_token = await login()

    response = await client.get(
        "/api/v1/auth/renew-access-token", headers=auth_headers("no-such-sid", refresh_token)
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "REQUIRED_PARAM"


@pytest.mark.asyncio
async def test_renew_without_bearer(client: AsyncClient, login):
    sid, _, _ = await login()

    response = await client.get(
        "/api/v1/auth/renew-access-token", headers={"Cookie": f"sid={sid}"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "REQUIRED_PARAM"


@pytest.mark.asyncio
async def test_renew_without_session_cookie(client: AsyncClient, owner):
    response = await client.get(
        "/api/v1/auth/renew-access-token", headers={"Authorization": "Bearer whatever"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "REQUIRED_PARAM"
