from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from catering.adapter.services.redis_session_cache import (
    RedisSessionCache,
    session_by_email_key,
    session_key,
)
from catering.domain.entities import SessionInfo

TTL = timedelta(days=60)


@pytest.fixture
def pipe():
    pipe = MagicMock()
    pipe.__aenter__ = AsyncMock(return_value=pipe)
    pipe.__aexit__ = AsyncMock(return_value=False)
    pipe.execute = AsyncMock(return_value=[])
    return pipe


@pytest.fixture
def redis_client(pipe):
    client = MagicMock()
    client.pipeline = MagicMock(return_value=pipe)
    client.hgetall = AsyncMock(return_value={})
    client.hget = AsyncMock(return_value=None)
    client.get = AsyncMock(return_value=None)
    return client


@pytest.fixture
def cache(redis_client):
    return RedisSessionCache(redis_client)


def test_key_layout():
    assert session_key("abc") == "sid:abc"
    assert session_by_email_key("test@example.com") == "email:sid:test@example.com"


@pytest.mark.asyncio
async def test_set_session_writes_hash_and_email_index(cache, redis_client, pipe):
    session = SessionInfo(sid="sid-1", owner_id=7, email="test@example.com", jti="jti-1", valid=True)

    await cache.set_session(session, TTL)

    redis_client.pipeline.assert_called_once_with(transaction=False)
    pipe.hset.assert_called_once_with(
        "sid:sid-1",
        mapping={"owner_id": "7", "valid": "1", "jti": "jti-1", "email": "test@example.com"},
    )
    pipe.expire.assert_called_once_with("sid:sid-1", TTL)
    pipe.set.assert_called_once_with("email:sid:test@example.com", "sid-1", nx=True, ex=TTL)
    pipe.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_session_returns_fields(cache, redis_client):
    fields = {"owner_id": "7", "valid": "1", "jti": "jti-1", "email": "test@example.com"}
    redis_client.hgetall.return_value = fields

    assert await cache.get_session("sid-1") == fields
    redis_client.hgetall.assert_awaited_once_with("sid:sid-1")


@pytest.mark.asyncio
async def test_get_session_missing_is_none(cache):
    assert await cache.get_session("missing") is None


@pytest.mark.asyncio
async def test_delete_session_removes_hash_and_email_index(cache, redis_client, pipe):
    redis_client.hget.return_value = "test@example.com"
    redis_client.get.return_value = "sid-1"

    await cache.delete_session("sid-1")

    redis_client.hget.assert_awaited_once_with("sid:sid-1", "email")
    deleted = [call.args[0] for call in pipe.delete.call_args_list]
    assert deleted == ["sid:sid-1", "email:sid:test@example.com"]
    pipe.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_session_keeps_index_owned_by_newer_session(cache, redis_client, pipe):
    redis_client.hget.return_value = "test@example.com"
    redis_client.get.return_value = "sid-2"

    await cache.delete_session("sid-1")

    redis_client.get.assert_awaited_once_with("email:sid:test@example.com")
    pipe.delete.assert_called_once_with("sid:sid-1")
    pipe.execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_session_without_email_only_removes_hash(cache, redis_client, pipe):
    await cache.delete_session("sid-1")

    pipe.delete.assert_called_once_with("sid:sid-1")


@pytest.mark.asyncio
async def test_get_sid_by_email(cache, redis_client):
    redis_client.get.return_value = "sid-1"

    assert await cache.get_sid_by_email("test@example.com") == "sid-1"
    redis_client.get.assert_awaited_once_with("email:sid:test@example.com")
