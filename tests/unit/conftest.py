from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from catering.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from catering.adapter.services.jwt_token_codec import JwtTokenCodec

ACCESS_SECRET = "unit-access-secret"
REFRESH_SECRET = "unit-refresh-secret"


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.owners = MagicMock()
    uow.owners.get_by_email = AsyncMock()
    uow.owners.get_by_id = AsyncMock()
    uow.owners.update_password_by_email = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.get_by_sid = AsyncMock()
    uow.sessions.delete_by_sid = AsyncMock()
    uow.sessions.delete_expired = AsyncMock()
    return uow


@pytest.fixture
def mock_cache():
    cache = MagicMock()
    cache.set_session = AsyncMock()
    cache.get_session = AsyncMock(return_value=None)
    cache.delete_session = AsyncMock()
    cache.get_sid_by_email = AsyncMock(return_value=None)
    return cache


@pytest.fixture
def mock_session_store():
    store = MagicMock()
    store.access_token_ttl = timedelta(minutes=15)
    store.refresh_token_ttl = timedelta(days=60)
    store.create_session = AsyncMock()
    store.get_session = AsyncMock()
    store.delete_session = AsyncMock()
    store.get_session_id_by_email = AsyncMock()
    return store


@pytest.fixture
def token_codec():
    return JwtTokenCodec(ACCESS_SECRET, REFRESH_SECRET)


@pytest.fixture
def password_hasher():
    # Lowest bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
