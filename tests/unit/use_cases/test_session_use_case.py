import pytest

from catering.app.use_cases.auth import GetSessionUseCase, SessionResponse
from catering.domain.entities import SessionInfo
from catering.domain.errors import store_fault
from catering.domain.result import Fault, Found, NotFound


@pytest.mark.asyncio
async def test_get_session_found(mock_session_store):
    mock_session_store.get_session.return_value = Found(
        SessionInfo(sid="sid-1", owner_id=7, email="test@example.com", jti="jti-1", valid=True)
    )

    lookup = await GetSessionUseCase(mock_session_store).execute("sid-1")

    assert lookup == Found(SessionResponse(sid="sid-1", owner_id=7, jti="jti-1", valid=True))


@pytest.mark.asyncio
async def test_get_session_not_found(mock_session_store):
    mock_session_store.get_session.return_value = NotFound()

    lookup = await GetSessionUseCase(mock_session_store).execute("missing")

    assert isinstance(lookup, NotFound)


@pytest.mark.asyncio
async def test_get_session_fault_is_not_not_found(mock_session_store):
    mock_session_store.get_session.return_value = Fault(store_fault("redis down"))

    lookup = await GetSessionUseCase(mock_session_store).execute("sid-1")

    assert isinstance(lookup, Fault)
    assert lookup.error.code == "STORE_FAULT"
