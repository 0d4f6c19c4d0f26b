from unittest.mock import AsyncMock, MagicMock

import pytest

from catering.app.services.mailer import MailerError
from catering.app.use_cases.auth import ForgotPasswordUseCase
from catering.domain.entities import Owner

RESET_URL = "http://localhost:9000/api/v1/owner/reset-password/"


@pytest.fixture
def mailer():
    mailer = MagicMock()
    mailer.send_password_reset_email = AsyncMock()
    return mailer


@pytest.fixture
def owner():
    return Owner(id=1, name="Jane", email="test@example.com", password="x" * 60)


@pytest.fixture
def use_case(mock_uow, mock_session_store, token_codec, mailer):
    return ForgotPasswordUseCase(mock_uow, mock_session_store, token_codec, mailer, RESET_URL)


@pytest.mark.asyncio
async def test_forgot_password_success(use_case, mock_uow, token_codec, mailer, owner):
    mock_uow.owners.get_by_email.return_value = owner

    result = await use_case.execute("test@example.com")

    assert result.is_ok()
    claims = token_codec.validate_token(result.value.reset_token)
    assert claims.is_for_reset_password()
    assert not claims.is_for_refresh_token()
    assert claims.email == "test@example.com"
    assert claims.id

    mailer.send_password_reset_email.assert_called_once()
    to, link, owner_name = mailer.send_password_reset_email.call_args.args
    assert to == "test@example.com"
    assert owner_name == "Jane"
    # Link carries the reset-request id, never the token
    assert link == f"http://localhost:9000/api/v1/owner/reset-password/{claims.id}"
    assert result.value.reset_token not in link


@pytest.mark.asyncio
async def test_forgot_password_token_lives_as_long_as_access_token(use_case, mock_uow, token_codec, owner):
    mock_uow.owners.get_by_email.return_value = owner

    result = await use_case.execute("test@example.com")

    claims = token_codec.validate_token(result.value.reset_token)
    assert claims.expires_at - claims.issued_at == 15 * 60


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(use_case, mock_uow, mailer):
    mock_uow.owners.get_by_email.return_value = None

    result = await use_case.execute("nobody@example.com")

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    mailer.send_password_reset_email.assert_not_called()


@pytest.mark.asyncio
async def test_forgot_password_missing_email(use_case, mock_uow):
    result = await use_case.execute(None)

    assert result.is_err()
    assert result.error.code == "REQUIRED_PARAM"
    mock_uow.owners.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_forgot_password_malformed_email(use_case, mock_uow):
    result = await use_case.execute("not-an-email")

    assert result.is_err()
    assert result.error.code == "INVALID_PARAM"
    mock_uow.owners.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_forgot_password_mailer_failure(use_case, mock_uow, mailer, owner):
    mock_uow.owners.get_by_email.return_value = owner
    mailer.send_password_reset_email.side_effect = MailerError("connection refused")

    result = await use_case.execute("test@example.com")

    assert result.is_err()
    assert result.error.code == "MAILER_FAULT"
    assert result.error.message == "Internal server error"


@pytest.mark.asyncio
async def test_forgot_password_uses_email_as_sent(use_case, mock_uow, owner):
    mock_uow.owners.get_by_email.return_value = owner

    await use_case.execute("Test@Example.COM")

    mock_uow.owners.get_by_email.assert_called_once_with("Test@Example.COM")
