"""
Renew Access Token Use Case

Issues a fresh access token against a refresh token bound to the session.
"""

from datetime import UTC, datetime
from typing import Optional

from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec, InvalidTokenError, TokenEncodingError
from catering.domain.errors import TOKEN_ENCODING_FAILED, app_error, unauthorized
from catering.domain.result import Result, Return
from .dtos import RenewAccessTokenResponse, SessionResponse


class RenewAccessTokenUseCase:
    """
    Use case for renewing the access token.

    Business Rules:
    - Session snapshot and bearer token are both required
    - Bearer token must be a verified refresh token whose id equals the
      session jti, and the session must be valid
    - The refresh token and jti are NOT rotated
    """

    def __init__(self, session_store: ISessionStore, token_codec: ITokenCodec):
        self.session_store = session_store
        self.token_codec = token_codec

    async def execute(
        self,
        session: Optional[SessionResponse],
        bearer_token: Optional[str],
    ) -> Result[RenewAccessTokenResponse]:
        if session is None or not bearer_token:
            return Return.err(unauthorized("missing session or auth token"))

        try:
            claims = self.token_codec.validate_token(bearer_token)
        except InvalidTokenError as exc:
            return Return.err(unauthorized(f"invalid refresh token: {exc}"))

        if (
            not session.valid
            or claims.id != session.jti
            or not claims.is_for_refresh_token()
        ):
            return Return.err(unauthorized("invalid session or claims"))

        ttl = self.session_store.access_token_ttl
        try:
            access_token = self.token_codec.generate_token(ttl)
        except TokenEncodingError as exc:
            return Return.err(app_error(TOKEN_ENCODING_FAILED, str(exc)))

        expired_at = (datetime.now(UTC) + ttl).isoformat(timespec="seconds")
        return Return.ok(
            RenewAccessTokenResponse(access_token=access_token, expired_at=expired_at)
        )
