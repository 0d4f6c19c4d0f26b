from datetime import UTC, datetime, timedelta

from jose import jwt
from jose.exceptions import JOSEError
from pydantic import ValidationError

from catering.app.services.token_codec import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    InvalidTokenError,
    ITokenCodec,
    TokenClaims,
    TokenEncodingError,
)

ALGORITHM = "HS256"


class JwtTokenCodec(ITokenCodec):
    """
    HS256 JWT codec with one secret per token type.

    Access and password-reset tokens share the access secret; refresh tokens
    use the refresh secret, so a leaked access secret cannot forge refresh
    tokens.
    """

    def __init__(self, access_token_secret: str, refresh_token_secret: str):
        self.access_token_secret = access_token_secret
        self.refresh_token_secret = refresh_token_secret

    def generate_token(self, ttl: timedelta, id: str = "", email: str = "") -> str:
        """
        Generate a signed token.

        Args:
            ttl: Lifetime of the token
            id: Empty for an access token; reset-request id or session jti otherwise
            email: Set only for password-reset tokens

        Returns:
            JWT token string
        """
        now = datetime.now(UTC)
        payload = {
            "type": ACCESS_TOKEN_TYPE,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
        }
        secret = self.access_token_secret

        if id:
            payload["jti"] = id
            if email:
                payload["email"] = email
                payload["for_reset_password"] = True
            else:
                payload["type"] = REFRESH_TOKEN_TYPE
                secret = self.refresh_token_secret

        try:
            return jwt.encode(payload, secret, algorithm=ALGORITHM)
        except JOSEError as exc:
            raise TokenEncodingError(str(exc)) from exc

    def validate_token(self, token: str) -> TokenClaims:
        """
        Verify signature, algorithm and expiry, then return the claims.

        The declared type picks the verification secret; unknown types are
        rejected before any signature check.
        """
        try:
            unverified = jwt.get_unverified_claims(token)
        except JOSEError as exc:
            raise InvalidTokenError(f"malformed token: {exc}") from exc

        token_type = unverified.get("type")
        if token_type == ACCESS_TOKEN_TYPE:
            secret = self.access_token_secret
        elif token_type == REFRESH_TOKEN_TYPE:
            secret = self.refresh_token_secret
        else:
            # An empty HMAC key would still verify a token signed with one
            raise InvalidTokenError(f"unknown token type: {token_type!r}")

        try:
            payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        except JOSEError as exc:
            raise InvalidTokenError(str(exc)) from exc

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as exc:
            raise InvalidTokenError(f"invalid payload data: {exc}") from exc
