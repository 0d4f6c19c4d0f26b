"""
Token codec contract and claim model.

Three token roles share one codec:
- access token: no id, no email
- password-reset token: id + email, signed in the access-token domain
- refresh token: id (the session jti), signed with the refresh secret
"""

from abc import ABC, abstractmethod
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

ACCESS_TOKEN_TYPE = "at"
REFRESH_TOKEN_TYPE = "rt"


class InvalidTokenError(Exception):
    """Signature mismatch, malformed payload, wrong algorithm or expiry"""


class TokenEncodingError(Exception):
    """Signing failed"""


class TokenClaims(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = ""
    id: str = Field(default="", alias="jti")
    email: str = ""
    for_reset_password: bool = False
    issued_at: int = Field(default=0, alias="iat")
    expires_at: int = Field(default=0, alias="exp")

    def is_for_refresh_token(self) -> bool:
        return self.type == REFRESH_TOKEN_TYPE

    def is_for_reset_password(self) -> bool:
        return self.for_reset_password


class ITokenCodec(ABC):
    @abstractmethod
    def generate_token(self, ttl: timedelta, id: str = "", email: str = "") -> str:
        """Sign a token expiring after ttl. Raises TokenEncodingError."""
        pass

    @abstractmethod
    def validate_token(self, token: str) -> TokenClaims:
        """Verify and decode a token. Raises InvalidTokenError."""
        pass
