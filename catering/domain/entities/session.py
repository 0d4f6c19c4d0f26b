"""
Session Entity

Durable login session row plus the read-only snapshot handed to callers.
"""

from datetime import datetime

from pydantic import BaseModel
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class AuthSession(SQLModel, table=True):
    """
    AuthSession entity - one row per login.

    Business Rules:
    - sid is generated per login and never reused
    - jti binds exactly one refresh token to this session
    - refresh_token is kept for audit/recovery, the access token never is
    - expired_at mirrors the refresh token expiry
    """

    __tablename__ = "auth"

    sid: str = Field(primary_key=True, max_length=36)
    owner_id: int = Field(foreign_key="owner.id", nullable=False, index=True)
    email: str = Field(max_length=255)
    refresh_token: str
    jti: str = Field(max_length=36)

    # Timestamps
    expired_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_email", "email"),
        Index("idx_auth_expired_at", "expired_at"),
    )


class SessionInfo(BaseModel):
    """Session snapshot as seen through the cache (or rebuilt from a durable row)."""

    sid: str
    owner_id: int
    email: str = ""
    jti: str = ""
    valid: bool = False

    @classmethod
    def from_row(cls, row: AuthSession) -> "SessionInfo":
        # A durable row only exists while the session is live.
        return cls(
            sid=row.sid,
            owner_id=row.owner_id,
            email=row.email,
            jti=row.jti,
            valid=True,
        )
