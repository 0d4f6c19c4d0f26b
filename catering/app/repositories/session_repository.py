from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from catering.domain.entities import AuthSession


class ISessionRepository(ABC):
    """Durable session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: AuthSession) -> AuthSession:
        """Insert a new session row (sid must not exist yet)"""
        pass

    @abstractmethod
    async def get_by_sid(self, sid: str) -> Optional[AuthSession]:
        """Get session row by sid"""
        pass

    @abstractmethod
    async def delete_by_sid(self, sid: str) -> int:
        """Delete session row by sid. Returns number of rows affected."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete rows whose expired_at is before now. Returns count."""
        pass
