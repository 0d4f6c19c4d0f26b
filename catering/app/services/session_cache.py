from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Dict, Optional

from catering.domain.entities import SessionInfo


class ISessionCache(ABC):
    """
    Fast, TTL-bound session lookup.

    Implementations raise their client's native error on I/O failure;
    absence is reported as None, never as an error.
    """

    @abstractmethod
    async def set_session(self, session: SessionInfo, ttl: timedelta) -> None:
        """Write the session fields and set the email -> sid index if absent"""
        pass

    @abstractmethod
    async def get_session(self, sid: str) -> Optional[Dict[str, str]]:
        """Raw session fields, or None when there is no entry"""
        pass

    @abstractmethod
    async def delete_session(self, sid: str) -> None:
        """Remove the session fields, and the email -> sid index if it points at sid"""
        pass

    @abstractmethod
    async def get_sid_by_email(self, email: str) -> Optional[str]:
        """Live sid for the email, or None"""
        pass
