from abc import ABC, abstractmethod
from datetime import timedelta

from catering.domain.entities import AuthSession
from catering.domain.result import Result, SessionLookup


class ISessionStore(ABC):
    """Session reads/writes reconciled across the durable store and the cache"""

    @property
    @abstractmethod
    def access_token_ttl(self) -> timedelta:
        pass

    @property
    @abstractmethod
    def refresh_token_ttl(self) -> timedelta:
        pass

    @abstractmethod
    async def create_session(self, session: AuthSession) -> Result[AuthSession]:
        pass

    @abstractmethod
    async def get_session(self, sid: str) -> SessionLookup:
        pass

    @abstractmethod
    async def delete_session(self, sid: str) -> Result[None]:
        pass

    @abstractmethod
    async def get_session_id_by_email(self, email: str) -> Result[str]:
        pass
