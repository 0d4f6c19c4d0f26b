from datetime import datetime
from typing import Optional

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catering.app.repositories.session_repository import ISessionRepository
from catering.domain.entities import AuthSession


class SessionRepository(ISessionRepository):
    """Durable session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: AuthSession) -> AuthSession:
        """Insert a new session row"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_by_sid(self, sid: str) -> Optional[AuthSession]:
        """Get session row by sid"""
        stmt = select(AuthSession).where(AuthSession.sid == sid)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete_by_sid(self, sid: str) -> int:
        """Delete session row by sid"""
        stmt = delete(AuthSession).where(AuthSession.sid == sid)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete rows past their refresh-token expiry"""
        stmt = delete(AuthSession).where(AuthSession.expired_at < now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
