from datetime import timedelta
from typing import Dict, Optional

from redis.asyncio import Redis

from catering.app.services.session_cache import ISessionCache
from catering.domain.entities import SessionInfo

SESSION_KEY_FORMAT = "sid:{}"
SESSION_BY_EMAIL_KEY_FORMAT = "email:sid:{}"


def session_key(sid: str) -> str:
    return SESSION_KEY_FORMAT.format(sid)


def session_by_email_key(email: str) -> str:
    return SESSION_BY_EMAIL_KEY_FORMAT.format(email)


class RedisSessionCache(ISessionCache):
    """
    Session cache backed by Redis.

    Layout:
    - ``sid:<sid>`` hash with owner_id, valid, jti, email (expires with the refresh token)
    - ``email:sid:<email>`` string holding the live sid, written only if absent
      and removed only by the session it points at

    The client must be created with ``decode_responses=True``.
    """

    def __init__(self, client: Redis):
        self.client = client

    async def set_session(self, session: SessionInfo, ttl: timedelta) -> None:
        key = session_key(session.sid)
        async with self.client.pipeline(transaction=False) as pipe:
            pipe.hset(
                key,
                mapping={
                    "owner_id": str(session.owner_id),
                    "valid": "1",
                    "jti": session.jti,
                    "email": session.email,
                },
            )
            pipe.expire(key, ttl)
            pipe.set(session_by_email_key(session.email), session.sid, nx=True, ex=ttl)
            await pipe.execute()

    async def get_session(self, sid: str) -> Optional[Dict[str, str]]:
        fields = await self.client.hgetall(session_key(sid))
        if not fields:
            return None
        return fields

    async def delete_session(self, sid: str) -> None:
        key = session_key(sid)
        email = await self.client.hget(key, "email")
        # The index may already point at a newer session for the same email
        indexed_sid = await self.client.get(session_by_email_key(email)) if email else None
        async with self.client.pipeline(transaction=False) as pipe:
            pipe.delete(key)
            if indexed_sid == sid:
                pipe.delete(session_by_email_key(email))
            await pipe.execute()

    async def get_sid_by_email(self, email: str) -> Optional[str]:
        return await self.client.get(session_by_email_key(email))
