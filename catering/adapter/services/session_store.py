"""
Session Store

Reconciles session state across the durable store (source of truth) and the
cache (fast path). Writes go durable-first, then cache; reads go cache-first
with a durable fallback that repopulates the cache.

There is no cross-store transaction. A failure between the two steps leaves
the stores out of step and is reported as an ordinary error.
"""

import logging
from datetime import timedelta
from typing import Dict

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from catering.app.services.session_cache import ISessionCache
from catering.app.services.session_store import ISessionStore
from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.entities import AuthSession, SessionInfo
from catering.domain.errors import not_found, store_fault
from catering.domain.result import Fault, Found, NotFound, Result, Return, SessionLookup

logger = logging.getLogger(__name__)

TRUTHY = ("1", "true", "True")


def session_from_cache(sid: str, fields: Dict[str, str]) -> SessionInfo:
    return SessionInfo(
        sid=sid,
        owner_id=int(fields.get("owner_id", 0)),
        email=fields.get("email", ""),
        jti=fields.get("jti", ""),
        valid=fields.get("valid", "") in TRUTHY,
    )


class SessionStore(ISessionStore):
    def __init__(
        self,
        uow: UnitOfWork,
        cache: ISessionCache,
        access_token_ttl: timedelta,
        refresh_token_ttl: timedelta,
    ):
        self.uow = uow
        self.cache = cache
        self._access_token_ttl = access_token_ttl
        self._refresh_token_ttl = refresh_token_ttl

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_token_ttl

    @property
    def refresh_token_ttl(self) -> timedelta:
        return self._refresh_token_ttl

    async def create_session(self, session: AuthSession) -> Result[AuthSession]:
        """
        Persist a new session durably, then populate the cache.

        If the cache write fails the durable row stays in place and the call
        fails: the session is not fully established.
        """
        snapshot = SessionInfo.from_row(session)
        try:
            async with self.uow:
                await self.uow.sessions.create(session)
                await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Durable session insert failed for sid {snapshot.sid}: {exc}")
            return Return.err(store_fault(f"session insert: {exc}"))

        try:
            await self.cache.set_session(snapshot, self.refresh_token_ttl)
        except RedisError as exc:
            logger.error(f"Cache write failed after durable insert, sid {snapshot.sid}: {exc}")
            return Return.err(store_fault(f"session cache write: {exc}"))

        return Return.ok(session)

    async def get_session(self, sid: str) -> SessionLookup:
        try:
            fields = await self.cache.get_session(sid)
        except RedisError as exc:
            logger.error(f"Cache read failed for sid {sid}: {exc}")
            return Fault(store_fault(f"session cache read: {exc}"))

        if fields:
            try:
                return Found(session_from_cache(sid, fields))
            except ValueError as exc:
                return Fault(store_fault(f"corrupt cache entry: {exc}"))

        # Cache miss: fall back to the durable store
        try:
            async with self.uow:
                row = await self.uow.sessions.get_by_sid(sid)
                session = SessionInfo.from_row(row) if row is not None else None
        except SQLAlchemyError as exc:
            logger.error(f"Durable session read failed for sid {sid}: {exc}")
            return Fault(store_fault(f"session read: {exc}"))

        if session is None:
            return NotFound()

        try:
            await self.cache.set_session(session, self.refresh_token_ttl)
        except RedisError as exc:
            logger.error(f"Cache repopulation failed for sid {sid}: {exc}")
            return Fault(store_fault(f"session cache write: {exc}"))

        return Found(session)

    async def delete_session(self, sid: str) -> Result[None]:
        """
        Delete the durable row, then the cache entry and its email index.

        Zero affected durable rows is an error. A durable failure leaves the
        cache untouched.
        """
        try:
            async with self.uow:
                deleted = await self.uow.sessions.delete_by_sid(sid)
                if deleted == 0:
                    return Return.err(not_found("delete of nonexistent session"))
                await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Durable session delete failed for sid {sid}: {exc}")
            return Return.err(store_fault(f"session delete: {exc}"))

        try:
            await self.cache.delete_session(sid)
        except RedisError as exc:
            logger.error(f"Cache delete failed after durable delete, sid {sid}: {exc}")
            return Return.err(store_fault(f"session cache delete: {exc}"))

        return Return.ok(None)

    async def get_session_id_by_email(self, email: str) -> Result[str]:
        try:
            sid = await self.cache.get_sid_by_email(email)
        except RedisError as exc:
            logger.error(f"Cache read of email index failed: {exc}")
            return Return.err(store_fault(f"session index read: {exc}"))
        return Return.ok(sid or "")
