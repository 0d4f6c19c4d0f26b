"""
Use Case: Purge Expired Sessions

Reconciliation sweep for the durable session table. Cache entries expire on
their own TTL; durable rows stay until removed here or by logout.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.base import utcnow
from catering.domain.result import Result, Return


class PurgeExpiredSessionsResponse(BaseModel):
    """Response DTO for PurgeExpiredSessionsUseCase"""

    sessions_purged: int


class PurgeExpiredSessionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, now: Optional[datetime] = None) -> Result[PurgeExpiredSessionsResponse]:
        cutoff = now or utcnow()
        async with self.uow:
            purged = await self.uow.sessions.delete_expired(cutoff)
            await self.uow.commit()

        return Return.ok(PurgeExpiredSessionsResponse(sessions_purged=purged))
