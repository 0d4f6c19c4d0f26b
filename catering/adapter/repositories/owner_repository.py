from typing import Optional

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from catering.app.repositories.owner_repository import IOwnerRepository
from catering.domain.entities import Owner


class OwnerRepository(IOwnerRepository):
    """Owner repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Owner]:
        """Get owner by email address"""
        stmt = select(Owner).where(Owner.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, owner_id: int) -> Optional[Owner]:
        """Get owner by ID"""
        stmt = select(Owner).where(Owner.id == owner_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update_password_by_email(self, email: str, password_hash: str) -> bool:
        stmt = update(Owner).where(Owner.email == email).values(password=password_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
