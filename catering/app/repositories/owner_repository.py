from abc import ABC, abstractmethod
from typing import Optional

from catering.domain.entities import Owner


class IOwnerRepository(ABC):
    """Owner repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Owner]:
        """Get owner by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, owner_id: int) -> Optional[Owner]:
        """Get owner by ID"""
        pass

    @abstractmethod
    async def update_password_by_email(self, email: str, password_hash: str) -> bool:
        """Replace the stored password hash. Returns False if no owner matched."""
        pass
