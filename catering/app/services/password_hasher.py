from abc import ABC, abstractmethod


class InvalidPasswordHashError(Exception):
    """Stored hash could not be decoded"""


class IPasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """True on match. Raises InvalidPasswordHashError for a corrupt hash."""
        pass
