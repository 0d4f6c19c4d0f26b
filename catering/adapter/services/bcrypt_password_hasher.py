import bcrypt

from catering.app.services.password_hasher import IPasswordHasher, InvalidPasswordHashError


class BcryptPasswordHasher(IPasswordHasher):
    """Salted bcrypt hashing; rounds is the bcrypt cost factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError as exc:
            raise InvalidPasswordHashError(str(exc)) from exc
