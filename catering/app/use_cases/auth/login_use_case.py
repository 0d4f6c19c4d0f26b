"""
Login Use Case

Authenticates an owner and opens a session, or returns the session the
owner already has.
"""

import asyncio
import logging
from datetime import timedelta

from catering.app.services.password_hasher import IPasswordHasher, InvalidPasswordHashError
from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec, TokenEncodingError
from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.base import generate_uuid, utcnow
from catering.domain.entities import AuthSession
from catering.domain.errors import TOKEN_ENCODING_FAILED, app_error, not_found, unauthorized
from catering.domain.result import Result, Return
from .dtos import LoginCommand, LoginResponse
from .validation import validate_command

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for owner login and token issuance.

    Business Rules:
    - Request must carry a valid email and an alphanumeric password (min 8)
    - Unknown email is NOT_FOUND, wrong password is UNAUTHORIZED
    - One live session per email: if the email index already points at a sid,
      that sid is returned with no tokens and no new session is created
    - Otherwise a fresh sid and jti are generated, an access token and a
      refresh token (bound to the jti) are issued and the session is persisted
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_store: ISessionStore,
        token_codec: ITokenCodec,
        password_hasher: IPasswordHasher,
    ):
        self.uow = uow
        self.session_store = session_store
        self.token_codec = token_codec
        self.password_hasher = password_hasher

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: Owner email
            password: Plain text password

        Returns:
            Result with LoginResponse (sid + tokens), or Error
        """
        # EmailStr normalizes the domain; lookups use the email as sent
        validated = validate_command(LoginCommand, email=email, password=password)
        if validated.is_err():
            return Return.err(validated.error)
        command = validated.value

        async with self.uow:
            owner = await self.uow.owners.get_by_email(email)
            if owner is None:
                return Return.err(not_found(f"no owner with email {email}"))
            # Loaded rows are expired when the unit of work rolls back on exit
            owner_id, password_hash = owner.id, owner.password

        try:
            password_valid = await asyncio.to_thread(
                self.password_hasher.verify, command.password, password_hash
            )
        except InvalidPasswordHashError as exc:
            return Return.err(unauthorized(f"stored password hash unreadable: {exc}"))

        if not password_valid:
            return Return.err(unauthorized("error wrong password"))

        # Already logged in on another device
        existing = await self.session_store.get_session_id_by_email(email)
        if existing.is_err():
            return Return.err(existing.error)
        if existing.value:
            logger.info(f"Owner {owner_id} already has a live session, reusing it")
            return Return.ok(LoginResponse(sid=existing.value))

        sid = generate_uuid()
        jti = generate_uuid()
        try:
            access_token = self.token_codec.generate_token(self.session_store.access_token_ttl)
            refresh_token = self.token_codec.generate_token(
                self.session_store.refresh_token_ttl, id=jti
            )
        except TokenEncodingError as exc:
            return Return.err(app_error(TOKEN_ENCODING_FAILED, str(exc)))

        session = AuthSession(
            sid=sid,
            owner_id=owner_id,
            email=email,
            refresh_token=refresh_token,
            jti=jti,
            expired_at=utcnow() + self.session_store.refresh_token_ttl,
        )
        created = await self.session_store.create_session(session)
        if created.is_err():
            return Return.err(created.error)

        return Return.ok(
            LoginResponse(sid=sid, access_token=access_token, refresh_token=refresh_token)
        )
