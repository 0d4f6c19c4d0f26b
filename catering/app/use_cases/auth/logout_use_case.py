"""
Logout Use Case

Closes a session after re-confirming the owner's password.
"""

import asyncio
from typing import Optional

from catering.app.services.password_hasher import IPasswordHasher, InvalidPasswordHashError
from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec, InvalidTokenError
from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.errors import not_found, unauthorized
from catering.domain.result import Fault, NotFound, Result, Return
from .dtos import LogoutCommand, LogoutResponse
from .validation import validate_command


class LogoutUseCase:
    """
    Use case for owner logout.

    Business Rules:
    - sid and bearer token are both required
    - Bearer token must verify (any token type)
    - Session must exist and be valid
    - Supplied password must match the session owner's password
    - Session is deleted durably first, then from the cache
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

    async def execute(
        self,
        sid: Optional[str],
        bearer_token: Optional[str],
        password: Optional[str],
    ) -> Result[LogoutResponse]:
        if not sid:
            return Return.err(unauthorized("missing session id"))
        if not bearer_token:
            return Return.err(unauthorized("missing auth token"))

        try:
            self.token_codec.validate_token(bearer_token)
        except InvalidTokenError as exc:
            return Return.err(unauthorized(f"invalid Authorization value: {exc}"))

        validated = validate_command(LogoutCommand, password=password)
        if validated.is_err():
            return Return.err(validated.error)
        command = validated.value

        lookup = await self.session_store.get_session(sid)
        if isinstance(lookup, NotFound):
            return Return.err(not_found(f"no session for sid {sid}"))
        if isinstance(lookup, Fault):
            return Return.err(lookup.error)
        session = lookup.value

        if not session.valid:
            return Return.err(unauthorized("session is not valid"))

        async with self.uow:
            owner = await self.uow.owners.get_by_id(session.owner_id)
            if owner is None:
                return Return.err(not_found(f"no owner {session.owner_id} for session"))
            password_hash = owner.password

        try:
            password_valid = await asyncio.to_thread(
                self.password_hasher.verify, command.password, password_hash
            )
        except InvalidPasswordHashError as exc:
            return Return.err(unauthorized(f"stored password hash unreadable: {exc}"))
        if not password_valid:
            return Return.err(unauthorized("error wrong password"))

        deleted = await self.session_store.delete_session(sid)
        if deleted.is_err():
            return Return.err(deleted.error)

        return Return.ok(LogoutResponse(status="logged_out"))
