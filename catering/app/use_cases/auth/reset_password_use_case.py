"""
Reset Password Use Case

Sets a new password using the token issued by the forgot-password flow.
"""

import asyncio
from typing import Optional

from catering.app.services.password_hasher import IPasswordHasher
from catering.app.services.token_codec import ITokenCodec, InvalidTokenError
from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.errors import not_found, unauthorized
from catering.domain.result import Result, Return
from .dtos import ResetPasswordCommand, ResetPasswordResponse
from .validation import validate_command


class ResetPasswordUseCase:
    """
    Use case for resetting a password by email.

    Business Rules:
    - Bearer token must be a verified password-reset token
    - Token id must equal the reset-request id from the link
    - password and password_confirm must match
    - Owner is located by the token's email claim
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: ITokenCodec,
        password_hasher: IPasswordHasher,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.password_hasher = password_hasher

    async def execute(
        self,
        bearer_token: Optional[str],
        reset_id: str,
        password: Optional[str],
        password_confirm: Optional[str],
    ) -> Result[ResetPasswordResponse]:
        if not bearer_token:
            return Return.err(unauthorized("missing auth token"))

        try:
            claims = self.token_codec.validate_token(bearer_token)
        except InvalidTokenError as exc:
            return Return.err(unauthorized(f"invalid reset token: {exc}"))

        if (
            not claims.is_for_reset_password()
            or claims.id != reset_id
            or password != password_confirm
        ):
            return Return.err(unauthorized("invalid jwt claim or request value"))

        validated = validate_command(
            ResetPasswordCommand, password=password, password_confirm=password_confirm
        )
        if validated.is_err():
            return Return.err(validated.error)

        password_hash = await asyncio.to_thread(
            self.password_hasher.hash, validated.value.password
        )

        async with self.uow:
            updated = await self.uow.owners.update_password_by_email(claims.email, password_hash)
            if not updated:
                return Return.err(not_found("email not found"))
            await self.uow.commit()

        return Return.ok(ResetPasswordResponse(status="password_reset"))
