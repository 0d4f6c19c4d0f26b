"""
Forgot Password Use Case

Issues a password-reset token and mails the reset link to the owner.
"""

from catering.app.services.mailer import IMailer, MailerError
from catering.app.services.session_store import ISessionStore
from catering.app.services.token_codec import ITokenCodec, TokenEncodingError
from catering.app.services.unit_of_work import UnitOfWork
from catering.domain.base import generate_uuid
from catering.domain.errors import MAILER_FAULT, TOKEN_ENCODING_FAILED, app_error, not_found
from catering.domain.result import Result, Return
from .dtos import ForgotPasswordCommand, ForgotPasswordResponse
from .validation import validate_command


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown email is NOT_FOUND
    - Reset token lives as long as an access token and is bound to the
      owner's email and a fresh reset-request id
    - The emailed link embeds the reset-request id, not the token
    - The token is returned so the caller can hand it back (as a cookie)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_store: ISessionStore,
        token_codec: ITokenCodec,
        mailer: IMailer,
        reset_password_url: str,
    ):
        self.uow = uow
        self.session_store = session_store
        self.token_codec = token_codec
        self.mailer = mailer
        self.reset_password_url = reset_password_url.rstrip("/")

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        # Format check only; the lookup uses the email as sent
        validated = validate_command(ForgotPasswordCommand, email=email)
        if validated.is_err():
            return Return.err(validated.error)

        async with self.uow:
            owner = await self.uow.owners.get_by_email(email)
            if owner is None:
                return Return.err(not_found("email not found"))
            owner_email, owner_name = owner.email, owner.name

        reset_id = generate_uuid()
        try:
            token = self.token_codec.generate_token(
                self.session_store.access_token_ttl, id=reset_id, email=owner_email
            )
        except TokenEncodingError as exc:
            return Return.err(app_error(TOKEN_ENCODING_FAILED, str(exc)))

        link = f"{self.reset_password_url}/{reset_id}"
        try:
            await self.mailer.send_password_reset_email(owner_email, link, owner_name)
        except MailerError as exc:
            return Return.err(app_error(MAILER_FAULT, str(exc)))

        return Return.ok(ForgotPasswordResponse(reset_token=token))
