"""
SMTP Mailer

Sends the password-reset email. smtplib blocks, so delivery runs on a
worker thread.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from string import Template

from catering.app.services.mailer import IMailer, MailerError

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_TEMPLATE = Template(
    """Hi $owner_name,

We received a request to reset the password of your $app_name account.
Use the link below to choose a new password:

$link

The link expires shortly. If you did not ask for a reset, ignore this email
or contact us at $support_email.

$app_name
"""
)


class SmtpMailer(IMailer):
    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        password: str = "",
        support_email: str = "",
        app_name: str = "Family Catering",
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.password = password
        self.support_email = support_email
        self.app_name = app_name

    def build_password_reset_message(self, to: str, link: str, owner_name: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = "Reset Password"
        message["From"] = f"{self.app_name} <{self.sender}>"
        message["To"] = to
        message.set_content(
            FORGOT_PASSWORD_TEMPLATE.substitute(
                owner_name=owner_name,
                app_name=self.app_name,
                link=link,
                support_email=self.support_email,
            )
        )
        return message

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port) as smtp:
            if self.password:
                smtp.login(self.sender, self.password)
            smtp.send_message(message)

    async def send_password_reset_email(self, to: str, link: str, owner_name: str) -> None:
        message = self.build_password_reset_message(to, link, owner_name)
        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Sending password reset email failed: {exc}")
            raise MailerError(str(exc)) from exc
