from abc import ABC, abstractmethod


class MailerError(Exception):
    pass


class IMailer(ABC):
    @abstractmethod
    async def send_password_reset_email(self, to: str, link: str, owner_name: str) -> None:
        """Deliver the reset link. Raises MailerError on delivery failure."""
        pass
