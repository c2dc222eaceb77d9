"""Email implementation of the NotificationChannel protocol."""

from __future__ import annotations

from src.config import settings
from src.mail.client import close_session, send_email


class EmailChannel:
    """Sends notifications as plain text email (Mailgun)."""

    def __init__(self, subject: str | None = None) -> None:
        self._subject = subject or settings.mail_subject

    @property
    def name(self) -> str:
        return "email"

    @property
    def subject(self) -> str:
        return self._subject

    async def send(self, recipient: str, message: str) -> None:
        """Send *message* as the body of an email to *recipient*."""
        await send_email(recipient, self._subject, message)

    async def aclose(self) -> None:
        await close_session()
