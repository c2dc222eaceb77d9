"""SMS implementation of the NotificationChannel protocol."""

from __future__ import annotations

from src.sms.client import close_session, send_sms


class SMSChannel:
    """Sends notifications via SMS (Telnyx)."""

    @property
    def name(self) -> str:
        return "sms"

    async def send(self, recipient: str, message: str) -> None:
        """Send a plain text SMS to an E.164 phone number."""
        await send_sms(recipient, message)

    async def aclose(self) -> None:
        await close_session()
