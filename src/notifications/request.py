"""NotificationRequest — the recipient/message pair handed to a channel."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationRequest:
    """A single outbound notification.

    Attributes:
        recipient: Channel-specific address (phone number, email, chat id).
        message: Plain text body.
    """

    recipient: str
    message: str

    def __post_init__(self) -> None:
        if not self.recipient.strip():
            msg = "Notification recipient must not be blank"
            raise ValueError(msg)
