"""NotificationChannel protocol — interface for all notification delivery channels."""

from typing import Protocol, runtime_checkable

from src.errors import ChannelError

__all__ = ["ChannelError", "NotificationChannel"]


@runtime_checkable
class NotificationChannel(Protocol):
    """Protocol that all notification channels must satisfy."""

    @property
    def name(self) -> str:
        """Unique channel identifier (e.g. 'email', 'sms')."""
        ...

    async def send(self, recipient: str, message: str) -> None:
        """Deliver a plain text message. Raises ChannelError on failure."""
        ...

    async def aclose(self) -> None:
        """Release any connection held by the channel."""
        ...
