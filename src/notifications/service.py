"""Deliver a NotificationRequest through a channel and report the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.errors import ChannelError

if TYPE_CHECKING:
    from src.notifications.channels import NotificationChannel
    from src.notifications.request import NotificationRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    """User-facing outcome of a single delivery attempt."""

    ok: bool
    channel: str
    status: str


async def deliver(channel: NotificationChannel, request: NotificationRequest) -> DeliveryResult:
    """Send *request* once via *channel*. Channel failures become a status message."""
    try:
        await channel.send(request.recipient, request.message)
    except ChannelError as exc:
        logger.error(
            "Delivery via %s to %s failed: %s", channel.name, request.recipient, exc.reason
        )
        return DeliveryResult(
            ok=False,
            channel=channel.name,
            status=f"Notification could not be delivered via {channel.name}.",
        )
    return DeliveryResult(
        ok=True,
        channel=channel.name,
        status=f"Notification sent via {channel.name}.",
    )
