"""Channel selection — maps a configured tag to a NotificationChannel."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from src.config import settings
from src.notifications.email_channel import EmailChannel
from src.notifications.sms_channel import SMSChannel
from src.notifications.telegram_channel import TelegramChannel

if TYPE_CHECKING:
    from src.notifications.channels import NotificationChannel

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL = "email"


def _build_telegram() -> TelegramChannel:
    return TelegramChannel(
        settings.telegram_bot_token, timeout=settings.channel_timeout_seconds
    )


_BUILDERS: dict[str, Callable[[], NotificationChannel]] = {
    "sms": SMSChannel,
    "email": EmailChannel,
    "telegram": _build_telegram,
}

CHANNEL_TAGS: frozenset[str] = frozenset(_BUILDERS)


def normalize_tag(tag: str | None) -> str:
    """Return the known tag for *tag*, falling back to the default channel."""
    key = (tag or "").strip().lower()
    return key if key in _BUILDERS else DEFAULT_CHANNEL


def create_channel(tag: str | None = None) -> NotificationChannel:
    """Build the channel for *tag* (defaults to ``settings.notification_channel``).

    Unknown or empty tags select the email channel.
    """
    if tag is None:
        tag = settings.notification_channel
    key = normalize_tag(tag)
    if key != (tag or "").strip().lower():
        logger.warning("Unknown notification channel %r — using %s", tag, key)
    return _BUILDERS[key]()
