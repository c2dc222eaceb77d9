"""Notification channel abstraction layer."""

from src.notifications.channels import ChannelError, NotificationChannel
from src.notifications.email_channel import EmailChannel
from src.notifications.factory import CHANNEL_TAGS, DEFAULT_CHANNEL, create_channel
from src.notifications.request import NotificationRequest
from src.notifications.service import DeliveryResult, deliver
from src.notifications.sms_channel import SMSChannel
from src.notifications.telegram_channel import TelegramChannel

__all__ = [
    "CHANNEL_TAGS",
    "DEFAULT_CHANNEL",
    "ChannelError",
    "DeliveryResult",
    "EmailChannel",
    "NotificationChannel",
    "NotificationRequest",
    "SMSChannel",
    "TelegramChannel",
    "create_channel",
    "deliver",
]
