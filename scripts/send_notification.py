#!/usr/bin/env python3
"""Send one notification through the configured channel.

Usage examples:
    # Use NOTIFICATION_CHANNEL from .env (email when unset)
    uv run python scripts/send_notification.py ops@example.com "Deploy finished"

    # Force a channel
    uv run python scripts/send_notification.py +15551234567 "Disk almost full" --channel sms
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.config import settings
from src.notifications.factory import CHANNEL_TAGS, create_channel
from src.notifications.request import NotificationRequest
from src.notifications.service import DeliveryResult, deliver


async def send(recipient: str, message: str, channel_tag: str | None) -> DeliveryResult:
    channel = create_channel(channel_tag)
    try:
        return await deliver(channel, NotificationRequest(recipient, message))
    finally:
        await channel.aclose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a notification")
    parser.add_argument("recipient", help="Phone number, email address or Telegram chat id")
    parser.add_argument("message", help="Message text")
    parser.add_argument(
        "--channel",
        help=f"One of {', '.join(sorted(CHANNEL_TAGS))} (default: NOTIFICATION_CHANNEL)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level),
    )

    try:
        result = asyncio.run(send(args.recipient, args.message, args.channel))
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(result.status)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
