"""Telnyx SMS API client using aiohttp."""

from __future__ import annotations

import logging

import aiohttp

from src.config import settings
from src.errors import ChannelError

logger = logging.getLogger(__name__)

# Maximum SMS body length (~10 segments). Longer messages risk delivery issues.
MAX_SMS_LENGTH = 1600

TELNYX_API_URL = "https://api.telnyx.com/v2/messages"

_session: aiohttp.ClientSession | None = None


def _get_session() -> aiohttp.ClientSession:
    """Return (and lazily create) the shared aiohttp session."""
    global _session  # noqa: PLW0603
    if _session is None or _session.closed:
        _session = aiohttp.ClientSession(
            headers={"Authorization": f"Bearer {settings.telnyx_api_key}"},
            timeout=aiohttp.ClientTimeout(total=settings.channel_timeout_seconds),
        )
    return _session


async def close_session() -> None:
    """Close the shared session, if one was opened."""
    global _session  # noqa: PLW0603
    if _session is not None and not _session.closed:
        await _session.close()
    _session = None


async def send_sms(to: str, body: str) -> None:
    """Send an SMS via Telnyx. Raises ChannelError on failure."""
    if not settings.sms_configured():
        msg = "SMS not configured — missing TELNYX_API_KEY or TELNYX_PHONE_NUMBER"
        raise ChannelError("sms", msg)

    # Truncate to avoid excessive segments / delivery failures
    if len(body) > MAX_SMS_LENGTH:
        body = body[: MAX_SMS_LENGTH - 3] + "..."

    payload = {
        "from": settings.telnyx_phone_number,
        "to": to,
        "text": body,
        "type": "SMS",
    }

    session = _get_session()
    try:
        async with session.post(TELNYX_API_URL, json=payload) as resp:
            if 200 <= resp.status < 300:
                logger.info("SMS sent to %s (%d chars)", to, len(body))
                return
            text = await resp.text()
    except (aiohttp.ClientError, TimeoutError) as exc:
        msg = f"Telnyx request failed: {exc}"
        raise ChannelError("sms", msg) from exc

    logger.error("SMS send failed: status=%d body=%s", resp.status, text[:200])
    msg = f"Telnyx rejected the message with status {resp.status}"
    raise ChannelError("sms", msg)
