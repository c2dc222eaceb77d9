"""Mailgun email API client using aiohttp."""

from __future__ import annotations

import logging
from urllib.parse import quote

import aiohttp

from src.config import settings
from src.errors import ChannelError

logger = logging.getLogger(__name__)

_session: aiohttp.ClientSession | None = None


def _get_session() -> aiohttp.ClientSession:
    """Return (and lazily create) the shared aiohttp session."""
    global _session  # noqa: PLW0603
    if _session is None or _session.closed:
        _session = aiohttp.ClientSession(
            auth=aiohttp.BasicAuth("api", settings.mailgun_api_key),
            timeout=aiohttp.ClientTimeout(total=settings.channel_timeout_seconds),
        )
    return _session


async def close_session() -> None:
    """Close the shared session, if one was opened."""
    global _session  # noqa: PLW0603
    if _session is not None and not _session.closed:
        await _session.close()
    _session = None


def _messages_url() -> str:
    base_url = settings.mailgun_api_base_url.rstrip("/")
    return f"{base_url}/v3/{quote(settings.mailgun_domain, safe='')}/messages"


async def send_email(to: str, subject: str, body: str) -> None:
    """Send a plain text email via Mailgun. Raises ChannelError on failure."""
    if not settings.mail_configured():
        msg = (
            "Email not configured — missing MAILGUN_API_KEY, MAILGUN_DOMAIN"
            " or MAILGUN_FROM_EMAIL"
        )
        raise ChannelError("email", msg)

    data = {
        "from": settings.mailgun_from_email,
        "to": to,
        "subject": subject,
        "text": body,
    }

    session = _get_session()
    try:
        async with session.post(_messages_url(), data=data) as resp:
            if 200 <= resp.status < 300:
                logger.info("Email sent to %s (subject=%r)", to, subject)
                return
            text = await resp.text()
    except (aiohttp.ClientError, TimeoutError) as exc:
        msg = f"Mailgun request failed: {exc}"
        raise ChannelError("email", msg) from exc

    logger.error("Email send failed: status=%d body=%s", resp.status, text[:300])
    msg = f"Mailgun rejected the message with status {resp.status}: {text[:300]}"
    raise ChannelError("email", msg)
