"""aiohttp application: upload form, notify endpoint and health check."""

from __future__ import annotations

import logging
from typing import Any

from aiohttp import web

from src.config import settings
from src.notifications.channels import NotificationChannel
from src.notifications.factory import create_channel
from src.notifications.request import NotificationRequest
from src.notifications.service import deliver
from src.storage import FileStorage
from src.web.uploads import storage_key, upload, upload_form

logger = logging.getLogger(__name__)

channel_key = web.AppKey("channel", NotificationChannel)

# Multipart framing on top of the file itself
_FORM_OVERHEAD = 64 * 1024


async def _health(request: web.Request) -> web.Response:
    """GET /health — basic liveness check."""
    return web.json_response({"status": "ok", "channel": request.app[channel_key].name})


async def _handle_notify(request: web.Request) -> web.Response:
    """POST /notify — send ``{recipient, message}`` through the configured channel."""
    try:
        payload: Any = await request.json()
    except ValueError:
        return web.json_response({"error": "invalid JSON"}, status=400)

    if not isinstance(payload, dict):
        return web.json_response({"error": "expected a JSON object"}, status=400)

    recipient = payload.get("recipient")
    message = payload.get("message")
    if not isinstance(recipient, str) or not recipient.strip():
        return web.json_response({"error": "recipient is required"}, status=400)
    if not isinstance(message, str) or not message:
        return web.json_response({"error": "message is required"}, status=400)

    result = await deliver(request.app[channel_key], NotificationRequest(recipient, message))
    body = {"ok": result.ok, "channel": result.channel, "status": result.status}
    return web.json_response(body, status=200 if result.ok else 502)


async def _close_channel(app: web.Application) -> None:
    await app[channel_key].aclose()


def create_app(
    channel: NotificationChannel | None = None,
    storage: FileStorage | None = None,
) -> web.Application:
    """Build the aiohttp Application with routes.

    The notification channel is selected once here, from
    ``settings.notification_channel`` unless one is passed in.
    """
    app = web.Application(client_max_size=settings.max_upload_size + _FORM_OVERHEAD)
    app[channel_key] = channel or create_channel()
    app[storage_key] = storage or FileStorage.get()

    app.router.add_get("/", upload_form, name="upload_form")
    app.router.add_post("/upload", upload, name="upload")
    app.router.add_post("/notify", _handle_notify)
    app.router.add_get("/health", _health)
    app.on_cleanup.append(_close_channel)

    logger.info("Notification channel: %s", app[channel_key].name)
    return app
