"""One-shot flash messages carried between requests in a cookie."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aiohttp import web

FLASH_COOKIE = "flash"


def set_flash(response: web.StreamResponse, key: str) -> None:
    """Attach flash *key* to *response*; it is shown on the next page view."""
    response.set_cookie(FLASH_COOKIE, key, httponly=True, samesite="Lax")


def pop_flash(request: web.Request, response: web.StreamResponse) -> str | None:
    """Return the pending flash key (if any) and clear it on *response*."""
    key = request.cookies.get(FLASH_COOKIE)
    if key is None:
        return None
    response.del_cookie(FLASH_COOKIE)
    return key
