"""File upload form and handler.

``POST /upload`` accepts one multipart field named ``file``, stores it under
``<storage_dir>/<upload_dir>/<original filename>`` and redirects back to the
form with a flash message describing the outcome.
"""

from __future__ import annotations

import html
import logging
from urllib.parse import unquote

from aiohttp import web

from src.config import settings
from src.storage import FileStorage
from src.web.flash import pop_flash, set_flash

logger = logging.getLogger(__name__)

storage_key = web.AppKey("storage", FileStorage)

FLASH_MESSAGES: dict[str, tuple[str, str]] = {
    "success": ("success", "File uploaded successfully."),
    "error": ("error", "An error occurred while uploading the file."),
}

_PAGE = """\
<!doctype html>
<html>
<head><meta charset="utf-8"><title>File upload</title></head>
<body>
{flash}
<form action="{action}" method="post" enctype="multipart/form-data">
  <input type="file" name="file">
  <button type="submit">Upload</button>
</form>
</body>
</html>
"""


async def upload_form(request: web.Request) -> web.Response:
    """GET / — render the upload form and any pending flash message."""
    response = web.Response(content_type="text/html")
    flash = ""
    key = pop_flash(request, response)
    if key in FLASH_MESSAGES:
        level, text = FLASH_MESSAGES[key]
        flash = f'<p class="{level}">{html.escape(text)}</p>'
    action = request.app.router["upload"].url_for()
    response.text = _PAGE.format(flash=flash, action=action)
    return response


async def upload(request: web.Request) -> web.Response:
    """POST /upload — store a single uploaded file."""
    try:
        form = await request.post()
    except web.HTTPRequestEntityTooLarge:
        logger.warning("Upload rejected: request body too large")
        return _back(request, "error")
    except ValueError:
        logger.warning("Upload rejected: malformed form data", exc_info=True)
        return _back(request, "error")

    field = form.get("file")
    if not isinstance(field, web.FileField) or not field.filename:
        logger.warning("Upload rejected: no file in request")
        return _back(request, "error")

    filename = _client_filename(field)
    with field.file:
        content = field.file.read()
    if len(content) > settings.max_upload_size:
        logger.warning(
            "Upload rejected: %s is %d bytes (max %d)",
            filename,
            len(content),
            settings.max_upload_size,
        )
        return _back(request, "error")

    try:
        request.app[storage_key].store_as(settings.upload_dir, filename, content)
    except ValueError:
        logger.warning("Upload rejected: unusable filename %r", filename)
        return _back(request, "error")
    except OSError:
        logger.exception("Upload failed: could not write %r", filename)
        return _back(request, "error")

    return _back(request, "success")


def _client_filename(field: web.FileField) -> str:
    """The filename as chosen by the client.

    Browsers escape quotes and line breaks in the multipart header as %22,
    %0D and %0A; aiohttp clients percent-encode the whole name.
    """
    return unquote(field.filename)


def _back(request: web.Request, flash_key: str) -> web.Response:
    """Redirect to the upload form carrying *flash_key*."""
    location = request.app.router["upload_form"].url_for()
    response = web.Response(status=302, headers={"Location": str(location)})
    set_flash(response, flash_key)
    return response
