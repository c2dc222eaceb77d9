"""Notifier service entry point."""

import logging

from aiohttp import web

from src.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the upload form and notify endpoint."""
    from src.web.server import create_app

    logger.info("Starting notifier on %s:%d...", settings.web_host, settings.web_port)
    web.run_app(create_app(), host=settings.web_host, port=settings.web_port, print=None)


if __name__ == "__main__":
    main()
