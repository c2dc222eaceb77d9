"""Telegram implementation of the NotificationChannel protocol."""

from __future__ import annotations

import logging

import telegram
from telegram.error import TelegramError
from telegram.request import HTTPXRequest

from src.errors import ChannelError

logger = logging.getLogger(__name__)


class TelegramChannel:
    """Sends notifications via the Telegram Bot API.

    The bot and its HTTP client are created on the first send, so building
    the channel opens no connections. An empty *token* makes every send fail
    with ``ChannelError`` instead of reaching the network.
    """

    def __init__(
        self,
        token: str = "",
        *,
        timeout: float = 10.0,
        bot: telegram.Bot | None = None,
    ) -> None:
        self._token = token
        self._timeout = timeout
        self._bot = bot
        self._initialized = False

    @property
    def name(self) -> str:
        return "telegram"

    def _get_bot(self) -> telegram.Bot:
        """Return (and lazily create) the bot. One request object serves all calls."""
        if self._bot is None:
            if not self._token:
                msg = "Telegram not configured — missing TELEGRAM_BOT_TOKEN"
                raise ChannelError(self.name, msg)
            request = HTTPXRequest(
                connect_timeout=self._timeout,
                read_timeout=self._timeout,
                write_timeout=self._timeout,
            )
            self._bot = telegram.Bot(
                token=self._token, request=request, get_updates_request=request
            )
        return self._bot

    async def send(self, recipient: str, message: str) -> None:
        """Send a plain text message to a Telegram chat id."""
        try:
            chat_id = int(recipient)
        except ValueError as exc:
            msg = f"Telegram recipient must be a numeric chat id, got {recipient!r}"
            raise ChannelError(self.name, msg) from exc

        bot = self._get_bot()
        try:
            if not self._initialized:
                await bot.initialize()
                self._initialized = True
            await bot.send_message(chat_id=chat_id, text=message)
        except TelegramError as exc:
            logger.exception("TelegramChannel.send failed for chat_id=%s", chat_id)
            raise ChannelError(self.name, str(exc)) from exc
        logger.info("Telegram message sent to chat_id=%s", chat_id)

    async def aclose(self) -> None:
        if self._bot is None:
            return
        # Bot.shutdown() is a no-op for a bot that never finished initialize().
        await self._bot.shutdown()
        await self._bot.request.shutdown()
        self._initialized = False
