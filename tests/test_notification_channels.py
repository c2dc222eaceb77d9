"""Tests for TelegramChannel and protocol conformance."""

from unittest.mock import AsyncMock

import pytest
import telegram
from telegram.error import NetworkError

from src.errors import ChannelError
from src.notifications.channels import NotificationChannel
from src.notifications.email_channel import EmailChannel
from src.notifications.sms_channel import SMSChannel
from src.notifications.telegram_channel import TelegramChannel

TEST_TOKEN = "123456:TEST-token"

# -- Helpers -----------------------------------------------------------------


def _make_mock_bot() -> AsyncMock:
    """Create a mock telegram.Bot."""
    bot = AsyncMock()
    bot.send_message = AsyncMock()
    return bot


# -- Protocol conformance ---------------------------------------------------


@pytest.mark.parametrize(
    "channel",
    [SMSChannel(), EmailChannel(), TelegramChannel()],
    ids=["sms", "email", "telegram"],
)
def test_channels_satisfy_protocol(channel) -> None:
    assert isinstance(channel, NotificationChannel)


def test_name_property() -> None:
    ch = TelegramChannel(bot=_make_mock_bot())
    assert ch.name == "telegram"


# -- send() -----------------------------------------------------------------


async def test_send_calls_bot_send_message() -> None:
    bot = _make_mock_bot()
    ch = TelegramChannel(bot=bot)

    result = await ch.send("12345", "Hello there")
    assert result is None
    bot.send_message.assert_awaited_once_with(chat_id=12345, text="Hello there")


async def test_send_initializes_bot_once() -> None:
    bot = _make_mock_bot()
    ch = TelegramChannel(bot=bot)

    await ch.send("1", "one")
    await ch.send("1", "two")
    bot.initialize.assert_awaited_once()


async def test_send_accepts_negative_group_chat_id() -> None:
    bot = _make_mock_bot()
    ch = TelegramChannel(bot=bot)

    await ch.send("-100200300", "test")
    assert bot.send_message.call_args.kwargs["chat_id"] == -100200300


async def test_send_rejects_non_numeric_recipient() -> None:
    bot = _make_mock_bot()
    ch = TelegramChannel(bot=bot)

    with pytest.raises(ChannelError, match="numeric chat id"):
        await ch.send("@someone", "hi")
    bot.send_message.assert_not_awaited()


async def test_send_raises_channel_error_on_telegram_error() -> None:
    bot = _make_mock_bot()
    bot.send_message.side_effect = NetworkError("network down")
    ch = TelegramChannel(bot=bot)

    with pytest.raises(ChannelError) as exc_info:
        await ch.send("1", "hi")
    assert exc_info.value.channel == "telegram"
    assert isinstance(exc_info.value.__cause__, NetworkError)


async def test_initialize_failure_raises_channel_error() -> None:
    bot = _make_mock_bot()
    bot.initialize.side_effect = NetworkError("unreachable")
    ch = TelegramChannel(bot=bot)

    with pytest.raises(ChannelError, match="unreachable"):
        await ch.send("1", "hi")
    bot.send_message.assert_not_awaited()


async def test_send_without_token_is_not_configured() -> None:
    ch = TelegramChannel("")

    with pytest.raises(ChannelError, match="TELEGRAM_BOT_TOKEN"):
        await ch.send("1", "hi")
    assert ch._bot is None


# -- Lazy bot / aclose() ------------------------------------------------------


def test_constructing_with_token_creates_no_bot() -> None:
    ch = TelegramChannel(TEST_TOKEN)
    assert ch._bot is None


def test_bot_built_with_configured_timeouts() -> None:
    ch = TelegramChannel(TEST_TOKEN, timeout=3.5)

    bot = ch._get_bot()
    assert isinstance(bot, telegram.Bot)
    assert bot.token == TEST_TOKEN
    assert bot.request.read_timeout == 3.5
    assert ch._get_bot() is bot


async def test_aclose_closes_http_client_of_uninitialized_bot() -> None:
    ch = TelegramChannel(TEST_TOKEN)
    bot = ch._get_bot()
    assert bot.request._client.is_closed is False

    await ch.aclose()

    assert bot.request._client.is_closed is True


async def test_aclose_shuts_down_bot() -> None:
    bot = _make_mock_bot()
    ch = TelegramChannel(bot=bot)

    await ch.aclose()
    bot.shutdown.assert_awaited_once()
    bot.request.shutdown.assert_awaited_once()


async def test_aclose_without_bot() -> None:
    await TelegramChannel().aclose()
