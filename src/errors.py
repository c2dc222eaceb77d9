"""Exceptions shared by channel clients and channel implementations."""


class ChannelError(Exception):
    """Raised when a channel cannot deliver a message.

    Covers unreachable providers, provider rejections and missing credentials.
    """

    def __init__(self, channel: str, message: str) -> None:
        super().__init__(f"[{channel}] {message}")
        self.channel = channel
        self.reason = message
