"""Application settings loaded from environment variables."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """Notifier configuration. All values come from environment variables."""

    # Channel selection (sms | email | telegram; anything else means email)
    notification_channel: str = Field(default="email")

    # Outbound calls
    channel_timeout_seconds: float = Field(default=10.0)

    # SMS (Telnyx)
    telnyx_api_key: str = Field(default="")
    telnyx_phone_number: str = Field(default="")

    # Email (Mailgun)
    mailgun_api_key: str = Field(default="")
    mailgun_domain: str = Field(default="")
    mailgun_from_email: str = Field(default="")
    mailgun_api_base_url: str = Field(default="https://api.mailgun.net")
    mail_subject: str = Field(default="Notification")

    # Telegram
    telegram_bot_token: str = Field(default="")

    # File storage
    storage_dir: Path = Field(default=Path("data/storage"))
    upload_dir: str = Field(default="files")
    max_upload_size: int = Field(default=10 * 1024 * 1024)

    # Web server
    web_host: str = Field(default="0.0.0.0")
    web_port: int = Field(default=8080)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    def sms_configured(self) -> bool:
        """True when both Telnyx credentials are present."""
        return bool(self.telnyx_api_key and self.telnyx_phone_number)

    def mail_configured(self) -> bool:
        """True when the Mailgun key, domain and sender are all present."""
        return bool(self.mailgun_api_key and self.mailgun_domain and self.mailgun_from_email)


settings = Settings()
