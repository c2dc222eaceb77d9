"""Tests for Settings configuration model."""

from pathlib import Path

from src.config import Settings


class TestDefaults:
    def test_default_channel_is_email(self):
        s = Settings()
        assert s.notification_channel == "email"

    def test_default_timeout(self):
        s = Settings()
        assert s.channel_timeout_seconds == 10.0

    def test_default_storage(self):
        s = Settings()
        assert s.storage_dir == Path("data/storage")
        assert s.upload_dir == "files"
        assert s.max_upload_size == 10 * 1024 * 1024

    def test_default_web_port(self):
        s = Settings()
        assert s.web_port == 8080

    def test_default_mail_subject(self):
        s = Settings()
        assert s.mail_subject == "Notification"


class TestOverrides:
    def test_init_kwargs_override(self):
        s = Settings(notification_channel="telegram", web_port=9000)
        assert s.notification_channel == "telegram"
        assert s.web_port == 9000

    def test_env_ignored_under_pytest(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_CHANNEL", "sms")
        s = Settings()
        assert s.notification_channel == "email"


class TestConfiguredChecks:
    def test_sms_requires_key_and_number(self):
        assert not Settings().sms_configured()
        assert not Settings(telnyx_api_key="k").sms_configured()
        assert Settings(telnyx_api_key="k", telnyx_phone_number="+1555").sms_configured()

    def test_mail_requires_key_domain_and_sender(self):
        assert not Settings(mailgun_api_key="k", mailgun_domain="d").mail_configured()
        s = Settings(mailgun_api_key="k", mailgun_domain="d", mailgun_from_email="a@b.c")
        assert s.mail_configured()
