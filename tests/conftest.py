"""Shared test fixtures."""

import pytest

from src.storage import FileStorage


@pytest.fixture
def storage(tmp_path):
    """Create a FileStorage rooted in a temporary directory."""
    FileStorage._reset()
    s = FileStorage(root=tmp_path / "storage")
    FileStorage._instance = s
    yield s
    FileStorage._reset()


@pytest.fixture
def _sms_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide valid Telnyx settings."""
    monkeypatch.setattr("src.config.settings.telnyx_api_key", "test-api-key")
    monkeypatch.setattr("src.config.settings.telnyx_phone_number", "+15551234567")


@pytest.fixture
def _mail_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide valid Mailgun settings."""
    monkeypatch.setattr("src.config.settings.mailgun_api_key", "key-123")
    monkeypatch.setattr("src.config.settings.mailgun_domain", "mg.example.com")
    monkeypatch.setattr("src.config.settings.mailgun_from_email", "noreply@example.com")
    monkeypatch.setattr("src.config.settings.mailgun_api_base_url", "https://api.mailgun.net/")
