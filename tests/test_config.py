"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from hookify.core.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")

    settings = Settings(_env_file=None)

    assert settings.app_name == "Hookify"
    assert settings.webhook_secret.get_secret_value() == "s3cret"
    assert settings.signature_header == "X-Signature"
    assert settings.signature_encoding == "hex"
    assert settings.api_port == 8080


def test_secret_is_masked(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    assert "s3cret" not in repr(Settings(_env_file=None))


def test_missing_secret_fails() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_port_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    monkeypatch.setenv("PORT", "9090")
    assert Settings(_env_file=None).api_port == 9090


def test_encoding_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    monkeypatch.setenv("SIGNATURE_ENCODING", " Base64 ")
    assert Settings(_env_file=None).signature_encoding == "base64"


def test_unknown_encoding_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBHOOK_SECRET", "s3cret")
    monkeypatch.setenv("SIGNATURE_ENCODING", "rot13")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_env_file_is_loaded(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("WEBHOOK_SECRET=from-file\nSIGNATURE_HEADER=X-Hook-Signature\n")

    settings = Settings(_env_file=env_file)

    assert settings.webhook_secret.get_secret_value() == "from-file"
    assert settings.signature_header == "X-Hook-Signature"


def test_settings_fixture_uses_defaults(settings: Settings) -> None:
    assert settings.app_name == "Hookify"
    assert settings.debug is False
    assert settings.signature_header == "X-Signature"
    assert settings.signature_encoding == "hex"
