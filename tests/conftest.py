"""Shared fixtures for the Hookify test-suite."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from hookify.core.config import Settings
from hookify.core.security import SignatureValidator
from hookify.main import create_app

TEST_SECRET = "test-secret-key"

# Every variable Settings reads, including the PORT alias
SETTINGS_ENV_VARS = [name.upper() for name in Settings.model_fields] + ["PORT"]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def validator() -> SignatureValidator:
    return SignatureValidator(TEST_SECRET)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, webhook_secret=TEST_SECRET)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Client whose context runs the application lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
