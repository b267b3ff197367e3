"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from docchain.config import Settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DOCCHAIN_STORAGE_BACKEND", raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "postgres"
    assert settings.max_chain_depth == 10_000
    assert settings.store_timeout_seconds == 10.0


def test_env_prefix(monkeypatch) -> None:
    monkeypatch.setenv("DOCCHAIN_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("DOCCHAIN_MAX_CHAIN_DEPTH", "50")
    monkeypatch.setenv("DOCCHAIN_LOG_JSON", "true")
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "memory"
    assert settings.max_chain_depth == 50
    assert settings.log_json is True


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DOCCHAIN_STORAGE_BACKEND", "sqlite"),
        ("DOCCHAIN_MAX_CHAIN_DEPTH", "0"),
        ("DOCCHAIN_STORE_TIMEOUT_SECONDS", "0"),
    ],
)
def test_invalid_values_rejected(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
