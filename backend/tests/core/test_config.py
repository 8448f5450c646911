"""Settings — environment-driven configuration.

Tests cover:
    - defaults work with no environment
    - environment variables override defaults (case-insensitive)
    - log_format restricted to json/text
"""

import pytest
from pydantic import ValidationError

from user_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.cors_origins == ["*"]
    assert settings.seed_default_users is True
    assert settings.expose_error_details is False
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SEED_DEFAULT_USERS", "false")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.seed_default_users is False
    assert settings.cors_origins == ["http://localhost:5173"]


def test_log_format_normalized():
    assert Settings(_env_file=None, log_format="TEXT").log_format == "text"


def test_log_format_rejects_unknown():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
