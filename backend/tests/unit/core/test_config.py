"""Unit tests for configuration parsing and validation."""

from __future__ import annotations

from datetime import timedelta

import pytest
from blog_api.core.config import (
    AuthSettings,
    DevelopmentConfig,
    TestingConfig,
    env_bool,
    get_config,
    parse_duration,
    validate_config,
)


class TestParseDuration:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("900", timedelta(seconds=900)),
            ("30s", timedelta(seconds=30)),
            ("15m", timedelta(minutes=15)),
            ("1h", timedelta(hours=1)),
            ("7d", timedelta(days=7)),
            (" 2H ", timedelta(hours=2)),
            (60, timedelta(seconds=60)),
            (timedelta(minutes=5), timedelta(minutes=5)),
        ],
    )
    def test_valid_values(self, raw, expected):
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "15x", "-5", "0", "0m", 0])
    def test_invalid_values(self, raw):
        with pytest.raises(ValueError):
            parse_duration(raw)


class TestValidateConfig:
    def _complete(self) -> dict:
        return {
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "ACCESS_TOKEN_SECRET": "a" * 32,
            "REFRESH_TOKEN_SECRET": "b" * 32,
            "ACCESS_TOKEN_EXPIRES": "15m",
        }

    def test_complete_config_passes(self):
        validate_config(self._complete())

    def test_missing_settings_are_all_listed(self):
        cfg = self._complete()
        cfg["ACCESS_TOKEN_SECRET"] = ""
        del cfg["SQLALCHEMY_DATABASE_URI"]

        with pytest.raises(RuntimeError) as exc:
            validate_config(cfg)

        assert "ACCESS_TOKEN_SECRET" in str(exc.value)
        assert "SQLALCHEMY_DATABASE_URI" in str(exc.value)

    def test_unparseable_expiry_is_rejected(self):
        cfg = self._complete()
        cfg["ACCESS_TOKEN_EXPIRES"] = "soon"

        with pytest.raises(RuntimeError, match="ACCESS_TOKEN_EXPIRES"):
            validate_config(cfg)


def test_auth_settings_from_config():
    settings = AuthSettings.from_config(
        {
            "ACCESS_TOKEN_SECRET": "access",
            "REFRESH_TOKEN_SECRET": "refresh",
            "ACCESS_TOKEN_EXPIRES": "1h",
            "JWT_ALGORITHM": "HS256",
            "PASSWORD_HASH_METHOD": "pbkdf2:sha256:1000",
        }
    )

    assert settings.access_secret == "access"
    assert settings.refresh_secret == "refresh"
    assert settings.access_expires == timedelta(hours=1)
    assert settings.password_hash_method == "pbkdf2:sha256:1000"


def test_get_config_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    assert get_config() is TestingConfig

    monkeypatch.setenv("APP_ENV", "nonsense")
    assert get_config() is DevelopmentConfig


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("Yes", True), ("off", False)])
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("SOME_FLAG", raw)
    assert env_bool("SOME_FLAG") is expected


def test_env_bool_default_when_unset(monkeypatch):
    monkeypatch.delenv("SOME_FLAG", raising=False)
    assert env_bool("SOME_FLAG", default=True) is True
