"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Settings without which the app refuses to start
REQUIRED_SETTINGS: Final[tuple[str, ...]] = (
    "SQLALCHEMY_DATABASE_URI",
    "ACCESS_TOKEN_SECRET",
    "REFRESH_TOKEN_SECRET",
    "ACCESS_TOKEN_EXPIRES",
)

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS: Final[dict[str, str]] = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}

load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_duration(value: str | int | timedelta) -> timedelta:
    """Turn ``"900"``, ``"15m"``, ``"1h"`` or ``"7d"`` into a ``timedelta``.

    :param value: Raw setting (bare numbers are seconds).
    :returns: Parsed positive duration.
    :raises ValueError: If the value is not a positive duration.
    """
    if isinstance(value, timedelta):
        delta = value
    elif isinstance(value, int):
        delta = timedelta(seconds=value)
    else:
        match = _DURATION_RE.match(value or "")
        if match is None:
            raise ValueError(f"Invalid duration: {value!r}")
        amount, unit = match.groups()
        delta = timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})
    if delta.total_seconds() <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return delta


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints (empty mounts at ``/``).
    SECRET_KEY: str
        Flask secret used for session signing.
    ACCESS_TOKEN_SECRET: str
        HMAC key for access tokens.
    REFRESH_TOKEN_SECRET: str
        HMAC key for refresh tokens. Must differ from the access key.
    ACCESS_TOKEN_EXPIRES: str
        Access token lifetime, e.g. ``"15m"`` or ``"3600"``.
    JWT_ALGORITHM: str
        Signing algorithm handed to PyJWT.
    PASSWORD_HASH_METHOD: str
        Werkzeug hashing method string; carries the cost factor.
    SQLALCHEMY_DATABASE_URI: str
        Store connection string (``DATABASE_URL``).
    STORE_AUTO_CREATE: bool
        Create missing tables on startup.
    PORT: str
        Listen port used by ``python -m blog_api``.

    Notes
    -----
    Values are sourced from environment variables. Nothing falls back to a
    built-in secret; :func:`validate_config` rejects incomplete setups.
    """

    API_BASE_PREFIX = os.getenv("API_BASE_PREFIX", "")

    SECRET_KEY = os.getenv("SECRET_KEY", "")

    # Tokens
    ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET", "")
    REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET", "")
    ACCESS_TOKEN_EXPIRES = os.getenv("ACCESS_TOKEN_EXPIRES", "")
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

    # Hashing
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Store
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    STORE_AUTO_CREATE = env_bool("STORE_AUTO_CREATE", True)

    # Server
    PORT = os.getenv("PORT", "")

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    - Ships throwaway token secrets so the suite runs without a ``.env``.
    - Uses a cheap hashing method to keep the suite fast.
    """

    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    ACCESS_TOKEN_SECRET = "test-access-secret-0123456789abcdef"
    REFRESH_TOKEN_SECRET = "test-refresh-secret-0123456789abcdef"
    ACCESS_TOKEN_EXPIRES = "15m"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    SECRET_KEY = "test-secret-key"
    PROPAGATE_EXCEPTIONS = False
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def validate_config(config: Mapping[str, Any]) -> None:
    """Fail fast when a required setting is missing or unusable.

    :param config: Loaded Flask config.
    :raises RuntimeError: Listing every missing or invalid setting.
    """
    missing = [key for key in REQUIRED_SETTINGS if not str(config.get(key) or "").strip()]
    if missing:
        raise RuntimeError(f"Missing required settings: {', '.join(missing)}")
    try:
        parse_duration(config["ACCESS_TOKEN_EXPIRES"])
    except ValueError as exc:
        raise RuntimeError(f"ACCESS_TOKEN_EXPIRES is invalid: {exc}") from exc


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """
    Immutable token and hashing settings, built once per application.

    :param access_secret: HMAC key for access tokens.
    :param refresh_secret: HMAC key for refresh tokens.
    :param access_expires: Access token lifetime.
    :param algorithm: JWT signing algorithm.
    :param password_hash_method: Werkzeug hashing method (cost factor).
    """

    access_secret: str
    refresh_secret: str
    access_expires: timedelta
    algorithm: str = "HS256"
    password_hash_method: str = "scrypt"

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> AuthSettings:
        """Build settings from a validated Flask config mapping."""
        return cls(
            access_secret=str(config["ACCESS_TOKEN_SECRET"]),
            refresh_secret=str(config["REFRESH_TOKEN_SECRET"]),
            access_expires=parse_duration(config["ACCESS_TOKEN_EXPIRES"]),
            algorithm=str(config.get("JWT_ALGORITHM") or "HS256"),
            password_hash_method=str(config.get("PASSWORD_HASH_METHOD") or "scrypt"),
        )
