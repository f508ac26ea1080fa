"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData, text
from sqlalchemy.exc import SQLAlchemyError

from blog_api.core.config import AuthSettings
from blog_api.services._shared.ports import PasswordHasher, TokenCodec

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)

AUTH_EXTENSION_KEY = "blog_api.auth"


@dataclass(frozen=True, slots=True)
class AuthComponents:
    """Collaborators shared by every request; built once per app."""

    settings: AuthSettings
    codec: TokenCodec
    hasher: PasswordHasher


def init_app(app: Flask) -> None:
    """Bind the store, CORS and the auth collaborators to ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application with a validated config. The store is pinged once; an
        unreachable store aborts startup with ``RuntimeError``.
    """
    db.init_app(app)

    # Ensure models are registered on the metadata before create_all()
    from blog_api import models as _models  # noqa: F401

    with app.app_context():
        try:
            db.session.execute(text("SELECT 1"))
            if app.config.get("STORE_AUTO_CREATE", True):
                db.create_all()
        except SQLAlchemyError as exc:
            raise RuntimeError("Failed to connect to the data store") from exc
        finally:
            db.session.remove()

    raw_origins = str(app.config.get("CORS_ORIGINS", "") or "")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    wildcard = not origins or origins == ["*"]
    CORS(
        app,
        origins="*" if wildcard else origins,
        supports_credentials=not wildcard,
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )

    from blog_api.infra.jwt.pyjwt_token_codec import JWTTokenCodec
    from blog_api.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher

    settings = AuthSettings.from_config(app.config)
    app.extensions[AUTH_EXTENSION_KEY] = AuthComponents(
        settings=settings,
        codec=JWTTokenCodec(algorithm=settings.algorithm),
        hasher=WerkzeugPasswordHasher(method=settings.password_hash_method),
    )


def get_auth_components(app: Flask | None = None) -> AuthComponents:
    """Return the auth collaborators registered by :func:`init_app`."""
    target = app or current_app
    components = target.extensions.get(AUTH_EXTENSION_KEY)
    if components is None:
        raise RuntimeError("Auth components are not initialized. Call init_app() first.")
    return components
