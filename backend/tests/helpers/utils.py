"""Tiny helpers shared across test modules."""

from __future__ import annotations

from typing import Any

from blog_api.core.extensions import db

from tests.factories.account import DEFAULT_PASSWORD


def auth_header(token: str, scheme: str = "JWT") -> dict[str, str]:
    """Return an ``Authorization`` header carrying ``token``."""
    return {"Authorization": f"{scheme} {token}"}


def reload(model: type, entity_id: str) -> Any:
    """Fetch a fresh copy of a row, bypassing any cached instance."""
    db.session.expire_all()
    return db.session.get(model, entity_id)


def login(client, username: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
    """Log in through the API and return the ``{accessToken, refreshToken}`` body."""
    resp = client.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()
