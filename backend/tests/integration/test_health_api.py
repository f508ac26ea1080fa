"""Integration tests for the health endpoint and app wiring."""

from __future__ import annotations

import pytest
from blog_api.core.config import TestingConfig
from blog_api.factory import create_app


def test_health_reports_store_status(client) -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["db"] == "ok"


def test_cors_headers_are_sent(client) -> None:
    resp = client.get("/health", headers={"Origin": "http://example.com"})
    assert resp.headers.get("Access-Control-Allow-Origin") in {"*", "http://example.com"}


def test_missing_secret_aborts_startup() -> None:
    class NoSecret(TestingConfig):
        ACCESS_TOKEN_SECRET = ""

    with pytest.raises(RuntimeError, match="ACCESS_TOKEN_SECRET"):
        create_app(NoSecret)


def test_unreachable_store_aborts_startup(tmp_path) -> None:
    class BrokenStore(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'missing-dir' / 'blog.db'}"

    with pytest.raises(RuntimeError, match="data store"):
        create_app(BrokenStore)


def test_base_prefix_mounts_routes_elsewhere() -> None:
    class Prefixed(TestingConfig):
        API_BASE_PREFIX = "/api"

    prefixed = create_app(Prefixed)

    rules = {rule.rule for rule in prefixed.url_map.iter_rules()}
    assert "/api/auth/login" in rules
    assert "/auth/login" not in rules
