"""Unit tests for the werkzeug password hasher adapter."""

from __future__ import annotations

import pytest
from blog_api.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_is_salted_and_not_plaintext(hasher):
    first = hasher.hash("123456")
    second = hasher.hash("123456")

    assert first != "123456"
    assert first != second
    assert first.startswith("pbkdf2:sha256:1000")


def test_verify_accepts_matching_password(hasher):
    assert hasher.verify("123456", hasher.hash("123456")) is True


def test_verify_rejects_wrong_password(hasher):
    assert hasher.verify("654321", hasher.hash("123456")) is False


def test_verify_with_empty_digest_is_false(hasher):
    assert hasher.verify("123456", "") is False


def test_hash_rejects_empty_password(hasher):
    with pytest.raises(ValueError):
        hasher.hash("")
