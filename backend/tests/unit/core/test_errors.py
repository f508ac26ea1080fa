"""Unit tests for service-error translation and problem+json rendering."""

from __future__ import annotations

import pytest
from blog_api.core.errors import (
    BadRequest,
    Conflict,
    Forbidden,
    InvalidCredentials,
    NotFound,
    StoreFailure,
    Unauthorized,
    translate_service_error,
)
from blog_api.services._shared.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)


@pytest.mark.parametrize(
    ("error", "expected_type", "status"),
    [
        (ValidationError("Invalid id: 'x'"), BadRequest, 400),
        (ConflictError("Account", "Email already exists"), Conflict, 400),
        (InvalidCredentialsError(), InvalidCredentials, 400),
        (UnauthenticatedError(), Unauthorized, 401),
        (ForbiddenError("Invalid refresh token"), Forbidden, 403),
        (NotFoundError("Post", "abc"), NotFound, 404),
        (StoreError("connection reset by peer"), StoreFailure, 500),
    ],
)
def test_translate_service_error(error, expected_type, status):
    api_error = translate_service_error(error)

    assert isinstance(api_error, expected_type)
    assert api_error.status_code == status


def test_store_error_message_is_not_forwarded():
    api_error = translate_service_error(StoreError("password=hunter2 host=db"))
    assert "hunter2" not in api_error.message


def test_conflict_keeps_specific_message():
    api_error = translate_service_error(ConflictError("Account", "Username already exists"))
    assert api_error.message == "Username already exists"


def test_unknown_route_renders_problem_json(client):
    resp = client.get("/does-not-exist")

    assert resp.status_code == 404
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["status"] == 404
    assert body["code"] == "not_found"
    assert body["instance"] == "/does-not-exist"
    assert body["request_id"] == resp.headers["X-Request-ID"]


def test_wrong_method_is_405(client):
    resp = client.put("/post")

    assert resp.status_code == 405
    assert resp.get_json()["code"] == "method_not_allowed"
