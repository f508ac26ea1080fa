"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from blog_api.core.extensions import get_auth_components
from blog_api.core.logger import ensure_request_id
from blog_api.schemas.common import PaginationQuerySchema
from blog_api.services._shared.base import ServiceContext
from blog_api.services._shared.dto import PaginationIn
from blog_api.services.accounts import AccountService
from blog_api.services.auth import AuthService

F = TypeVar("F", bound=Callable[..., Any])


def parse_pagination(default_limit: int = 20, max_limit: int = 100) -> PaginationIn:
    """Parse pagination parameters from ``request.args`` using Marshmallow."""

    schema = PaginationQuerySchema(default_limit=default_limit, max_limit=max_limit)
    data = schema.load(request.args)
    return PaginationIn(page=data["page"], limit=data["limit"], sort=tuple(data["sort"]))


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(actor_id=g.get("account_id"), request_id=ensure_request_id())


def get_auth_service() -> AuthService:
    """Return an :class:`AuthService` wired to the app's shared collaborators."""

    components = get_auth_components()
    return AuthService(
        codec=components.codec,
        hasher=components.hasher,
        settings=components.settings,
        ctx=service_context(),
    )


def get_account_service() -> AccountService:
    return AccountService(hasher=get_auth_components().hasher, ctx=service_context())


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token.

    The resolved account id is stored on ``flask.g.account_id`` for the
    handler and for :func:`service_context`. A missing header yields 401;
    any unusable token yields 403.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.account_id = get_auth_service().verify_access(request.headers.get("Authorization"))
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_body() -> dict[str, Any]:
    """Return the JSON request body, or an empty mapping when absent or invalid."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
