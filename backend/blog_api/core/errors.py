"""Centralized JSON (RFC 7807) error handling for the API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from blog_api.core.logger import ensure_request_id
from blog_api.services._shared.errors import (
    ConflictError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    ServiceError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)

log = logging.getLogger(__name__)

STORE_FAILURE_MESSAGE = "The data store could not complete the request"


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        500: "internal_server_error",
        503: "service_unavailable",
    }
    return mapping.get(status_code, "error")


def _as_problem(
    *,
    status: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build an RFC 7807 Problem Details dict.

    :param status: HTTP status code.
    :param code: Stable machine-consumable error code.
    :param message: Human-readable error summary (safe for clients).
    :param details: Optional safe, structured details.
    :returns: Problem+JSON dictionary.
    :rtype: dict
    """
    problem: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": status,
        "detail": message,
        "instance": request.path if request else None,
        "code": code,
    }
    if details:
        problem["details"] = details
    problem["request_id"] = ensure_request_id()
    return problem


def _problem_response(problem: dict[str, Any]) -> Response:
    """Return a Flask response with ``application/problem+json`` media type."""
    resp = jsonify(problem)
    resp.status_code = int(problem["status"])
    resp.mimetype = "application/problem+json"
    return resp


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    code : str, optional
        Machine-readable identifier. Defaults to ``"bad_request"``.
    details : dict[str, Any] | None, optional
        Optional structured payload included in the response body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}

    def to_problem(self) -> dict[str, Any]:
        """Serialize error metadata into an RFC 7807 problem."""
        return _as_problem(
            status=self.status_code,
            code=self.code,
            message=self.message,
            details=self.details or None,
        )


class BadRequest(APIError):
    """400 for malformed or missing input."""

    def __init__(self, message: str = "Bad request", details: dict[str, Any] | None = None):
        super().__init__(
            message, status_code=HTTPStatus.BAD_REQUEST, code="validation_error", details=details
        )


class Conflict(APIError):
    """Duplicate email/username. Kept on 400 like the rest of the input errors."""

    def __init__(self, message: str = "Conflict") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="conflict")


class InvalidCredentials(APIError):
    """400 when a login attempt fails."""

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST, code="invalid_credentials")


class Unauthorized(APIError):
    """401 when no credentials were presented."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code="unauthorized")


class Forbidden(APIError):
    """403 when presented credentials are rejected."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, status_code=HTTPStatus.FORBIDDEN, code="forbidden")


class NotFound(APIError):
    """404 when resources are missing."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND, code="not_found")


class StoreFailure(APIError):
    """500 when the persistence layer fails. The cause stays in the logs."""

    def __init__(self, message: str = STORE_FAILURE_MESSAGE) -> None:
        super().__init__(
            message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, code="store_error"
        )


def translate_service_error(exc: ServiceError) -> APIError:
    """
    Map a service-layer error onto its API counterpart.

    :param exc: Error raised by a service.
    :returns: API error carrying the status and code for the response.
    """
    if isinstance(exc, InvalidCredentialsError):
        return InvalidCredentials(str(exc))
    if isinstance(exc, UnauthenticatedError):
        return Unauthorized(str(exc))
    if isinstance(exc, ForbiddenError):
        return Forbidden(str(exc))
    if isinstance(exc, NotFoundError):
        return NotFound(str(exc))
    if isinstance(exc, ConflictError):
        return Conflict(str(exc))
    if isinstance(exc, ValidationError):
        return BadRequest(str(exc))
    if isinstance(exc, StoreError):
        return StoreFailure()
    return BadRequest(str(exc) or "Bad request")


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Every handled error is rendered as ``application/problem+json``.
    - 4xx are logged as warnings, 5xx as errors with traceback.
    - Nothing escapes to the WSGI server; unknown exceptions become 500.
    """

    def _emit(err: APIError, *, exc_info: bool = False) -> tuple[Response, int]:
        problem = err.to_problem()
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: code=%s status=%s msg=%s",
            err.code,
            err.status_code,
            err.message,
            exc_info=exc_info,
        )
        return _problem_response(problem), err.status_code

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        return _emit(err)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        return _emit(translate_service_error(err), exc_info=isinstance(err, StoreError))

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        return _emit(BadRequest("Validation failed", details={"errors": messages}))

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(err: SQLAlchemyError):
        return _emit(StoreFailure(), exc_info=True)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        code = _http_status_to_code(status)
        message = (err.description or code.replace("_", " ").capitalize()).strip()
        if status == HTTPStatus.NOT_FOUND:
            message = f"Route '{request.path}' not found"
        return _emit(APIError(message, status_code=status, code=code))

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        log.exception("Unhandled exception", exc_info=err)
        return _emit(
            APIError(
                "An unexpected error occurred",
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                code="internal_server_error",
            )
        )
