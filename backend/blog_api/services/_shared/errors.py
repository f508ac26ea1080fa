"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and never import Flask or HTTP
helpers. They are the contract between repositories, services and the API
layer; ``blog_api.core.errors`` translates them to Problem Details responses.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


class ServiceError(Exception):
    """Base class for all service-level errors."""


class ValidationError(ServiceError):
    """Raised when input is missing or malformed (e.g. a bad id)."""


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the store.

    :param entity: Entity name (e.g., "Post").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule is violated.

    The ``detail`` is what clients see, e.g. ``"Email already exists"``.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return self.detail


class StoreError(ServiceError):
    """Raised when the underlying persistence layer fails."""


# --------------------------------------------------------------------------- #
# Authentication
# --------------------------------------------------------------------------- #


class AuthError(ServiceError):
    """Base class for authentication and session failures."""

    default_message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidCredentialsError(AuthError):
    """Unknown username or wrong password. The message never says which."""

    default_message = "Incorrect username or password, please try again"


class UnauthenticatedError(AuthError):
    """No credentials were presented."""

    default_message = "Authentication required"


class ForbiddenError(AuthError):
    """Credentials were presented but are not acceptable."""

    default_message = "Forbidden"


def violates(exc: IntegrityError, constraint_name: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL includes the constraint name in the message; SQLite reports
    the column instead, so callers may pass either.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return constraint_name.lower() in message
