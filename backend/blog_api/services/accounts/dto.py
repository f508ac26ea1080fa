"""
DTOs for AccountService.

Keep the service layer's inputs and outputs independent of the ORM. No output
DTO carries the password digest or the refresh-token list.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class SignupIn:
    """
    Input DTO for account creation.

    :param email: Login email.
    :param username: Unique login handle.
    :param password: Raw password, hashed before it is stored.
    :param first_name: Given name.
    :param last_name: Family name.
    """

    email: str
    username: str
    password: str
    first_name: str
    last_name: str


@dataclass(frozen=True, slots=True)
class AccountUpdateIn:
    """
    Partial profile update. ``None`` means "leave unchanged".

    :param password: New raw password; re-hashed when given.
    """

    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountOut:
    """Public view of an account."""

    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
