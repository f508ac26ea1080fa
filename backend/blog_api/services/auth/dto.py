# blog_api/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username: Account username.
    :param password: Raw password (to be verified).
    """

    username: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Output DTO with access and refresh tokens.

    :param access_token: Signed, short-lived access token.
    :param refresh_token: Signed refresh token; valid while stored on the account.
    """

    access_token: str
    refresh_token: str
