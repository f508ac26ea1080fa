"""
blog_api.services._shared.ports
===============================

*Ports* (hexagonal interfaces) the service layer depends on for token signing
and password hashing.

Modules
-------
- :mod:`token_codec`:
    Defines :class:`~.TokenCodec`, :class:`~.VerificationResult` and
    :class:`~.VerificationError` for signing and checking tokens.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`, the opaque one-way hashing capability.

Concrete adapters live under ``blog_api.infra``.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_codec import (
    TokenCodec,
    TokenConfigurationError,
    VerificationError,
    VerificationResult,
)

__all__ = [
    "PasswordHasher",
    "TokenCodec",
    "TokenConfigurationError",
    "VerificationError",
    "VerificationResult",
]
