from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Protocol


class TokenConfigurationError(RuntimeError):
    """Raised when a token cannot be signed or checked because the secret is unusable."""


class VerificationError(Enum):
    """Why a token failed verification."""

    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """
    Outcome of :meth:`TokenCodec.verify`.

    Exactly one of ``payload`` and ``error`` is set.

    :ivar payload: Decoded claims when the token checks out.
    :ivar error: Failure kind otherwise.
    """

    payload: dict[str, Any] | None = None
    error: VerificationError | None = None

    @classmethod
    def success(cls, payload: dict[str, Any]) -> VerificationResult:
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: VerificationError) -> VerificationResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None and self.payload is not None

    def claim(self, name: str) -> Any:
        """Return claim ``name`` from a verified token, or ``None``."""
        if self.payload is None or self.error is not None:
            return None
        return self.payload.get(name)

    @property
    def subject(self) -> str | None:
        """Account id carried by the token, if verified."""
        return self.claim("sub")


class TokenCodec(Protocol):
    """Port for signing and checking compact tokens with a shared secret."""

    def issue(
        self,
        payload: dict[str, Any],
        secret: str,
        expires_in: timedelta | None = None,
    ) -> str: ...

    def verify(self, token: str, secret: str) -> VerificationResult: ...
