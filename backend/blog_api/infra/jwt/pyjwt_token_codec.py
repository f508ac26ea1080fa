# blog_api/infra/jwt/pyjwt_token_codec.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt

from blog_api.services._shared.ports import (
    TokenCodec,
    TokenConfigurationError,
    VerificationError,
    VerificationResult,
)


@dataclass(slots=True)
class JWTTokenCodec(TokenCodec):
    """
    Adapter for PyJWT signing HMAC compact tokens.

    Secrets are passed per call so access and refresh tokens can be signed
    with different keys by the same codec instance.

    .. note::
       Every issued token gets a fresh ``jti`` so two tokens minted for the
       same subject within one second are still distinct strings.
    """

    algorithm: str = "HS256"

    def _require_secret(self, secret: str | None) -> str:
        if not secret or not str(secret).strip():
            raise TokenConfigurationError("Token secret is not configured.")
        return secret

    def issue(
        self,
        payload: dict[str, Any],
        secret: str,
        expires_in: timedelta | None = None,
    ) -> str:
        key = self._require_secret(secret)
        now = datetime.now(UTC)

        claims = dict(payload)
        claims["iat"] = now
        claims["jti"] = uuid4().hex
        if expires_in is not None:
            claims["exp"] = now + expires_in

        return jwt.encode(claims, key, algorithm=self.algorithm)

    def verify(self, token: str, secret: str) -> VerificationResult:
        key = self._require_secret(secret)
        if not token or not isinstance(token, str):
            return VerificationResult.failure(VerificationError.MALFORMED)

        try:
            claims = jwt.decode(token, key, algorithms=[self.algorithm])
        # Order matters: both are InvalidTokenError subclasses.
        except jwt.ExpiredSignatureError:
            return VerificationResult.failure(VerificationError.EXPIRED)
        except jwt.InvalidSignatureError:
            return VerificationResult.failure(VerificationError.BAD_SIGNATURE)
        except jwt.InvalidTokenError:
            return VerificationResult.failure(VerificationError.MALFORMED)

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            return VerificationResult.failure(VerificationError.MALFORMED)
        return VerificationResult.success(claims)
