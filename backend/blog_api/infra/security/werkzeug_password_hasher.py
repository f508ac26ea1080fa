# blog_api/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from blog_api.services._shared.ports import PasswordHasher


@dataclass(frozen=True, slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Salted one-way hashing backed by :mod:`werkzeug.security`.

    :param method: Werkzeug method string, e.g. ``"scrypt"`` or
        ``"pbkdf2:sha256:600000"``. The iteration part is the cost factor.
    """

    method: str = "scrypt"

    def hash(self, plaintext: str) -> str:
        if not isinstance(plaintext, str) or not plaintext:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, plaintext: str, digest: str) -> bool:
        if not digest or not isinstance(plaintext, str):
            return False
        # ``check_password_hash`` returns ``Any`` to type checkers; coerce.
        return bool(check_password_hash(digest, plaintext))
