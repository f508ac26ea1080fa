"""Account model: identity, credentials and live refresh sessions."""

from __future__ import annotations

from sqlalchemy import JSON, Index, String, UniqueConstraint
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.orm import Mapped, mapped_column, validates

from blog_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


def normalize_email(value: str) -> str:
    """Return the canonical stored form of an email: trimmed and lowercased."""
    return value.strip().lower()


class Account(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Registered user able to authenticate and own content.

    Fields
    ------
    email : str
        Login email. Stored trimmed and lowercased. Unique per system, ignoring case.
    username : str
        Login handle. Unique per system.
    password_hash : str
        Opaque digest produced by the password hasher.
    first_name, last_name : str
        Display names.
    refresh_tokens : list[str]
        Ordered refresh tokens currently accepted for this account. A token
        is valid only while it is a member of this list.
    """

    __tablename__ = "accounts"

    # Columns
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(254), nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    refresh_tokens: Mapped[list[str]] = mapped_column(
        MutableList.as_mutable(JSON), nullable=False, default=list
    )

    # Constraints & indexes
    __table_args__ = (
        UniqueConstraint("email", name="uq_accounts_email"),
        UniqueConstraint("username", name="uq_accounts_username"),
        Index("ix_accounts_username", "username"),
    )

    # -------------------- Validators --------------------
    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize (trim, lowercase) and sanity-check the email.

        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = normalize_email(value)
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v:
            raise ValueError("Email format looks invalid.")
        return v

    @validates("username", "first_name", "last_name")
    def _require_text(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{key} is required.")
        return value.strip()
