"""Reusable SQLAlchemy mixins shared by domain models (typed 2.0)."""

from __future__ import annotations

import re
from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

ID_LENGTH = 32
ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    """Return a fresh 32-char lowercase hex identifier."""
    return uuid4().hex


def is_valid_id(value: object) -> bool:
    """Return ``True`` when ``value`` looks like an id produced by :func:`new_id`."""
    return isinstance(value, str) and bool(ID_PATTERN.match(value))


class TimestampMixin:
    """Provide ``created_at`` and ``updated_at`` timestamp columns.

    Attributes
    ----------
    created_at:
        Timezone-aware timestamp filled by the database on insert.
    updated_at:
        Timezone-aware timestamp refreshed by the database on update.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class PKMixin:
    """Expose a string surrogate primary key column named ``id``.

    Attributes
    ----------
    id:
        32-char hex key generated client-side on insert.
    """

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_id)


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
