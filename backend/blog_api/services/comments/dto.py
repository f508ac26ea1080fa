"""DTOs for CommentService."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CommentCreateIn:
    owner: str
    content: str
    post_id: str


@dataclass(frozen=True, slots=True)
class CommentUpdateIn:
    """Partial update; ``None`` fields are left unchanged."""

    owner: str | None = None
    content: str | None = None
    post_id: str | None = None


@dataclass(frozen=True, slots=True)
class CommentOut:
    id: str
    owner: str
    content: str
    post_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
