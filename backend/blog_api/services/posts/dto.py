"""DTOs for PostService."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class PostCreateIn:
    title: str
    owner: str
    content: str | None = None


@dataclass(frozen=True, slots=True)
class PostUpdateIn:
    """Partial update; ``None`` fields are left unchanged."""

    title: str | None = None
    content: str | None = None
    owner: str | None = None


@dataclass(frozen=True, slots=True)
class PostOut:
    id: str
    title: str
    content: str | None
    owner: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class PostDeletedOut:
    """
    Result of deleting a post.

    :param post: The removed post.
    :param comments_deleted: How many comments went with it.
    """

    post: PostOut
    comments_deleted: int
