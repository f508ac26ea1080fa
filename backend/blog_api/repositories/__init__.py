"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from blog_api.repositories.account import AccountRepository
from blog_api.repositories.base import (
    BaseRepository,
    Page,
    Pagination,
    paginate_select,
)
from blog_api.repositories.comment import CommentRepository
from blog_api.repositories.post import PostRepository

__all__ = [
    "AccountRepository",
    "BaseRepository",
    "CommentRepository",
    "Page",
    "Pagination",
    "PostRepository",
    "paginate_select",
]
