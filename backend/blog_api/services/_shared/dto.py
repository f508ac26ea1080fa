# blog_api/services/_shared/dto.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PaginationIn:
    """
    Input pagination contract.

    :param page: 1-based page number.
    :param limit: Page size (> 0).
    :param sort: Sort tokens like ``["-created_at", "title"]``.
    """

    page: int = 1
    limit: int = 20
    sort: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class PageMeta:
    """
    Output pagination metadata.

    :param page: Current page (1-based).
    :param limit: Page size.
    :param total: Total rows available.
    :param has_prev: Whether a previous page exists.
    :param has_next: Whether a next page exists.
    """

    page: int
    limit: int
    total: int
    has_prev: bool
    has_next: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> PageMeta:
        return cls(
            page=page,
            limit=limit,
            total=total,
            has_prev=page > 1,
            has_next=page * limit < total,
        )


@dataclass(frozen=True, slots=True)
class PageOut(Generic[T]):
    """A page of output DTOs plus its metadata."""

    items: list[T]
    meta: PageMeta
