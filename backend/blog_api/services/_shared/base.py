# blog_api/services/_shared/base.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from blog_api.models.base import is_valid_id
from blog_api.repositories.base import Pagination
from blog_api.services._shared.errors import ForbiddenError, ValidationError
from blog_api.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (auth, request ids).

    :param actor_id: Authenticated account id, once resolved from an access token.
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: str | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Offer shared validation helpers (ids, pagination, ownership).
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    Services must never touch the global session; always use a Unit of Work.
    """

    MAX_PAGE_SIZE = 100
    # Keeps the computed OFFSET inside the store's integer range
    MAX_PAGE = 1_000_000

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        return SQLAlchemyReadOnlyUnitOfWork()

    # ----------------------- Validation utilities ---------------------------

    def ensure_valid_id(self, value: str, *, field: str = "id") -> str:
        """
        Reject identifiers that cannot exist in the store.

        :raises ValidationError: If ``value`` is not a 32-char hex id.
        """
        if not is_valid_id(value):
            raise ValidationError(f"Invalid {field}: {value!r}")
        return value

    def ensure_pagination(
        self, *, page: int, limit: int, sort: Iterable[str] | None = None
    ) -> Pagination:
        """
        Build a Pagination value object with basic clamping.

        :param page: 1-based page number, at most :attr:`MAX_PAGE`.
        :param limit: Page size, capped at :attr:`MAX_PAGE_SIZE`.
        :param sort: Sort tokens like ``["-created_at", "title"]``.
        """
        page = max(1, int(page))
        if page > self.MAX_PAGE:
            raise ValidationError(f"page must be at most {self.MAX_PAGE}")
        limit = min(max(1, int(limit)), self.MAX_PAGE_SIZE)
        return Pagination(page=page, limit=limit, sort=list(sort or []))

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, owner_id: str, *, msg: str | None = None) -> None:
        """
        Ensure the authenticated actor is ``owner_id``.

        :raises ForbiddenError: If the actor is missing or someone else.
        """
        if self.ctx.actor_id is None or self.ctx.actor_id != owner_id:
            raise ForbiddenError(msg or "You can only modify your own account.")
