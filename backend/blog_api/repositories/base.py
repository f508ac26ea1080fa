"""Generic repository base and query utilities for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by all repositories:
- Safe sorting and filtering through per-repository whitelists.
- Deterministic pagination (adds primary-key tiebreaker).
- Safe update helpers with per-repository updatable-field whitelists.
- No business logic, no commit/rollback. Services own transactions.

Repositories map the generic store operations used by the services:
``get`` (find by id), ``find_one``, ``add`` (create), ``update``,
``delete``, ``delete_where`` (bulk delete by filter), ``list`` and
``paginate`` (find).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, and_, delete, func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from blog_api.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


# ------------------------------- Pagination ----------------------------------


@dataclass(slots=True)
class Pagination:
    """Pagination input parameters.

    :param page: 1-based page number.
    :param limit: Page size.
    :param sort: Public sort tokens (e.g., ``["-created_at", "title"]``).
    """

    page: int
    limit: int
    sort: list[str]


@dataclass(slots=True)
class Page(Generic[E]):
    """Result page with metadata.

    :param items: Listed entities in the current page.
    :param total: Total item count for the query.
    :param page: 1-based current page number.
    :param limit: Page size.
    """

    items: Sequence[E]
    total: int
    page: int
    limit: int


# ----------------------------- Sorting utilities -----------------------------


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Parse public sort tokens into ``(field, is_desc)`` tuples."""
    parsed: list[tuple[str, bool]] = []
    for token in raw:
        is_desc = token.startswith("-")
        field = (token[1:] if is_desc else token).strip()
        if field:
            parsed.append((field, is_desc))
    return parsed


def _apply_sorting(
    stmt: Select[Any],
    sortable_fields: Mapping[str, InstrumentedAttribute[Any]],
    tokens: Iterable[str],
    *,
    pk_attr: InstrumentedAttribute[Any] | None,
) -> Select[Any]:
    """Apply safe ``ORDER BY`` clauses based on a whitelist mapping.

    Unknown sort tokens are ignored silently. The primary key is always
    appended as a final ascending tiebreaker to stabilize pagination.
    """
    orders: list[Any] = []
    for field, is_desc in parse_sort_tokens(tokens):
        col = sortable_fields.get(field)
        if isinstance(col, InstrumentedAttribute):
            orders.append(col.desc() if is_desc else col.asc())

    if orders:
        stmt = stmt.order_by(*orders)

    if pk_attr is not None:
        stmt = stmt.order_by(pk_attr.asc())

    return stmt


def paginate_select(
    session: Session,
    stmt: Select[Any],
    *,
    page: int,
    limit: int,
) -> tuple[list[Any], int]:
    """Execute a select with pagination and a total count.

    The statement's ``ORDER BY`` is stripped for the ``COUNT``.

    :returns: Tuple of ``(items, total)``.
    """
    page = max(int(page), 1)
    limit = max(int(limit), 1)

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = int(session.execute(count_stmt).scalar_one())

    sliced = stmt.limit(limit).offset((page - 1) * limit)
    items = list(session.execute(sliced).scalars().all())
    return items, total


# ------------------------------ Base repository ------------------------------


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define ``model`` and MAY override ``_sortable_fields``,
    ``_filterable_fields`` and ``_updatable_fields``.

    This class NEVER opens, commits or rolls back transactions.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        Without an explicit session the Flask-scoped ``db.session`` is used.
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        return getattr(self.model, "id", None)

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public sort keys to model attributes."""
        return {}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist of equality-filterable fields. Unknown keys are ignored."""
        return {}

    def _updatable_fields(self) -> set[str]:
        """Whitelist of keys that can be assigned on update."""
        return set()

    # ------------------------------ Internals --------------------------------

    def _equality_clauses(self, filters: Mapping[str, Any] | None) -> list[Any]:
        """Build ``col == value`` clauses for whitelisted keys only."""
        allowed = self._filterable_fields()
        clauses: list[Any] = []
        for k, v in (filters or {}).items():
            col = allowed.get(k)
            if isinstance(col, InstrumentedAttribute):
                clauses.append(col == v)
        return clauses

    def _apply_equality_filters(
        self,
        stmt: Select[Any],
        filters: Mapping[str, Any] | None,
    ) -> Select[Any]:
        clauses = self._equality_clauses(filters)
        return stmt.where(and_(*clauses)) if clauses else stmt

    def _sanitize_update_fields(
        self,
        fields: Mapping[str, Any],
        *,
        strict: bool = True,
    ) -> dict[str, Any]:
        """Return a dict with only whitelisted update keys.

        :raises ValueError: If ``strict`` and unknown keys are present.
        """
        allowed = self._updatable_fields()
        if not allowed:
            # Fail closed: no whitelist means nothing is assignable
            if fields and strict:
                raise ValueError("No updatable fields configured for this repository.")
            return {}

        unknown = [k for k in fields if k not in allowed]
        if unknown and strict:
            raise ValueError(f"Unknown or non-updatable fields: {unknown}")

        return {k: v for k, v in fields.items() if k in allowed}

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity and flush to materialize defaults."""
        self.session.add(instance)
        self.flush()
        return instance

    def get(self, entity_id: Any) -> E | None:
        """Retrieve a single entity by primary key.

        :raises RuntimeError: If no PK attribute can be detected.
        """
        pk_attr = self._pk_attr()
        if pk_attr is None:
            raise RuntimeError("BaseRepository.get requires a detectable PK attribute.")
        result = self.session.execute(select(self.model).where(pk_attr == entity_id))
        return cast(E | None, result.scalars().first())

    def find_one(self, **filters: Any) -> E | None:
        """Find a single entity by whitelisted equality filters."""
        stmt = self._apply_equality_filters(select(self.model), filters)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def exists(self, *, exclude_id: Any = None, **filters: Any) -> bool:
        """Check existence for whitelisted equality filters.

        :param exclude_id: Primary key to leave out, e.g. the entity being updated.
        """
        stmt: Select[Any] = select(func.count()).select_from(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        pk_attr = self._pk_attr()
        if exclude_id is not None and pk_attr is not None:
            stmt = stmt.where(pk_attr != exclude_id)
        return bool(self.session.execute(stmt).scalar_one())

    def count(self, **filters: Any) -> int:
        stmt: Select[Any] = select(func.count()).select_from(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        return int(self.session.execute(stmt).scalar_one())

    def delete(self, instance: E) -> None:
        """Delete an entity and flush."""
        self.session.delete(instance)
        self.flush()

    def delete_where(self, **filters: Any) -> int:
        """Bulk-delete rows matching whitelisted equality filters.

        Refuses to run without at least one recognised filter so a typo never
        wipes the table.

        :returns: Number of rows removed.
        :raises ValueError: If no usable filter was given.
        """
        clauses = self._equality_clauses(filters)
        if not clauses:
            raise ValueError("delete_where requires at least one filterable field.")
        stmt = (
            delete(self.model)
            .where(and_(*clauses))
            .execution_options(synchronize_session="fetch")
        )
        result = self.session.execute(stmt)
        return int(result.rowcount or 0)

    def flush(self) -> None:
        self.session.flush()

    # ----------------------------- Safe updates -------------------------------

    def assign_updates(
        self,
        instance: E,
        fields: Mapping[str, Any],
        *,
        strict: bool = True,
        flush: bool = True,
    ) -> E:
        """Assign only whitelisted keys to ``instance`` and optionally flush.

        Uses ``setattr`` so ``@validates`` hooks on the model still run.
        """
        for k, v in self._sanitize_update_fields(fields, strict=strict).items():
            setattr(instance, k, v)
        if flush:
            self.flush()
        return instance

    def update(self, instance: E, **fields: Any) -> E:
        """Convenience wrapper around :meth:`assign_updates` with defaults."""
        return self.assign_updates(instance, fields, strict=True, flush=True)

    # ------------------------------- Listing ---------------------------------

    def list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[str] | None = None,
    ) -> list[E]:
        """List entities with optional filtering and sorting."""
        stmt: Select[Any] = self._apply_equality_filters(select(self.model), filters)
        stmt = _apply_sorting(stmt, self._sortable_fields(), sort or [], pk_attr=self._pk_attr())
        return cast(list[E], list(self.session.execute(stmt).scalars().all()))

    def paginate(
        self,
        pagination: Pagination,
        *,
        filters: Mapping[str, Any] | None = None,
    ) -> Page[E]:
        """Paginate entities with stable sorting and a total."""
        stmt: Select[Any] = self._apply_equality_filters(select(self.model), filters)
        stmt = _apply_sorting(
            stmt, self._sortable_fields(), pagination.sort, pk_attr=self._pk_attr()
        )
        items, total = paginate_select(
            self.session, stmt, page=pagination.page, limit=pagination.limit
        )
        return Page(
            items=cast(list[E], items),
            total=total,
            page=pagination.page,
            limit=pagination.limit,
        )
