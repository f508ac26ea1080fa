"""
Abstract Unit of Work contracts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Scope of one blog operation over a single database session.

    Account, post and comment repositories handed out by a unit share that
    session, so a signup that stores its first refresh token, or a post
    update that touches its owner, lands in one transaction. Leaving the
    ``with`` block on an exception rolls back; read-only units refuse to
    commit at all.
    """

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...
    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...
    @abstractmethod
    def commit(self) -> None: ...
    @abstractmethod
    def rollback(self) -> None: ...

    # Concrete implementations expose ``accounts``, ``posts`` and ``comments``.
