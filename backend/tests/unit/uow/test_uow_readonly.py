"""
Unit tests for SQLAlchemyReadOnlyUnitOfWork.
"""

from __future__ import annotations

import pytest
from blog_api.models import Account
from blog_api.uow import SQLAlchemyReadOnlyUnitOfWork

from tests.factories.account import AccountFactory


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_reads_are_allowed(self):
        account = AccountFactory(username="reader")

        with SQLAlchemyReadOnlyUnitOfWork() as uow:
            found = uow.accounts.get_by_username("reader")
            assert found is not None
            assert found.id == account.id

    def test_flush_is_blocked(self, db):
        initial = db.session.query(Account).count()

        with pytest.raises(RuntimeError, match="Read-only"), SQLAlchemyReadOnlyUnitOfWork() as uow:
            uow.accounts.add(AccountFactory.build())

        assert db.session.query(Account).count() == initial

    def test_commit_is_disallowed(self):
        with pytest.raises(RuntimeError), SQLAlchemyReadOnlyUnitOfWork() as uow:
            uow.commit()

    def test_guard_is_removed_after_exit(self, db):
        with SQLAlchemyReadOnlyUnitOfWork():
            pass

        # A plain write afterwards must not be blocked
        AccountFactory()
        assert db.session.query(Account).count() == 1
