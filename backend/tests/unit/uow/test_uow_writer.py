"""
Unit tests for SQLAlchemyUnitOfWork (writer), using factories.
"""

from __future__ import annotations

import pytest
from blog_api.models import Account
from blog_api.uow import SQLAlchemyUnitOfWork

from tests.factories.account import AccountFactory


class TestSQLAlchemyUnitOfWorkWriter:
    def test_writer_uow_commits_on_success(self, db):
        """
        GIVEN a writer UoW
        WHEN an account is added inside the context and the block exits cleanly
        THEN the transaction is committed and the row is visible afterwards.
        """
        initial = db.session.query(Account).count()

        with SQLAlchemyUnitOfWork() as uow:
            uow.accounts.add(AccountFactory.build())

        db.session.expire_all()
        assert db.session.query(Account).count() == initial + 1

    def test_writer_uow_rolls_back_on_exception(self, db):
        """
        GIVEN a writer UoW
        WHEN an exception is raised inside the context
        THEN the transaction is rolled back and no rows are persisted.
        """
        initial = db.session.query(Account).count()

        with pytest.raises(RuntimeError), SQLAlchemyUnitOfWork() as uow:
            uow.accounts.add(AccountFactory.build())
            raise RuntimeError("boom")

        assert db.session.query(Account).count() == initial

    def test_repositories_share_the_session(self):
        with SQLAlchemyUnitOfWork() as uow:
            assert uow.accounts.session is uow.posts.session is uow.comments.session
