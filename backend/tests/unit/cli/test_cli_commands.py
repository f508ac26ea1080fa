"""Unit tests for the ``flask store`` and ``flask sessions`` commands."""

from __future__ import annotations

from blog_api.models import Account

from tests.factories.account import AccountFactory
from tests.helpers.utils import reload


def test_store_init_is_idempotent(runner, db):
    AccountFactory()

    result = runner.invoke(args=["store", "init"])

    assert result.exit_code == 0
    assert "Store initialised." in result.output
    # Existing rows survive
    assert db.session.query(Account).count() == 1


def test_sessions_revoke_clears_the_token_list(runner):
    account = AccountFactory(username="gal", refresh_tokens=["t1", "t2"])

    result = runner.invoke(args=["sessions", "revoke", "gal"])

    assert result.exit_code == 0, result.output
    assert "Revoked 2 session(s) for gal." in result.output
    assert reload(Account, account.id).refresh_tokens == []


def test_sessions_revoke_unknown_username(runner):
    result = runner.invoke(args=["sessions", "revoke", "ghost"])

    assert result.exit_code != 0
    assert "No account named 'ghost'" in result.output
