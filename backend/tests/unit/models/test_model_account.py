"""Unit tests for the Account model and shared id helpers."""

from __future__ import annotations

import pytest
from blog_api.models import Account
from blog_api.models.account import normalize_email
from blog_api.models.base import is_valid_id, new_id

from tests.factories.account import AccountFactory


def test_new_id_is_32_char_hex():
    value = new_id()
    assert len(value) == 32
    assert is_valid_id(value)
    assert new_id() != value


@pytest.mark.parametrize("value", ["", "123", "Z" * 32, "a" * 33, None, 42])
def test_is_valid_id_rejects_garbage(value):
    assert is_valid_id(value) is False


def test_account_defaults_after_insert(session):
    account = AccountFactory()

    fetched = session.get(Account, account.id)
    assert is_valid_id(fetched.id)
    assert fetched.refresh_tokens == []
    assert fetched.created_at is not None
    assert fetched.updated_at is not None


def test_email_is_trimmed():
    account = AccountFactory.build(email="  gal@gmail.com ")
    assert account.email == "gal@gmail.com"


def test_email_is_lowercased(session):
    account = AccountFactory(email=" Gal@Gmail.COM ")
    session.expire_all()
    assert session.get(Account, account.id).email == "gal@gmail.com"


def test_normalize_email():
    assert normalize_email("  Gal@Gmail.com") == "gal@gmail.com"


@pytest.mark.parametrize("email", ["", "no-at-sign"])
def test_invalid_email_is_rejected(email):
    with pytest.raises(ValueError):
        Account(email=email)


@pytest.mark.parametrize("field", ["username", "first_name", "last_name"])
def test_blank_names_are_rejected(field):
    with pytest.raises(ValueError):
        Account(**{field: "   "})


def test_refresh_token_list_mutations_are_persisted(session):
    account = AccountFactory()

    account.refresh_tokens.append("t1")
    session.commit()
    session.expire_all()

    assert session.get(Account, account.id).refresh_tokens == ["t1"]


def test_repr_mentions_id():
    account = AccountFactory.build(id="a" * 32)
    assert repr(account) == f"<Account id={'a' * 32}>"
