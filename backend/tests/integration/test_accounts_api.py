"""Integration tests for the profile endpoints ``/auth/<id>``."""

from __future__ import annotations

from blog_api.models import Account

from tests.factories.account import AccountFactory
from tests.helpers.utils import auth_header, login, reload


def _access_for(client, account) -> dict[str, str]:
    return auth_header(login(client, account.username)["accessToken"])


def test_get_account_is_public(client) -> None:
    account = AccountFactory(first_name="Gal")

    resp = client.get(f"/auth/{account.id}")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["id"] == account.id
    assert data["firstName"] == "Gal"
    assert "passwordHash" not in data


def test_get_unknown_and_malformed_ids(client) -> None:
    assert client.get(f"/auth/{'f' * 32}").status_code == 404
    assert client.get("/auth/not-an-id").status_code == 400


def test_update_requires_a_token(client) -> None:
    account = AccountFactory()

    resp = client.put(f"/auth/{account.id}", json={"firstName": "X"})

    assert resp.status_code == 401


def test_update_with_garbage_token_is_forbidden(client) -> None:
    account = AccountFactory()

    resp = client.put(
        f"/auth/{account.id}", json={"firstName": "X"}, headers=auth_header("garbage")
    )

    assert resp.status_code == 403


def test_owner_updates_own_profile(client) -> None:
    account = AccountFactory()
    headers = _access_for(client, account)

    resp = client.put(f"/auth/{account.id}", json={"firstName": "Dana"}, headers=headers)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "User updated"
    assert body["data"]["firstName"] == "Dana"


def test_cannot_update_someone_else(client) -> None:
    victim = AccountFactory(first_name="Gal")
    intruder = AccountFactory()

    resp = client.put(
        f"/auth/{victim.id}", json={"firstName": "X"}, headers=_access_for(client, intruder)
    )

    assert resp.status_code == 403
    assert reload(Account, victim.id).first_name == "Gal"


def test_empty_update_is_rejected(client) -> None:
    account = AccountFactory()

    resp = client.put(f"/auth/{account.id}", json={}, headers=_access_for(client, account))

    assert resp.status_code == 400


def test_owner_deletes_account(client) -> None:
    account = AccountFactory()
    account_id = account.id
    headers = _access_for(client, account)

    resp = client.delete(f"/auth/{account_id}", headers=headers)

    assert resp.status_code == 200
    assert resp.get_json()["message"] == "User deleted"
    assert client.get(f"/auth/{account_id}").status_code == 404
