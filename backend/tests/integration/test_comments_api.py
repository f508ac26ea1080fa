"""Integration tests for ``/comment`` endpoints."""

from __future__ import annotations

import pytest
from blog_api.models.base import new_id

from tests.factories.account import AccountFactory
from tests.factories.comment import CommentFactory
from tests.factories.post import PostFactory
from tests.helpers.utils import auth_header, login


@pytest.fixture()
def headers(client) -> dict[str, str]:
    account = AccountFactory()
    return auth_header(login(client, account.username)["accessToken"])


def test_create_comment(client, headers) -> None:
    post = PostFactory()

    resp = client.post(
        "/comment", json={"owner": "gal", "content": "Nice", "postId": post.id}, headers=headers
    )

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["postId"] == post.id
    assert data["content"] == "Nice"


def test_create_requires_auth(client) -> None:
    resp = client.post("/comment", json={"owner": "gal", "content": "Hi", "postId": new_id()})
    assert resp.status_code == 401


def test_create_with_malformed_post_id(client, headers) -> None:
    resp = client.post(
        "/comment", json={"owner": "gal", "content": "Hi", "postId": "bad"}, headers=headers
    )
    assert resp.status_code == 400


def test_list_for_post(client) -> None:
    post = PostFactory()
    CommentFactory.create_batch(2, post_id=post.id)
    CommentFactory()

    resp = client.get(f"/comment/post/{post.id}")

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert len(data) == 2
    assert {c["postId"] for c in data} == {post.id}


def test_paginated_list_with_post_filter(client) -> None:
    post = PostFactory()
    CommentFactory.create_batch(3, post_id=post.id)
    CommentFactory()

    resp = client.get(f"/comment?postId={post.id}&limit=2")

    body = resp.get_json()
    assert resp.status_code == 200
    assert len(body["data"]) == 2
    assert body["meta"]["total"] == 3
    assert body["meta"]["hasNext"] is True


@pytest.mark.parametrize("page", ["0", "99999999999999999999"])
def test_paginated_list_rejects_out_of_range_page(client, page) -> None:
    resp = client.get(f"/comment?page={page}")

    assert resp.status_code == 400
    assert resp.get_json()["code"] == "validation_error"


def test_get_update_delete(client, headers) -> None:
    comment_id = CommentFactory(content="Old").id

    assert client.get(f"/comment/{comment_id}").status_code == 200

    resp = client.put(f"/comment/{comment_id}", json={"content": "New"}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Comment updated"
    assert resp.get_json()["data"]["content"] == "New"

    resp = client.delete(f"/comment/{comment_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Comment deleted"

    assert client.get(f"/comment/{comment_id}").status_code == 404
