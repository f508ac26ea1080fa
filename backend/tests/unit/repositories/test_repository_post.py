"""Unit tests for PostRepository."""

from __future__ import annotations

import pytest
from blog_api.repositories import Pagination, PostRepository

from tests.factories.post import PostFactory


class TestPostRepository:
    @pytest.fixture()
    def repo(self):
        return PostRepository()

    def test_get_returns_none_for_unknown_id(self, repo):
        assert repo.get("f" * 32) is None

    def test_filter_by_owner(self, repo):
        PostFactory(owner="gal")
        PostFactory(owner="gal")
        PostFactory(owner="dana")

        page = repo.paginate(Pagination(page=1, limit=10, sort=[]), filters={"owner": "gal"})

        assert page.total == 2
        assert {p.owner for p in page.items} == {"gal"}

    def test_unknown_filters_are_ignored(self, repo):
        PostFactory()
        PostFactory()

        assert repo.count(password="x") == 2

    def test_second_page(self, repo):
        for title in ("a", "b", "c"):
            PostFactory(title=title)

        page = repo.paginate(Pagination(page=2, limit=2, sort=["title"]))

        assert page.total == 3
        assert [p.title for p in page.items] == ["c"]

    def test_update_whitelisted_fields(self, repo, session):
        post = PostFactory(title="Old")

        repo.update(post, title="New")
        session.commit()

        assert repo.get(post.id).title == "New"
