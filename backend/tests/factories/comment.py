"""Factory Boy definition for :class:`blog_api.models.comment.Comment`."""

from __future__ import annotations

import factory
from blog_api.models.base import new_id
from blog_api.models.comment import Comment

from tests.factories import BaseFactory


class CommentFactory(BaseFactory):
    """
    Build persisted comments.

    ``post_id`` defaults to a random id that matches no post; pass
    ``post_id=post.id`` to attach the comment to a real one.
    """

    class Meta:
        model = Comment

    owner = factory.Sequence(lambda n: f"reader{n}")
    content = factory.Faker("sentence")
    post_id = factory.LazyFunction(new_id)
