"""Factory Boy definition for :class:`blog_api.models.post.Post`."""

from __future__ import annotations

import factory
from blog_api.models.post import Post

from tests.factories import BaseFactory


class PostFactory(BaseFactory):
    class Meta:
        model = Post

    title = factory.Faker("sentence", nb_words=4)
    content = factory.Faker("paragraph")
    owner = factory.Sequence(lambda n: f"author{n}")
