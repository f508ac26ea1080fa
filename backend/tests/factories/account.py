"""Factory Boy definition for :class:`blog_api.models.account.Account`."""

from __future__ import annotations

import factory
from blog_api.models.account import Account
from werkzeug.security import generate_password_hash

from tests.factories import BaseFactory

DEFAULT_PASSWORD = "Passw0rd!"
# Same cheap method as TestingConfig so the app's hasher can verify it
TEST_HASH_METHOD = "pbkdf2:sha256:1000"


class AccountFactory(BaseFactory):
    """
    Build persisted :class:`Account` instances.

    Pass ``password="..."`` to control the plaintext; only its digest is stored.
    """

    class Meta:
        model = Account
        exclude = ("password",)

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    username = factory.Sequence(lambda n: f"user{n}")
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    password = DEFAULT_PASSWORD
    password_hash = factory.LazyAttribute(
        lambda o: generate_password_hash(o.password, method=TEST_HASH_METHOD)
    )
    refresh_tokens = factory.LazyFunction(list)
