"""Factory Boy helpers wired to the project's SQLAlchemy session."""

from __future__ import annotations

import factory
from blog_api.core.extensions import db


def _current_session():
    """Return the Flask-scoped session of the active app context."""
    return db.session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Base class committing factory objects so services see them."""

    class Meta:
        abstract = True
        # A callable keeps Factory Boy lazy: the session only exists once the
        # per-test app context is pushed.
        sqlalchemy_session_factory = _current_session
        sqlalchemy_session_persistence = "commit"
