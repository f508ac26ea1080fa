"""Pytest fixtures building the app once and a clean in-memory store per test.

The application is created a single time with :class:`TestingConfig`. Every
test runs inside its own application context with freshly recreated tables,
so data never leaks between cases.
"""

from __future__ import annotations

import os

import pytest
from blog_api.core.config import TestingConfig
from blog_api.core.extensions import db as _db
from blog_api.core.extensions import get_auth_components
from blog_api.factory import create_app


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application instance with :class:`TestingConfig` applied.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    return create_app(TestingConfig)


@pytest.fixture(autouse=True)
def db(app):
    """Push an app context and rebuild every table for the test.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the testing application.
    """
    with app.app_context():
        _db.session.remove()
        _db.drop_all()
        _db.create_all()
        yield _db
        _db.session.remove()


@pytest.fixture()
def session(db):
    """Shortcut to the Flask-scoped session used by repositories and factories."""
    return db.session


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


@pytest.fixture()
def auth_components(app):
    """Settings, codec and hasher exactly as the app wires them."""
    return get_auth_components(app)


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
