"""Command-line interface registration for the Flask application."""

from __future__ import annotations

from flask import Flask

from .commands import sessions_cli, store_cli


def init_app(app: Flask) -> None:
    """Register the ``store`` and ``sessions`` command groups."""
    app.cli.add_command(store_cli)
    app.cli.add_command(sessions_cli)
