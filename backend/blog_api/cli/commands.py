"""Flask CLI commands for operators: schema setup and session revocation."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from blog_api.core.extensions import db

LOGGER = logging.getLogger(__name__)


@click.group("store")
def store_cli() -> None:
    """Data store maintenance commands."""


@store_cli.command("init")
@with_appcontext
def init_command() -> None:
    """Create any missing tables. Existing tables and rows are left alone."""
    from blog_api import models as _models  # noqa: F401

    try:
        db.create_all()
    except SQLAlchemyError as exc:  # pragma: no cover - CLI safeguard
        raise click.ClickException(f"Store initialisation failed: {exc}") from exc
    click.echo("Store initialised.")


@click.group("sessions")
def sessions_cli() -> None:
    """Refresh-session management commands."""


@sessions_cli.command("revoke")
@click.argument("username")
@with_appcontext
def revoke_command(username: str) -> None:
    """Drop every refresh session of USERNAME, forcing a new login."""
    from blog_api.api.deps import get_auth_service
    from blog_api.uow import SQLAlchemyReadOnlyUnitOfWork

    with SQLAlchemyReadOnlyUnitOfWork() as uow:
        account = uow.accounts.get_by_username(username)
        account_id = account.id if account is not None else None
    if account_id is None:
        raise click.ClickException(f"No account named {username!r}.")

    dropped = get_auth_service().revoke_all(account_id)
    LOGGER.info("Sessions revoked from CLI", extra={"account_id": account_id, "sessions": dropped})
    click.echo(f"Revoked {dropped} session(s) for {username}.")
