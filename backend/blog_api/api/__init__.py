"""API blueprint package aggregating versioned endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask, g


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries. May be empty to mount at ``/``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.strip("/"), rel_prefix.strip("/")] if segment
        )
        app.register_blueprint(bp, url_prefix="/" + full_prefix if full_prefix else None)


def init_app(app: Flask) -> None:
    """Register the API routes on the Flask app.

    Routes are unversioned in the URL (``/auth``, ``/post``, ...); set
    ``API_BASE_PREFIX`` to mount them elsewhere.
    """

    api_base = app.config.get("API_BASE_PREFIX", "") or ""

    from blog_api.api.v1 import REGISTRY as V1_REGISTRY

    register_blueprint_group(app, base_prefix=api_base, entries=V1_REGISTRY)

    @app.before_request
    def _reset_actor() -> None:
        # The actor is set by require_auth only
        g.pop("account_id", None)


__all__ = ["init_app", "register_blueprint_group"]
