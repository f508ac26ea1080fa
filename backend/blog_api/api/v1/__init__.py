"""API v1 blueprint package bundling the public routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .auth import bp as auth_bp  # noqa: E402
from .comments import bp as comments_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .posts import bp as posts_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_base)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /health
    (auth_bp, "/auth"),
    (posts_bp, "/post"),
    (comments_bp, "/comment"),
]
