"""Post model."""

from __future__ import annotations

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class Post(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Blog entry. ``owner`` is free text and is not linked to an account.

    Comments reference posts by id only; removing their comments on delete is
    the post service's job.
    """

    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (Index("ix_posts_owner", "owner"),)
