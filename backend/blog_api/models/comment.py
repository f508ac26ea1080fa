"""Comment model."""

from __future__ import annotations

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.core.extensions import db

from .base import ID_LENGTH, PKMixin, ReprMixin, TimestampMixin


class Comment(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Comment attached to a post.

    ``post_id`` is a plain reference: there is no foreign key, so a comment may
    point at a post that does not exist.
    """

    __tablename__ = "comments"

    owner: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)

    __table_args__ = (Index("ix_comments_post_id", "post_id"),)
