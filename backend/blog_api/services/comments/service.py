"""
CommentService
==============

CRUD for comments. ``post_id`` must be a well-formed id but the post itself
is not looked up: comments may reference posts that do not exist.
"""

from __future__ import annotations

import logging

from blog_api.models.comment import Comment
from blog_api.services._shared.base import BaseService
from blog_api.services._shared.dto import PageMeta, PageOut, PaginationIn
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.comments.dto import CommentCreateIn, CommentOut, CommentUpdateIn

logger = logging.getLogger(__name__)


def _to_out(comment: Comment) -> CommentOut:
    return CommentOut(
        id=comment.id,
        owner=comment.owner,
        content=comment.content,
        post_id=comment.post_id,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


class CommentService(BaseService):
    """Application service for comments."""

    def list(
        self, pagination: PaginationIn, *, post_id: str | None = None
    ) -> PageOut[CommentOut]:
        """List comments, optionally only those attached to ``post_id``."""
        filters = None
        if post_id:
            self.ensure_valid_id(post_id, field="postId")
            filters = {"post_id": post_id}
        pg = self.ensure_pagination(
            page=pagination.page, limit=pagination.limit, sort=pagination.sort
        )
        with self.ro_uow() as uow:
            page = uow.comments.paginate(pg, filters=filters)
            items = [_to_out(c) for c in page.items]
        return PageOut(items=items, meta=PageMeta.build(page=pg.page, limit=pg.limit, total=page.total))

    def list_for_post(self, post_id: str) -> list[CommentOut]:
        """Every comment of one post, oldest first. Unknown posts yield ``[]``."""
        self.ensure_valid_id(post_id, field="postId")
        with self.ro_uow() as uow:
            comments = uow.comments.list(filters={"post_id": post_id}, sort=["created_at"])
            return [_to_out(c) for c in comments]

    def get(self, comment_id: str) -> CommentOut:
        self.ensure_valid_id(comment_id)
        with self.ro_uow() as uow:
            comment = uow.comments.get(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            return _to_out(comment)

    def create(self, dto: CommentCreateIn) -> CommentOut:
        self.ensure_valid_id(dto.post_id, field="postId")
        with self.rw_uow() as uow:
            comment = uow.comments.add(
                Comment(owner=dto.owner, content=dto.content, post_id=dto.post_id)
            )
            out = _to_out(comment)
        logger.info(
            "Comment created",
            extra={"comment_id": out.id, "post_id": out.post_id, "account_id": self.ctx.actor_id},
        )
        return out

    def update(self, comment_id: str, dto: CommentUpdateIn) -> CommentOut:
        self.ensure_valid_id(comment_id)
        if dto.post_id is not None:
            self.ensure_valid_id(dto.post_id, field="postId")
        changes = {
            k: v
            for k, v in (("owner", dto.owner), ("content", dto.content), ("post_id", dto.post_id))
            if v is not None
        }
        if not changes:
            raise ValidationError("No fields to update")

        with self.rw_uow() as uow:
            comment = uow.comments.get(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            uow.comments.update(comment, **changes)
            out = _to_out(comment)
        logger.info("Comment updated", extra={"comment_id": comment_id, "fields": sorted(changes)})
        return out

    def delete(self, comment_id: str) -> CommentOut:
        self.ensure_valid_id(comment_id)
        with self.rw_uow() as uow:
            comment = uow.comments.get(comment_id)
            if comment is None:
                raise NotFoundError("Comment", comment_id)
            out = _to_out(comment)
            uow.comments.delete(comment)
        logger.info("Comment deleted", extra={"comment_id": comment_id})
        return out
