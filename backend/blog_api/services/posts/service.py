"""
PostService
===========

CRUD for posts. Deleting a post also deletes every comment whose ``post_id``
points at it, in the same transaction.
"""

from __future__ import annotations

import logging

from blog_api.models.post import Post
from blog_api.services._shared.base import BaseService
from blog_api.services._shared.dto import PageMeta, PageOut, PaginationIn
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.posts.dto import PostCreateIn, PostDeletedOut, PostOut, PostUpdateIn

logger = logging.getLogger(__name__)


def _to_out(post: Post) -> PostOut:
    return PostOut(
        id=post.id,
        title=post.title,
        content=post.content,
        owner=post.owner,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostService(BaseService):
    """Application service for posts."""

    def list(self, pagination: PaginationIn, *, owner: str | None = None) -> PageOut[PostOut]:
        """List posts, optionally restricted to one ``owner``."""
        pg = self.ensure_pagination(
            page=pagination.page, limit=pagination.limit, sort=pagination.sort
        )
        filters = {"owner": owner} if owner else None
        with self.ro_uow() as uow:
            page = uow.posts.paginate(pg, filters=filters)
            items = [_to_out(p) for p in page.items]
        return PageOut(items=items, meta=PageMeta.build(page=pg.page, limit=pg.limit, total=page.total))

    def get(self, post_id: str) -> PostOut:
        self.ensure_valid_id(post_id)
        with self.ro_uow() as uow:
            post = uow.posts.get(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            return _to_out(post)

    def create(self, dto: PostCreateIn) -> PostOut:
        with self.rw_uow() as uow:
            post = uow.posts.add(Post(title=dto.title, content=dto.content, owner=dto.owner))
            out = _to_out(post)
        logger.info("Post created", extra={"post_id": out.id, "account_id": self.ctx.actor_id})
        return out

    def update(self, post_id: str, dto: PostUpdateIn) -> PostOut:
        """
        :raises ValidationError: Malformed id or nothing to change.
        :raises NotFoundError: No such post.
        """
        self.ensure_valid_id(post_id)
        changes = {
            k: v
            for k, v in (("title", dto.title), ("content", dto.content), ("owner", dto.owner))
            if v is not None
        }
        if not changes:
            raise ValidationError("No fields to update")

        with self.rw_uow() as uow:
            post = uow.posts.get(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            uow.posts.update(post, **changes)
            out = _to_out(post)
        logger.info("Post updated", extra={"post_id": post_id, "fields": sorted(changes)})
        return out

    def delete(self, post_id: str) -> PostDeletedOut:
        """
        Delete a post and its comments.

        A post without comments leaves the comment table untouched.
        """
        self.ensure_valid_id(post_id)
        with self.rw_uow() as uow:
            post = uow.posts.get(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)
            out = _to_out(post)
            removed = uow.comments.delete_for_post(post_id)
            uow.posts.delete(post)

        logger.info("Post deleted", extra={"post_id": post_id, "comments": removed})
        return PostDeletedOut(post=out, comments_deleted=removed)
