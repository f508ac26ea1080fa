"""Comment repository."""

from __future__ import annotations

from blog_api.models.comment import Comment
from blog_api.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Persistence-only repository for :class:`Comment`."""

    model = Comment

    def _sortable_fields(self):
        return {
            "owner": Comment.owner,
            "created_at": Comment.created_at,
            "updated_at": Comment.updated_at,
        }

    def _filterable_fields(self):
        return {
            "owner": Comment.owner,
            "post_id": Comment.post_id,
        }

    def _updatable_fields(self):
        return {"owner", "content", "post_id"}

    def delete_for_post(self, post_id: str) -> int:
        """Remove every comment pointing at ``post_id``.

        :returns: Number of comments removed (``0`` when none matched).
        """
        return self.delete_where(post_id=post_id)
