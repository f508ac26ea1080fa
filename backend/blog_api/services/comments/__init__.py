from blog_api.services.comments.dto import CommentCreateIn, CommentOut, CommentUpdateIn
from blog_api.services.comments.service import CommentService

__all__ = ["CommentCreateIn", "CommentOut", "CommentService", "CommentUpdateIn"]
