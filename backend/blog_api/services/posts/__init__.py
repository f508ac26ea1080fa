from blog_api.services.posts.dto import PostCreateIn, PostDeletedOut, PostOut, PostUpdateIn
from blog_api.services.posts.service import PostService

__all__ = ["PostCreateIn", "PostDeletedOut", "PostOut", "PostService", "PostUpdateIn"]
