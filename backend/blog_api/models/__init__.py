from blog_api.models.account import Account
from blog_api.models.comment import Comment
from blog_api.models.post import Post

__all__ = [
    "Account",
    "Comment",
    "Post",
]
