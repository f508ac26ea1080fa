"""Marshmallow schemas for request validation and response rendering."""

from .account import AccountSchema, AccountUpdateSchema
from .auth import LoginSchema, SignupSchema, TokenPairSchema
from .comment import (
    CommentCreateSchema,
    CommentFilterSchema,
    CommentSchema,
    CommentUpdateSchema,
)
from .common import MetaSchema, PaginationQuerySchema
from .post import PostCreateSchema, PostFilterSchema, PostSchema, PostUpdateSchema

__all__ = [
    "AccountSchema",
    "AccountUpdateSchema",
    "CommentCreateSchema",
    "CommentFilterSchema",
    "CommentSchema",
    "CommentUpdateSchema",
    "LoginSchema",
    "MetaSchema",
    "PaginationQuerySchema",
    "PostCreateSchema",
    "PostFilterSchema",
    "PostSchema",
    "PostUpdateSchema",
    "SignupSchema",
    "TokenPairSchema",
]
