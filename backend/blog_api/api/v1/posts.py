"""Post endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from blog_api.api.deps import (
    json_body,
    json_response,
    parse_pagination,
    require_auth,
    service_context,
    timing,
)
from blog_api.schemas import (
    MetaSchema,
    PostCreateSchema,
    PostFilterSchema,
    PostSchema,
    PostUpdateSchema,
)
from blog_api.services.posts import PostCreateIn, PostService, PostUpdateIn

bp = Blueprint("posts", __name__)

post_schema = PostSchema()
post_list_schema = PostSchema(many=True)
post_create_schema = PostCreateSchema()
post_update_schema = PostUpdateSchema()
post_filter_schema = PostFilterSchema()
meta_schema = MetaSchema()


@bp.get("")
@timing
def list_posts():
    """Return paginated posts, optionally filtered by ``owner``."""

    filters = post_filter_schema.load(request.args)
    pagination = parse_pagination()
    page = PostService(ctx=service_context()).list(pagination, owner=filters["owner"])
    return json_response(
        {"data": post_list_schema.dump(page.items), "meta": meta_schema.dump(page.meta)}
    )


@bp.get("/<post_id>")
@timing
def get_post(post_id: str):
    post = PostService(ctx=service_context()).get(post_id)
    return json_response({"data": post_schema.dump(post)})


@bp.post("")
@require_auth
@timing
def create_post():
    """Create a post."""

    payload = post_create_schema.load(json_body())
    post = PostService(ctx=service_context()).create(PostCreateIn(**payload))
    return json_response({"data": post_schema.dump(post)}, status=201)


@bp.put("/<post_id>")
@require_auth
@timing
def update_post(post_id: str):
    """Partially update a post."""

    payload = post_update_schema.load(json_body())
    post = PostService(ctx=service_context()).update(post_id, PostUpdateIn(**payload))
    return json_response({"message": "Post updated", "data": post_schema.dump(post)})


@bp.delete("/<post_id>")
@require_auth
@timing
def delete_post(post_id: str):
    """Delete a post together with its comments."""

    result = PostService(ctx=service_context()).delete(post_id)
    return json_response(
        {
            "message": "Post deleted",
            "data": post_schema.dump(result.post),
            "commentsDeleted": result.comments_deleted,
        }
    )
