"""Comment endpoints."""

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
    CommentCreateSchema,
    CommentFilterSchema,
    CommentSchema,
    CommentUpdateSchema,
    MetaSchema,
)
from blog_api.services.comments import CommentCreateIn, CommentService, CommentUpdateIn

bp = Blueprint("comments", __name__)

comment_schema = CommentSchema()
comment_list_schema = CommentSchema(many=True)
comment_create_schema = CommentCreateSchema()
comment_update_schema = CommentUpdateSchema()
comment_filter_schema = CommentFilterSchema()
meta_schema = MetaSchema()


@bp.get("")
@timing
def list_comments():
    """Return paginated comments, optionally filtered by ``postId``."""

    filters = comment_filter_schema.load(request.args)
    pagination = parse_pagination()
    page = CommentService(ctx=service_context()).list(pagination, post_id=filters["post_id"])
    return json_response(
        {"data": comment_list_schema.dump(page.items), "meta": meta_schema.dump(page.meta)}
    )


@bp.get("/post/<post_id>")
@timing
def list_comments_for_post(post_id: str):
    """Return every comment attached to one post."""

    comments = CommentService(ctx=service_context()).list_for_post(post_id)
    return json_response({"data": comment_list_schema.dump(comments)})


@bp.get("/<comment_id>")
@timing
def get_comment(comment_id: str):
    comment = CommentService(ctx=service_context()).get(comment_id)
    return json_response({"data": comment_schema.dump(comment)})


@bp.post("")
@require_auth
@timing
def create_comment():
    payload = comment_create_schema.load(json_body())
    comment = CommentService(ctx=service_context()).create(CommentCreateIn(**payload))
    return json_response({"data": comment_schema.dump(comment)}, status=201)


@bp.put("/<comment_id>")
@require_auth
@timing
def update_comment(comment_id: str):
    payload = comment_update_schema.load(json_body())
    comment = CommentService(ctx=service_context()).update(comment_id, CommentUpdateIn(**payload))
    return json_response({"message": "Comment updated", "data": comment_schema.dump(comment)})


@bp.delete("/<comment_id>")
@require_auth
@timing
def delete_comment(comment_id: str):
    comment = CommentService(ctx=service_context()).delete(comment_id)
    return json_response({"message": "Comment deleted", "data": comment_schema.dump(comment)})
