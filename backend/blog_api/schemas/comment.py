"""Comment resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema

from .common import BodySchema, not_blank


class CommentCreateSchema(BodySchema):
    owner = fields.String(required=True, validate=[validate.Length(min=1, max=100), not_blank])
    content = fields.String(required=True, validate=[validate.Length(min=1), not_blank])
    post_id = fields.String(required=True, data_key="postId")


class CommentUpdateSchema(BodySchema):
    owner = fields.String(validate=[validate.Length(min=1, max=100), not_blank])
    content = fields.String(validate=[validate.Length(min=1), not_blank])
    post_id = fields.String(data_key="postId")

    @validates_schema
    def require_any(self, data, **_):
        if not data:
            raise ValidationError("Provide at least one field to update.")


class CommentFilterSchema(Schema):
    """Supported query parameters for listing comments."""

    class Meta:
        unknown = EXCLUDE

    post_id = fields.String(load_default=None, data_key="postId")


class CommentSchema(Schema):
    """Public representation of a comment."""

    id = fields.String(required=True)
    owner = fields.String(required=True)
    content = fields.String(required=True)
    post_id = fields.String(required=True, data_key="postId")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
