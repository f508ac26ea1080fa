"""Post resource schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates_schema

from .common import BodySchema, not_blank


class PostCreateSchema(BodySchema):
    title = fields.String(required=True, validate=[validate.Length(min=1, max=200), not_blank])
    content = fields.String(load_default=None, allow_none=True)
    owner = fields.String(required=True, validate=[validate.Length(min=1, max=100), not_blank])


class PostUpdateSchema(BodySchema):
    title = fields.String(validate=[validate.Length(min=1, max=200), not_blank])
    content = fields.String()
    owner = fields.String(validate=[validate.Length(min=1, max=100), not_blank])

    @validates_schema
    def require_any(self, data, **_):
        if not data:
            raise ValidationError("Provide at least one field to update.")


class PostFilterSchema(Schema):
    """Supported query parameters for listing posts."""

    class Meta:
        unknown = EXCLUDE

    owner = fields.String(load_default=None, validate=validate.Length(min=1, max=100))


class PostSchema(Schema):
    """Public representation of a post."""

    id = fields.String(required=True)
    title = fields.String(required=True)
    content = fields.String(allow_none=True)
    owner = fields.String(required=True)
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
