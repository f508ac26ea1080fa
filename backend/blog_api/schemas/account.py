"""Account resource schemas."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from .common import BodySchema, not_blank


class AccountSchema(Schema):
    """Public representation of an account. Never includes credentials."""

    id = fields.String(required=True)
    email = fields.Email(required=True)
    username = fields.String(required=True)
    first_name = fields.String(required=True, data_key="firstName")
    last_name = fields.String(required=True, data_key="lastName")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class AccountUpdateSchema(BodySchema):
    """Partial profile update; at least one field is required."""

    email = fields.Email(validate=validate.Length(max=254))
    username = fields.String(validate=[validate.Length(min=1, max=50), not_blank])
    first_name = fields.String(
        data_key="firstName", validate=[validate.Length(min=1, max=100), not_blank]
    )
    last_name = fields.String(
        data_key="lastName", validate=[validate.Length(min=1, max=100), not_blank]
    )
    password = fields.String(validate=validate.Length(min=6, max=128))

    @validates_schema
    def require_any(self, data, **_):
        if not data:
            raise ValidationError("Provide at least one field to update.")
