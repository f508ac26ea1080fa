"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from .common import BodySchema, not_blank


class SignupSchema(BodySchema):
    """Input payload for account registration."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    username = fields.String(required=True, validate=[validate.Length(min=1, max=50), not_blank])
    password = fields.String(required=True, validate=validate.Length(min=6, max=128))
    first_name = fields.String(
        required=True, data_key="firstName", validate=[validate.Length(min=1, max=100), not_blank]
    )
    last_name = fields.String(
        required=True, data_key="lastName", validate=[validate.Length(min=1, max=100), not_blank]
    )


class LoginSchema(BodySchema):
    """Input payload for authenticating an account."""

    username = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, validate=validate.Length(min=1))


class TokenPairSchema(Schema):
    """Response payload carrying both tokens of a session."""

    access_token = fields.String(required=True, data_key="accessToken")
    refresh_token = fields.String(required=True, data_key="refreshToken")
