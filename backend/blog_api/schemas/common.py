"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate


def not_blank(value: str) -> None:
    """Reject strings made only of whitespace."""
    if not value or not value.strip():
        raise ValidationError("Field cannot be blank.")


class BodySchema(Schema):
    """Base for request bodies; unknown keys are dropped, not rejected."""

    class Meta:
        unknown = EXCLUDE


MAX_PAGE = 1_000_000


class PaginationQuerySchema(Schema):
    """Validate ``page``/``limit``/``sort`` query parameters with configurable defaults."""

    class Meta:
        unknown = EXCLUDE

    def __init__(self, *, default_limit: int = 20, max_limit: int = 100, **kwargs: Any) -> None:
        self._default_limit = default_limit
        self._max_limit = max_limit
        super().__init__(**kwargs)

    page = fields.Integer(load_default=1, validate=validate.Range(min=1, max=MAX_PAGE))
    limit = fields.Integer(validate=validate.Range(min=1))
    sort = fields.String(load_default="")

    @post_load
    def apply_defaults(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        raw = data.get("sort") or ""
        data["sort"] = [segment.strip() for segment in raw.split(",") if segment.strip()]
        limit = data.get("limit", self._default_limit)
        data["limit"] = min(max(limit, 1), self._max_limit)
        data.setdefault("page", 1)
        return data


class MetaSchema(Schema):
    """Metadata block for paginated responses."""

    total = fields.Integer(required=True)
    page = fields.Integer(required=True)
    limit = fields.Integer(required=True)
    has_prev = fields.Boolean(data_key="hasPrev")
    has_next = fields.Boolean(data_key="hasNext")


