"""Schemas for API requests and responses."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class HealthStatusSchema(Schema):
    status = fields.String(required=True)
    app = fields.String()
    provider = fields.String(allow_none=True)


class CurrencyValidationRequestSchema(Schema):
    code = fields.String(load_default=None)


class CurrencyValidationResponseSchema(Schema):
    code = fields.String(required=True)
    message = fields.String(required=True)


class CurrencyListSchema(Schema):
    codes = fields.List(fields.String(), required=True)
    historical = fields.List(fields.String(), required=True)


class RateSnapshotSchema(Schema):
    date = fields.Date(allow_none=True)
    base_currency = fields.String(required=True)
    source = fields.String(required=True)
    rates = fields.Dict(keys=fields.String(), values=fields.Decimal(as_string=True))


class RateHistoryQuerySchema(Schema):
    window = fields.String(
        load_default="recent", validate=validate.OneOf(["recent", "full"])
    )
    currency = fields.String(load_default=None)


class RatePointSchema(Schema):
    date = fields.Date(required=True)
    rate = fields.Decimal(as_string=True, required=True)


class RateHistorySchema(Schema):
    window = fields.String(required=True)
    source = fields.String(required=True)
    count = fields.Integer(required=True)
    currency = fields.String(allow_none=True)
    snapshots = fields.List(fields.Nested(RateSnapshotSchema))
    points = fields.List(fields.Nested(RatePointSchema))


class ConversionQuerySchema(Schema):
    amount = fields.String(required=True)
    from_currency = fields.String(required=True, data_key="from")
    to_currency = fields.String(required=True, data_key="to")


class ConversionResultSchema(Schema):
    amount = fields.Decimal(as_string=True, required=True)
    from_currency = fields.String(required=True, data_key="from")
    to_currency = fields.String(required=True, data_key="to")
    result = fields.Decimal(as_string=True, required=True)
    date = fields.Date(allow_none=True)


class ErrorMessageSchema(Schema):
    message = fields.String(required=True)
