"""Routes for listing and validating currency codes."""

from __future__ import annotations

from flask.views import MethodView

from ecbrates.schemas import (
    CurrencyListSchema,
    CurrencyValidationRequestSchema,
    CurrencyValidationResponseSchema,
)
from ecbrates.services.currency_registry import registry
from ecbrates.validation import validate_currency_code

from . import blp


@blp.route("")
class CurrencyList(MethodView):
    @blp.response(200, CurrencyListSchema())
    def get(self):
        return {
            "codes": registry.sorted_codes(),
            "historical": sorted(registry.historical),
        }


@blp.route("/validate")
class CurrencyValidation(MethodView):
    @blp.arguments(CurrencyValidationRequestSchema)
    @blp.response(200, CurrencyValidationResponseSchema())
    def post(self, data):
        validated = validate_currency_code(data.get("code"), field="code")
        message = "Currency code is valid."
        if registry.is_historical(validated):
            message = "Currency code is valid but no longer published."
        return {"code": validated, "message": message}
