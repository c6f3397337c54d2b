"""Routes for fetching reference rates and converting amounts.

Every request reads the feed again; nothing is cached between requests.
"""

from __future__ import annotations

from flask import current_app
from flask.views import MethodView

from ecbrates.providers.base import BaseRateProvider
from ecbrates.schemas import (
    ConversionQuerySchema,
    ConversionResultSchema,
    RateHistoryQuerySchema,
    RateHistorySchema,
    RateSnapshotSchema,
)
from ecbrates.services.rates import fetch_full_history, fetch_latest, fetch_recent_history
from ecbrates.validation import validate_amount, validate_currency_code

from . import blp


def _provider() -> BaseRateProvider:
    return current_app.extensions["rate_provider"]


@blp.route("/latest")
class LatestRates(MethodView):
    @blp.response(200, RateSnapshotSchema())
    def get(self):
        return fetch_latest(_provider())


@blp.route("/history")
class RateHistoryView(MethodView):
    @blp.arguments(RateHistoryQuerySchema, location="query")
    @blp.response(200, RateHistorySchema())
    def get(self, args):
        window = args["window"]
        fetch = fetch_full_history if window == "full" else fetch_recent_history
        currency = args.get("currency")
        if currency is not None:
            currency = validate_currency_code(currency, field="currency")

        history = fetch(_provider())
        payload = {
            "window": window,
            "source": history.source,
            "count": len(history),
            "currency": currency,
        }
        if currency is None:
            payload["snapshots"] = list(history)
        else:
            payload["points"] = list(history.series(currency).points)
        return payload


@blp.route("/convert")
class Conversion(MethodView):
    @blp.arguments(ConversionQuerySchema, location="query")
    @blp.response(200, ConversionResultSchema())
    def get(self, args):
        amount = validate_amount(args["amount"])
        from_currency = validate_currency_code(args["from_currency"], field="from")
        to_currency = validate_currency_code(args["to_currency"], field="to")

        snapshot = fetch_latest(_provider())
        return {
            "amount": amount,
            "from_currency": from_currency,
            "to_currency": to_currency,
            "result": snapshot.convert(amount, from_currency, to_currency),
            "date": snapshot.date,
        }
