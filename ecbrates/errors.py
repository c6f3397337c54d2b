"""Application-wide error types and Flask error handlers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify

from ecbrates.providers.base import NetworkError, ParseError, ProviderError
from ecbrates.services.fx_conversion import ConversionError, CurrencyNotFoundError

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base class for API-level errors."""

    status_code: int = 400

    def __init__(
        self, message: str, *, status_code: int | None = None, payload: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}


class ValidationError(APIError):
    """Error raised for validation failures."""

    status_code = 422


DEFAULT_STATUS_MESSAGES: dict[int, str] = {
    400: "Request could not be processed.",
    404: "Resource not found.",
    422: "Submitted data is invalid.",
    502: "Upstream rate feed unavailable.",
}


def register_error_handlers(app: Flask) -> None:
    """Attach error handlers to the Flask application."""

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        return _error_response(error.status_code, error.message, error.payload)

    @app.errorhandler(ProviderError)
    def handle_provider_error(error: ProviderError):
        logger.warning("Rate feed request failed: %s", error)
        payload = {"error_type": _error_type(error)}
        return _error_response(502, str(error), payload)

    @app.errorhandler(ConversionError)
    def handle_conversion_error(error: ConversionError):
        if isinstance(error, CurrencyNotFoundError):
            return _error_response(404, str(error), {"code": error.code, "field": "currency"})
        return _error_response(422, str(error), {})


def _error_type(error: ProviderError) -> str:
    if isinstance(error, NetworkError):
        return "network"
    if isinstance(error, ParseError):
        return "parse"
    return "provider"


def _error_response(status_code: int, message: str | None, payload: dict[str, Any]):
    body: dict[str, Any] = {
        "message": message or DEFAULT_STATUS_MESSAGES.get(status_code, "Request failed.")
    }
    body.update(payload)

    field = payload.get("field")
    if field and "field_errors" not in body:
        body["field_errors"] = {str(field): [body["message"]]}

    return jsonify(body), status_code
