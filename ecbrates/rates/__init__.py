"""Rates blueprint serving fresh ECB reference rates and conversions."""

from __future__ import annotations

from flask_smorest import Blueprint

blp = Blueprint("Rates", __name__, description="ECB reference rates and currency conversion")

from . import routes  # noqa: E402,F401
