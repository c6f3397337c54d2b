"""Currencies blueprint exposing the ECB allow-list."""

from __future__ import annotations

from flask_smorest import Blueprint

blp = Blueprint("Currencies", __name__, description="Currency allow-list and validation endpoints")

from . import routes  # noqa: E402,F401
