"""Options API blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("options", __name__, url_prefix="/api/options")

from . import routes  # noqa: E402,F401

__all__ = ["bp"]
