"""JSON routes for reading and updating options."""

from __future__ import annotations

from flask import abort, current_app, jsonify, request

from quillnotes.logging_config import get_logger
from quillnotes.services.errors import OptionNotFoundError, OptionParseError
from quillnotes.services.option_names import (
    PROTECTED_OPTIONS,
    SECRET_OPTIONS,
    is_known_option,
    validate_value,
)
from quillnotes.services.options import OptionService

from . import bp

logger = get_logger(__name__)


def _service() -> OptionService:
    return current_app.extensions["options"]


def _is_writable(name: str) -> bool:
    return is_known_option(name) and name not in PROTECTED_OPTIONS


def _update(name: str, value: object) -> None:
    if not _is_writable(name):
        logger.warning("Rejected update of option %s", name)
        abort(400, description=f"Option '{name}' is not allowed to be changed")
    if not isinstance(value, str):
        abort(400, description=f"Value of option '{name}' must be a string")
    _service().set_option(name, validate_value(name, value))


@bp.errorhandler(OptionParseError)
def _parse_error(exc: OptionParseError):
    return jsonify({"error": str(exc), "name": exc.name, "value": exc.raw_value}), 400


@bp.errorhandler(OptionNotFoundError)
def _not_found(exc: OptionNotFoundError):
    return jsonify({"error": str(exc), "name": exc.name}), 404


@bp.errorhandler(400)
def _bad_request(exc):
    return jsonify({"error": exc.description}), 400


@bp.get("")
def list_options():
    """Return the option map without secret material."""

    option_map = _service().get_option_map()
    return jsonify({name: value for name, value in option_map.items() if name not in SECRET_OPTIONS})


@bp.get("/<name>")
def get_option(name: str):
    """Return a single option decoded according to its kind."""

    if name in SECRET_OPTIONS:
        abort(400, description=f"Option '{name}' is not readable")
    return jsonify({"name": name, "value": _service().get_option_typed(name)})


@bp.put("/<name>/<path:value>")
def update_option(name: str, value: str):
    _update(name, value)
    return "", 204


@bp.put("")
def update_options():
    """Apply every name/value pair of a JSON object."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        abort(400, description="Expected a JSON object of option names to values")
    # Validate everything before writing anything.
    for name, value in payload.items():
        if not _is_writable(name):
            abort(400, description=f"Option '{name}' is not allowed to be changed")
        if not isinstance(value, str):
            abort(400, description=f"Value of option '{name}' must be a string")
        validate_value(name, value)
    for name, value in payload.items():
        _update(name, value)
    return "", 204
