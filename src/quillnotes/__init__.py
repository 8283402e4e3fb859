"""QuillNotes option store and application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask

from .config import BaseConfig, DevConfig, TestConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    yield "quillnotes.blueprints.options"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    # Imported here so model-only imports don't build mappers and engines.
    from . import cli as _cli
    from .context import create_app_context
    from .logging_config import setup_logging

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["QUILLNOTES_CONFIG"] = config_obj

    setup_logging(config_obj)

    context = create_app_context(config_obj)
    app.extensions["quillnotes"] = context
    app.extensions["options"] = context.options

    _register_blueprints(app)
    _cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        app.register_blueprint(getattr(module, "bp"))


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
