"""Flask CLI commands for QuillNotes options."""

from __future__ import annotations

import click
from flask import current_app

from .services.errors import OptionError


def _context():
    return current_app.extensions["quillnotes"]


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("quillnotes-init")
    @click.option(
        "--uninitialized",
        is_flag=True,
        default=False,
        help="Mark the database as created for sync rather than fully initialized",
    )
    @click.option("--sync-server-host", default="", help="Sync server to pull the document from")
    @click.option("--sync-proxy", default="", help="Proxy used for the sync connection")
    def quillnotes_init(uninitialized: bool, sync_server_host: str, sync_proxy: str) -> None:
        """Bootstrap the options of a brand-new instance."""

        from .context import bootstrap_instance

        try:
            bootstrap_instance(
                _context(),
                initialized=not uninitialized,
                sync_server_host=sync_server_host,
                sync_proxy=sync_proxy,
            )
        except (RuntimeError, OptionError) as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo("Instance options created.")

    @app.cli.command("quillnotes-get")
    @click.argument("name")
    def quillnotes_get(name: str) -> None:
        """Print the value of an option."""

        try:
            click.echo(_context().options.get_option(name))
        except OptionError as exc:
            raise click.ClickException(str(exc)) from exc

    @app.cli.command("quillnotes-set")
    @click.argument("name")
    @click.argument("value")
    def quillnotes_set(name: str, value: str) -> None:
        """Set an option, creating it as local-only if it does not exist."""

        from .services.option_names import is_known_option, validate_value

        try:
            if is_known_option(name):
                validate_value(name, value)
            _context().options.set_option(name, value)
        except OptionError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"{name} = {value}")

    @app.cli.command("quillnotes-list")
    def quillnotes_list() -> None:
        """List every option with its sync scope."""

        for option in sorted(_context().options.get_options(), key=lambda o: o.name):
            scope = "synced" if option.is_synced else "local"
            click.echo(f"{option.name}\t{option.value}\t{scope}")
