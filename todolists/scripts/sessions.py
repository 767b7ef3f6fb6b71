"""CLI command for clearing expired sessions out of the session store.

Intended for the sql store. The memory store belongs to the serving process
and sweeps itself on save.

Usage:
    flask purge-sessions
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext


@click.command("purge-sessions")
@with_appcontext
def purge_sessions_command():
    """Delete expired sessions from the configured store."""
    store = current_app.extensions["session_store"]
    removed = store.purge_expired()
    click.echo(f"Purged {removed} expired session(s) from the {current_app.config['SESSION_STORE']} store.")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(purge_sessions_command)
