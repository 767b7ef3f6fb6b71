"""Todo lists application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from flask import Flask, flash, redirect, render_template, url_for

from todolists.config import config_by_name
from todolists.core.auth.csrf import csrf_field, csrf_token
from todolists.core.sessions import StoreSessionInterface, build_session_store
from todolists.extensions import db, init_extensions


def create_app(config_name: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Create and configure the todo lists Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    package_root = Path(__file__).resolve().parent
    instance_root = package_root.parent / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
        static_folder=str(package_root / "static"),
        template_folder=str(package_root / "templates"),
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if overrides:
        app.config.update(overrides)

    logging.getLogger("todolists").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    init_extensions(app)
    _register_session_store(app, instance_root)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_template_helpers(app)

    @app.get("/")
    def index():
        return redirect(url_for("list_pages.index"))

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from todolists.scripts.sessions import register_commands

    register_commands(app)

    return app


def _register_session_store(app: Flask, instance_root: Path) -> None:
    """Swap Flask's cookie sessions for the configured server-side store."""
    store = build_session_store(app)
    if app.config.get("SESSION_STORE") == "sql":
        # Relative sqlite paths resolve inside the instance folder.
        instance_root.mkdir(parents=True, exist_ok=True)
        from todolists.core.sessions import models  # noqa: F401  register the table

        with app.app_context():
            db.create_all()
    app.session_interface = StoreSessionInterface(store)
    app.extensions["session_store"] = store


def _register_blueprints(app: Flask) -> None:
    from todolists.domains.lists.controllers.list_pages import list_pages_bp  # local import to avoid circulars

    app.register_blueprint(list_pages_bp, url_prefix="/lists")


def _register_error_handlers(app: Flask) -> None:
    """Stale ids fall back to the list index; other errors render the error page."""
    from werkzeug.exceptions import HTTPException

    from todolists.domains.lists.errors import NotFound

    @app.errorhandler(NotFound)
    def _stale_reference(exc: NotFound):
        flash(exc.message, "error")
        return redirect(url_for("list_pages.index"))

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return render_template("errors/error.html", code=exc.code, description=exc.description), exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        description = str(exc) if app.debug or app.testing else "Something went wrong."
        return render_template("errors/error.html", code=500, description=description), 500


def _register_template_helpers(app: Flask) -> None:
    from todolists.domains.lists.presenters import register_template_helpers

    register_template_helpers(app)

    @app.context_processor
    def inject_csrf():
        return {"csrf_token": csrf_token, "csrf_field": csrf_field}
