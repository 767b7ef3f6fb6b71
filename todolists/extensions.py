"""Shared extensions for the todo lists application."""

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_sqlalchemy import SQLAlchemy

# Only the sql session store touches the database.
db = SQLAlchemy(session_options={"expire_on_commit": False})
# RATELIMIT_ENABLED / RATELIMIT_DEFAULT / RATELIMIT_STORAGE_URI are read from app.config.
limiter = Limiter(key_func=get_remote_address)


def init_extensions(app) -> None:
    """Initialize all extensions with the Flask app."""
    db.init_app(app)
    limiter.init_app(app)
