"""Per-session CSRF tokens for the HTML forms."""

from __future__ import annotations

import secrets

from flask import session
from markupsafe import Markup, escape

CSRF_SESSION_KEY = "_csrf_token"
CSRF_FIELD_NAME = "csrf_token"


def csrf_token() -> str:
    """Token for the current session, minted on first use."""
    token = session.get(CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_hex(32)
        session[CSRF_SESSION_KEY] = token
    return token


def csrf_field() -> Markup:
    """Hidden input carrying the token; used by every form in the templates."""
    return Markup('<input type="hidden" name="{}" value="{}">').format(CSRF_FIELD_NAME, escape(csrf_token()))


def validate_csrf_token(token: str) -> bool:
    if not token:
        return False
    return secrets.compare_digest(token, session.get(CSRF_SESSION_KEY, ""))
