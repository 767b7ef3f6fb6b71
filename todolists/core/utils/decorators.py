"""Reusable decorators for controllers."""

from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar

from flask import abort, current_app, request

from todolists.core.auth.csrf import CSRF_FIELD_NAME, validate_csrf_token

F = TypeVar("F", bound=Callable)


def csrf_protected(fn: F) -> F:
    """Validate the CSRF token from the ``csrf_token`` form field or X-CSRF-Token header."""

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        if not current_app.config.get("WTF_CSRF_ENABLED", True):
            return fn(*args, **kwargs)
        token = request.form.get(CSRF_FIELD_NAME) or request.headers.get("X-CSRF-Token")
        if not validate_csrf_token(token or ""):
            abort(400, description="csrf_failed")
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def is_async_request() -> bool:
    """True when the request came from in-page JavaScript rather than a form submit."""
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"
