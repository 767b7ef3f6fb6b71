"""Server-side session storage."""

from __future__ import annotations

from flask import Flask

from todolists.core.sessions.interface import ServerSession, StoreSessionInterface
from todolists.core.sessions.store import InMemorySessionStore, SessionStore


def build_session_store(app: Flask) -> SessionStore:
    """Pick the store named by ``SESSION_STORE``."""
    kind = (app.config.get("SESSION_STORE") or "memory").lower()
    if kind == "memory":
        return InMemorySessionStore()
    if kind == "sql":
        from todolists.core.sessions.sql_store import SqlSessionStore  # local import keeps models lazy

        return SqlSessionStore()
    raise ValueError(f"unknown_session_store: {kind}")


__all__ = [
    "InMemorySessionStore",
    "ServerSession",
    "SessionStore",
    "StoreSessionInterface",
    "build_session_store",
]
