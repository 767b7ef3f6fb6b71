"""Flask session interface that keeps only a signed token in the cookie."""

from __future__ import annotations

import logging
import secrets
from typing import Any, Dict, Optional

from flask import Flask, Request, Response
from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, URLSafeSerializer
from werkzeug.datastructures import CallbackDict

from todolists.core.sessions.store import SessionStore

logger = logging.getLogger(__name__)


class ServerSession(CallbackDict, SessionMixin):
    """Session dict whose payload lives in a ``SessionStore``."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None, sid: str = "", new: bool = False) -> None:
        def on_update(self) -> None:
            self.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


class StoreSessionInterface(SessionInterface):
    salt = "todolists-session"

    def __init__(self, store: SessionStore) -> None:
        self.store = store

    def _serializer(self, app: Flask) -> Optional[URLSafeSerializer]:
        if not app.secret_key:
            return None
        return URLSafeSerializer(app.secret_key, salt=self.salt)

    @staticmethod
    def _new_sid() -> str:
        return secrets.token_urlsafe(32)

    def open_session(self, app: Flask, request: Request) -> Optional[ServerSession]:
        serializer = self._serializer(app)
        if serializer is None:
            return None
        cookie = request.cookies.get(self.get_cookie_name(app))
        if cookie:
            try:
                sid = serializer.loads(cookie)
            except BadSignature:
                logger.warning("Rejected session cookie with a bad signature")
                sid = None
            if sid:
                data = self.store.load(sid)
                if data is not None:
                    return ServerSession(data, sid=sid)
        return ServerSession(sid=self._new_sid(), new=True)

    def save_session(self, app: Flask, session: ServerSession, response: Response) -> None:
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if not session:
            # Emptied during this request: forget it on both sides.
            if session.modified and not session.new:
                self.store.delete(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return

        response.vary.add("Cookie")
        if not self.should_set_cookie(app, session):
            return

        self.store.save(session.sid, dict(session), app.permanent_session_lifetime)
        serializer = self._serializer(app)
        response.set_cookie(
            name,
            serializer.dumps(session.sid),
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )


__all__ = ["ServerSession", "StoreSessionInterface"]
