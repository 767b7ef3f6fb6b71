"""Table backing the sql session store."""

from __future__ import annotations

from todolists.core.sessions.store import naive_utcnow
from todolists.extensions import db


class SessionRecord(db.Model):
    __tablename__ = "todo_sessions"

    session_id = db.Column(db.String(64), primary_key=True)
    data = db.Column(db.JSON, nullable=False, default=dict)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=naive_utcnow, onupdate=naive_utcnow)

    def __repr__(self) -> str:
        return f"<SessionRecord {self.session_id} expires={self.expires_at:%Y-%m-%d %H:%M}>"
