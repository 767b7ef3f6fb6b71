"""Session store persisted through Flask-SQLAlchemy."""

from __future__ import annotations

import copy
import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from todolists.core.sessions.models import SessionRecord
from todolists.core.sessions.store import SessionStore, naive_utcnow
from todolists.extensions import db

logger = logging.getLogger(__name__)


class SqlSessionStore(SessionStore):
    """Rows in ``todo_sessions``; requires an application context."""

    def __init__(self, session=None, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._session = session
        self._clock = clock or naive_utcnow

    @property
    def session(self):
        return self._session or db.session

    def load(self, sid: str) -> Optional[Dict[str, Any]]:
        record = self.session.get(SessionRecord, sid)
        if record is None:
            return None
        if record.expires_at <= self._clock():
            self.session.delete(record)
            self.session.commit()
            return None
        return copy.deepcopy(record.data)

    def save(self, sid: str, data: Dict[str, Any], ttl: timedelta) -> None:
        expires_at = self._clock() + ttl
        record = self.session.get(SessionRecord, sid)
        if record is None:
            record = SessionRecord(session_id=sid, data=copy.deepcopy(data), expires_at=expires_at)
            self.session.add(record)
        else:
            record.data = copy.deepcopy(data)
            record.expires_at = expires_at
        self.session.commit()

    def delete(self, sid: str) -> None:
        self.session.query(SessionRecord).filter_by(session_id=sid).delete()
        self.session.commit()

    def purge_expired(self) -> int:
        removed = self.session.query(SessionRecord).filter(SessionRecord.expires_at <= self._clock()).delete()
        self.session.commit()
        logger.info("Purged %d expired sql sessions", removed)
        return removed


__all__ = ["SqlSessionStore"]
