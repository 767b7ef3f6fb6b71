"""Session storage contracts and the process-local implementation."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def naive_utcnow() -> datetime:
    # DateTime columns are stored without tzinfo.
    return utcnow().replace(tzinfo=None)


class SessionStore(ABC):
    """Keeps session payloads keyed by session token.

    Payloads are plain JSON-compatible dicts. Implementations must hand back a
    fresh copy from ``load`` so request code never aliases stored state.
    """

    @abstractmethod
    def load(self, sid: str) -> Optional[Dict[str, Any]]:
        """Return the payload for ``sid``, or None when absent or expired."""

    @abstractmethod
    def save(self, sid: str, data: Dict[str, Any], ttl: timedelta) -> None:
        """Store ``data`` under ``sid`` for ``ttl``."""

    @abstractmethod
    def delete(self, sid: str) -> None:
        """Drop ``sid``; missing ids are ignored."""

    @abstractmethod
    def purge_expired(self) -> int:
        """Remove expired entries and return how many were removed."""


class InMemorySessionStore(SessionStore):
    """Dict-backed store for development and tests. Not shared across processes.

    Expired entries are swept from ``save`` at most once per ``sweep_interval``,
    so abandoned sessions do not accumulate for the life of the process.
    """

    def __init__(self, clock: Optional[Clock] = None, sweep_interval: timedelta = timedelta(minutes=5)) -> None:
        self._clock = clock or utcnow
        self._entries: Dict[str, Tuple[str, datetime]] = {}
        self._sweep_interval = sweep_interval
        self._next_sweep = self._clock() + sweep_interval

    def load(self, sid: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(sid)
        if entry is None:
            return None
        payload, expires_at = entry
        if expires_at <= self._clock():
            self._entries.pop(sid, None)
            return None
        return json.loads(payload)

    def save(self, sid: str, data: Dict[str, Any], ttl: timedelta) -> None:
        now = self._clock()
        if now >= self._next_sweep:
            self.purge_expired()
            self._next_sweep = now + self._sweep_interval
        self._entries[sid] = (json.dumps(data), now + ttl)

    def delete(self, sid: str) -> None:
        self._entries.pop(sid, None)

    def purge_expired(self) -> int:
        now = self._clock()
        expired = [sid for sid, (_, expires_at) in self._entries.items() if expires_at <= now]
        for sid in expired:
            del self._entries[sid]
        if expired:
            logger.info("Purged %d expired in-memory sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["SessionStore", "InMemorySessionStore", "utcnow", "naive_utcnow"]
