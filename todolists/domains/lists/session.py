"""Per-request view of the lists stored in the Flask session."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, List, MutableMapping, Optional, TypeVar

from flask import g, session

from todolists.domains.lists.models.list_models import TodoList

F = TypeVar("F", bound=Callable)

LISTS_SESSION_KEY = "lists"


class TodoSession:
    """Typed lists for one browser session.

    Reads happen once at construction; ``save`` writes the whole collection
    back so the session backend sees the change.
    """

    def __init__(self, backing: MutableMapping[str, Any]) -> None:
        self._backing = backing
        raw = backing.get(LISTS_SESSION_KEY)
        if raw is None:
            backing[LISTS_SESSION_KEY] = []
            raw = []
        self.lists: List[TodoList] = [TodoList.model_validate(item) for item in raw]

    def find_list(self, list_id: int) -> Optional[TodoList]:
        return next((todo_list for todo_list in self.lists if todo_list.id == list_id), None)

    def save(self) -> None:
        self._backing[LISTS_SESSION_KEY] = [todo_list.model_dump() for todo_list in self.lists]

    @classmethod
    def current(cls) -> "TodoSession":
        """The TodoSession for the active request, created lazily."""
        if "todo_session" not in g:
            g.todo_session = cls(session)
        return g.todo_session


def with_todo_session(fn: F) -> F:
    """Pass the request's TodoSession to the view as ``todo_session``."""

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        kwargs["todo_session"] = TodoSession.current()
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


__all__ = ["TodoSession", "with_todo_session", "LISTS_SESSION_KEY"]
