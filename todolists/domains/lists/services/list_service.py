"""List service."""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from todolists.domains.lists.errors import NotFound
from todolists.domains.lists.models.list_models import TodoList
from todolists.domains.lists.services.validation import validate_list_name
from todolists.domains.lists.session import TodoSession

logger = logging.getLogger(__name__)


class _HasId(Protocol):
    id: int


def next_id(items: Iterable[_HasId]) -> int:
    """One past the highest id in use, or 1 for an empty collection."""
    return max((item.id for item in items), default=0) + 1


def get_list(todo_session: TodoSession, list_id: int) -> TodoList:
    todo_list = todo_session.find_list(list_id)
    if todo_list is None:
        raise NotFound("The specified list was not found.")
    return todo_list


def create_list(todo_session: TodoSession, name: str) -> TodoList:
    name = name.strip()
    validate_list_name(name, todo_session.lists)
    todo_list = TodoList(id=next_id(todo_session.lists), name=name)
    todo_session.lists.append(todo_list)
    todo_session.save()
    logger.info("Created list %s (%r)", todo_list.id, todo_list.name)
    return todo_list


def rename_list(todo_session: TodoSession, list_id: int, name: str) -> TodoList:
    todo_list = get_list(todo_session, list_id)
    name = name.strip()
    validate_list_name(name, todo_session.lists)
    todo_list.name = name
    todo_session.save()
    logger.info("Renamed list %s to %r", list_id, name)
    return todo_list


def delete_list(todo_session: TodoSession, list_id: int) -> bool:
    """Remove the list if present. Returns whether anything was removed."""
    remaining = [todo_list for todo_list in todo_session.lists if todo_list.id != list_id]
    if len(remaining) == len(todo_session.lists):
        return False
    todo_session.lists = remaining
    todo_session.save()
    logger.info("Deleted list %s", list_id)
    return True
