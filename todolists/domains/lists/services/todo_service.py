"""Todo service."""

from __future__ import annotations

import logging

from todolists.domains.lists.errors import NotFound
from todolists.domains.lists.models.list_models import Todo, TodoList
from todolists.domains.lists.services.list_service import get_list, next_id
from todolists.domains.lists.services.validation import validate_todo_name
from todolists.domains.lists.session import TodoSession

logger = logging.getLogger(__name__)


def add_todo(todo_session: TodoSession, list_id: int, name: str) -> Todo:
    todo_list = get_list(todo_session, list_id)
    name = name.strip()
    validate_todo_name(name)
    todo = Todo(id=next_id(todo_list.todos), name=name, completed=False)
    todo_list.todos.append(todo)
    todo_session.save()
    logger.info("Added todo %s to list %s", todo.id, list_id)
    return todo


def get_todo(todo_list: TodoList, todo_id: int) -> Todo:
    todo = todo_list.find_todo(todo_id)
    if todo is None:
        raise NotFound("The specified todo was not found.")
    return todo


def set_todo_completed(todo_session: TodoSession, list_id: int, todo_id: int, completed: bool) -> Todo:
    """Store the caller's completed flag as given; this is not a toggle."""
    todo = get_todo(get_list(todo_session, list_id), todo_id)
    todo.completed = completed
    todo_session.save()
    logger.info("Marked todo %s on list %s completed=%s", todo_id, list_id, completed)
    return todo


def complete_all_todos(todo_session: TodoSession, list_id: int) -> TodoList:
    todo_list = get_list(todo_session, list_id)
    for todo in todo_list.todos:
        todo.completed = True
    todo_session.save()
    logger.info("Completed all %d todos on list %s", len(todo_list.todos), list_id)
    return todo_list


def delete_todo(todo_session: TodoSession, list_id: int, todo_id: int) -> bool:
    """Remove the todo if both it and its list exist. Returns whether anything was removed."""
    todo_list = todo_session.find_list(list_id)
    if todo_list is None or todo_list.find_todo(todo_id) is None:
        return False
    todo_list.todos = [todo for todo in todo_list.todos if todo.id != todo_id]
    todo_session.save()
    logger.info("Deleted todo %s from list %s", todo_id, list_id)
    return True
