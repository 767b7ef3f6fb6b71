"""View helpers: completion state and incomplete-first ordering.

These are registered as Jinja globals so templates can call them directly.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from flask import Flask

from todolists.domains.lists.models.list_models import Todo, TodoList


def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def todos_remaining_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def list_complete(todo_list: TodoList) -> bool:
    """A list is complete once it has todos and none are left open. Empty lists never are."""
    return todos_count(todo_list) >= 1 and todos_remaining_count(todo_list) == 0


def list_class(todo_list: TodoList) -> Optional[str]:
    return "complete" if list_complete(todo_list) else None


def todo_class(todo: Todo) -> Optional[str]:
    return "complete" if todo.completed else None


def sort_lists(lists: Iterable[TodoList]) -> List[TodoList]:
    """Incomplete lists first, then complete ones; each group keeps its order."""
    lists = list(lists)
    return [item for item in lists if not list_complete(item)] + [item for item in lists if list_complete(item)]


def sort_todos(todos: Iterable[Todo]) -> List[Todo]:
    todos = list(todos)
    return [todo for todo in todos if not todo.completed] + [todo for todo in todos if todo.completed]


def register_template_helpers(app: Flask) -> None:
    for helper in (
        todos_count,
        todos_remaining_count,
        list_complete,
        list_class,
        todo_class,
        sort_lists,
        sort_todos,
    ):
        app.add_template_global(helper)
