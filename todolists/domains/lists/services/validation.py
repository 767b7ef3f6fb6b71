"""Name rules for lists and todos."""

from __future__ import annotations

from typing import Iterable

from todolists.domains.lists.errors import DuplicateName, InvalidLength
from todolists.domains.lists.models.list_models import TodoList

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100


def _length_ok(name: str) -> bool:
    return NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def validate_list_name(name: str, existing_lists: Iterable[TodoList]) -> None:
    """Raise InvalidLength or DuplicateName; return None when the name is usable."""
    if not _length_ok(name):
        raise InvalidLength("List name must be between 1 and 100 characters.")
    if any(existing.name == name for existing in existing_lists):
        raise DuplicateName("List name must be unique.")


def validate_todo_name(name: str) -> None:
    if not _length_ok(name):
        raise InvalidLength("Todo name must be between 1 and 100 characters.")
