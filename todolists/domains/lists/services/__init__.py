from todolists.domains.lists.services.list_service import (
    create_list,
    delete_list,
    get_list,
    next_id,
    rename_list,
)
from todolists.domains.lists.services.todo_service import (
    add_todo,
    complete_all_todos,
    delete_todo,
    get_todo,
    set_todo_completed,
)
from todolists.domains.lists.services.validation import validate_list_name, validate_todo_name

__all__ = [
    "create_list",
    "get_list",
    "rename_list",
    "delete_list",
    "next_id",
    "add_todo",
    "get_todo",
    "set_todo_completed",
    "complete_all_todos",
    "delete_todo",
    "validate_list_name",
    "validate_todo_name",
]
