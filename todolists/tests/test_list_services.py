"""Tests for list and todo services operating on a TodoSession."""

import pytest

pytestmark = pytest.mark.unit

from todolists.domains.lists import services
from todolists.domains.lists.errors import DuplicateName, InvalidLength, NotFound, ValidationError
from todolists.domains.lists.session import LISTS_SESSION_KEY, TodoSession


# ============== List Tests ==============


class TestListService:
    def test_create_list_assigns_first_id(self, todo_session):
        todo_list = services.create_list(todo_session, "Groceries")

        assert todo_list.id == 1
        assert todo_list.name == "Groceries"
        assert todo_list.todos == []

    def test_create_list_strips_whitespace(self, todo_session):
        todo_list = services.create_list(todo_session, "  Chores  ")
        assert todo_list.name == "Chores"

    def test_create_list_writes_back_to_backing_mapping(self):
        backing = {}
        todo_session = TodoSession(backing)
        services.create_list(todo_session, "Groceries")

        assert backing[LISTS_SESSION_KEY] == [{"id": 1, "name": "Groceries", "todos": []}]

    @pytest.mark.parametrize("name", ["", "   ", "n" * 101])
    def test_create_list_rejects_bad_length(self, todo_session, name):
        with pytest.raises(ValidationError):
            services.create_list(todo_session, name)
        assert todo_session.lists == []

    def test_create_duplicate_fails_on_second(self, todo_session):
        services.create_list(todo_session, "Groceries")
        with pytest.raises(DuplicateName):
            services.create_list(todo_session, "Groceries")
        assert len(todo_session.lists) == 1

    def test_get_missing_list_raises_not_found(self, todo_session):
        with pytest.raises(NotFound, match="The specified list was not found."):
            services.get_list(todo_session, 42)

    def test_delete_then_fetch_is_not_found(self, todo_session):
        todo_list = services.create_list(todo_session, "Groceries")

        assert services.delete_list(todo_session, todo_list.id) is True
        with pytest.raises(NotFound):
            services.get_list(todo_session, todo_list.id)

    def test_delete_missing_list_is_noop(self, todo_session):
        services.create_list(todo_session, "Groceries")
        assert services.delete_list(todo_session, 99) is False
        assert len(todo_session.lists) == 1

    def test_list_ids_not_reused_after_middle_delete(self, todo_session):
        for name in ("One", "Two", "Three"):
            services.create_list(todo_session, name)
        services.delete_list(todo_session, 2)

        created = services.create_list(todo_session, "Four")
        assert created.id == 4
        assert [item.id for item in todo_session.lists] == [1, 3, 4]

    def test_rename_list(self, todo_session):
        todo_list = services.create_list(todo_session, "Groceries")
        renamed = services.rename_list(todo_session, todo_list.id, " Shopping ")

        assert renamed.name == "Shopping"
        assert services.get_list(todo_session, todo_list.id).name == "Shopping"

    def test_rename_rejects_name_of_sibling(self, todo_session):
        services.create_list(todo_session, "Groceries")
        chores = services.create_list(todo_session, "Chores")
        with pytest.raises(DuplicateName):
            services.rename_list(todo_session, chores.id, "Groceries")
        assert chores.name == "Chores"

    def test_rename_rejects_bad_length(self, todo_session):
        todo_list = services.create_list(todo_session, "Groceries")
        with pytest.raises(InvalidLength):
            services.rename_list(todo_session, todo_list.id, "")

    def test_rename_missing_list_raises_not_found(self, todo_session):
        with pytest.raises(NotFound):
            services.rename_list(todo_session, 7, "Anything")


# ============== Todo Tests ==============


class TestTodoService:
    @pytest.fixture
    def groceries(self, todo_session):
        return services.create_list(todo_session, "Groceries")

    def test_add_todo(self, todo_session, groceries):
        todo = services.add_todo(todo_session, groceries.id, " Milk ")

        assert todo.id == 1
        assert todo.name == "Milk"
        assert todo.completed is False
        assert groceries.todos == [todo]

    def test_add_todo_rejects_bad_length(self, todo_session, groceries):
        with pytest.raises(InvalidLength):
            services.add_todo(todo_session, groceries.id, "")
        assert groceries.todos == []

    def test_add_todo_to_missing_list(self, todo_session):
        with pytest.raises(NotFound):
            services.add_todo(todo_session, 5, "Milk")

    def test_todo_ids_not_reused(self, todo_session, groceries):
        for name in ("Milk", "Eggs", "Bread"):
            services.add_todo(todo_session, groceries.id, name)
        services.delete_todo(todo_session, groceries.id, 2)

        todo = services.add_todo(todo_session, groceries.id, "Butter")
        assert todo.id == 4
        assert [item.id for item in groceries.todos] == [1, 3, 4]

    def test_todo_ids_are_scoped_per_list(self, todo_session, groceries):
        chores = services.create_list(todo_session, "Chores")
        services.add_todo(todo_session, groceries.id, "Milk")
        services.add_todo(todo_session, groceries.id, "Eggs")

        assert services.add_todo(todo_session, chores.id, "Sweep").id == 1

    def test_set_completed_uses_explicit_value(self, todo_session, groceries):
        todo = services.add_todo(todo_session, groceries.id, "Milk")

        services.set_todo_completed(todo_session, groceries.id, todo.id, True)
        services.set_todo_completed(todo_session, groceries.id, todo.id, True)
        assert todo.completed is True

        services.set_todo_completed(todo_session, groceries.id, todo.id, False)
        assert todo.completed is False

    def test_set_completed_on_missing_todo(self, todo_session, groceries):
        with pytest.raises(NotFound, match="The specified todo was not found."):
            services.set_todo_completed(todo_session, groceries.id, 9, True)

    def test_complete_all(self, todo_session, groceries):
        services.add_todo(todo_session, groceries.id, "Milk")
        services.add_todo(todo_session, groceries.id, "Eggs")
        services.set_todo_completed(todo_session, groceries.id, 1, True)

        services.complete_all_todos(todo_session, groceries.id)
        assert all(todo.completed for todo in groceries.todos)

    def test_complete_all_on_empty_list(self, todo_session, groceries):
        assert services.complete_all_todos(todo_session, groceries.id).todos == []

    def test_delete_todo_is_idempotent(self, todo_session, groceries):
        services.add_todo(todo_session, groceries.id, "Milk")

        assert services.delete_todo(todo_session, groceries.id, 1) is True
        assert services.delete_todo(todo_session, groceries.id, 1) is False
        assert services.delete_todo(todo_session, 99, 1) is False
        assert groceries.todos == []

    def test_changes_survive_reload(self):
        backing = {}
        first = TodoSession(backing)
        services.create_list(first, "Groceries")
        services.add_todo(first, 1, "Milk")
        services.set_todo_completed(first, 1, 1, True)

        reloaded = TodoSession(backing)
        todo = reloaded.find_list(1).todos[0]
        assert (todo.id, todo.name, todo.completed) == (1, "Milk", True)


class TestNextId:
    def test_empty_collection_starts_at_one(self):
        assert services.next_id([]) == 1

    def test_one_past_highest(self, todo_session):
        for name in ("A", "B", "C"):
            services.create_list(todo_session, name)
        todo_session.lists = [item for item in todo_session.lists if item.id != 1]
        assert services.next_id(todo_session.lists) == 4
