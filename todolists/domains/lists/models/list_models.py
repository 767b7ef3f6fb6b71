"""Typed records for lists and todos kept in the session."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Todo(BaseModel):
    id: int
    name: str
    completed: bool = False


class TodoList(BaseModel):
    id: int
    name: str
    todos: List[Todo] = Field(default_factory=list)

    def find_todo(self, todo_id: int) -> Optional[Todo]:
        return next((todo for todo in self.todos if todo.id == todo_id), None)
