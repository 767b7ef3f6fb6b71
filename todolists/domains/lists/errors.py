"""Domain errors for lists and todos."""

from __future__ import annotations


class TodoListsError(Exception):
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(TodoListsError):
    """A submitted name was rejected; shown inline on the originating form."""


class InvalidLength(ValidationError):
    pass


class DuplicateName(ValidationError):
    pass


class NotFound(TodoListsError):
    """A list or todo id no longer (or never did) exist in the session."""

    default_message = "The specified list was not found."


__all__ = ["TodoListsError", "ValidationError", "InvalidLength", "DuplicateName", "NotFound"]
