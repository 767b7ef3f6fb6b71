"""Form payload schemas."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class _StrippedForm(BaseModel):
    model_config = {"str_strip_whitespace": True, "extra": "ignore"}


class ListNameForm(_StrippedForm):
    # Length and uniqueness are checked by the service so the messages stay consistent.
    list_name: str = ""


class TodoForm(_StrippedForm):
    todo: str = ""


class TodoStatusForm(BaseModel):
    model_config = {"extra": "ignore"}

    completed: bool = False

    @field_validator("completed", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.strip().lower() if isinstance(value, str) else value
