"""List and todo HTML pages."""

from __future__ import annotations

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for
from pydantic import ValidationError as SchemaValidationError

from todolists.core.utils.decorators import csrf_protected, is_async_request
from todolists.domains.lists import services
from todolists.domains.lists.errors import ValidationError
from todolists.domains.lists.schemas.list_schemas import ListNameForm, TodoForm, TodoStatusForm
from todolists.domains.lists.session import TodoSession, with_todo_session

list_pages_bp = Blueprint("list_pages", __name__)


def _parse_form(schema_cls):
    try:
        return schema_cls.model_validate(request.form.to_dict())
    except SchemaValidationError:
        abort(400, description="invalid_form")


def _to_list(list_id: int):
    return redirect(url_for("list_pages.show_list", list_id=list_id))


@list_pages_bp.get("")
@with_todo_session
def index(todo_session: TodoSession):
    return render_template("lists/index.html", lists=todo_session.lists)


@list_pages_bp.get("/new")
def new_list():
    return render_template("lists/new_list.html")


@list_pages_bp.post("")
@csrf_protected
@with_todo_session
def create_list(todo_session: TodoSession):
    form = _parse_form(ListNameForm)
    try:
        services.create_list(todo_session, form.list_name)
    except ValidationError as exc:
        flash(exc.message, "error")
        return render_template("lists/new_list.html", list_name=form.list_name), 422
    flash("The list has been created.", "success")
    return redirect(url_for("list_pages.index"))


@list_pages_bp.get("/<int:list_id>")
@with_todo_session
def show_list(list_id: int, todo_session: TodoSession):
    todo_list = services.get_list(todo_session, list_id)
    return render_template("lists/list.html", todo_list=todo_list)


@list_pages_bp.get("/<int:list_id>/edit")
@with_todo_session
def edit_list(list_id: int, todo_session: TodoSession):
    todo_list = services.get_list(todo_session, list_id)
    return render_template("lists/edit_list.html", todo_list=todo_list, list_name=todo_list.name)


@list_pages_bp.post("/<int:list_id>")
@csrf_protected
@with_todo_session
def update_list(list_id: int, todo_session: TodoSession):
    form = _parse_form(ListNameForm)
    try:
        services.rename_list(todo_session, list_id, form.list_name)
    except ValidationError as exc:
        flash(exc.message, "error")
        todo_list = services.get_list(todo_session, list_id)
        return render_template("lists/edit_list.html", todo_list=todo_list, list_name=form.list_name), 422
    flash("The list has been updated.", "success")
    return _to_list(list_id)


@list_pages_bp.post("/<int:list_id>/delete")
@csrf_protected
@with_todo_session
def delete_list(list_id: int, todo_session: TodoSession):
    services.delete_list(todo_session, list_id)
    if is_async_request():
        return "", 204
    flash("The list has been deleted.", "success")
    return redirect(url_for("list_pages.index"))


@list_pages_bp.post("/<int:list_id>/todos")
@csrf_protected
@with_todo_session
def add_todo(list_id: int, todo_session: TodoSession):
    form = _parse_form(TodoForm)
    try:
        services.add_todo(todo_session, list_id, form.todo)
    except ValidationError as exc:
        flash(exc.message, "error")
        todo_list = services.get_list(todo_session, list_id)
        return render_template("lists/list.html", todo_list=todo_list, todo_name=form.todo), 422
    flash("The todo was added.", "success")
    return _to_list(list_id)


@list_pages_bp.post("/<int:list_id>/todos/<int:todo_id>")
@csrf_protected
@with_todo_session
def update_todo(list_id: int, todo_id: int, todo_session: TodoSession):
    form = _parse_form(TodoStatusForm)
    services.set_todo_completed(todo_session, list_id, todo_id, form.completed)
    flash("The todo has been updated.", "success")
    return _to_list(list_id)


@list_pages_bp.post("/<int:list_id>/todos/<int:todo_id>/delete")
@csrf_protected
@with_todo_session
def delete_todo(list_id: int, todo_id: int, todo_session: TodoSession):
    services.delete_todo(todo_session, list_id, todo_id)
    if is_async_request():
        return "", 204
    flash("The todo has been deleted.", "success")
    if todo_session.find_list(list_id) is None:
        return redirect(url_for("list_pages.index"))
    return _to_list(list_id)


@list_pages_bp.post("/<int:list_id>/complete_all")
@csrf_protected
@with_todo_session
def complete_all(list_id: int, todo_session: TodoSession):
    services.complete_all_todos(todo_session, list_id)
    flash("All todos have been completed.", "success")
    return _to_list(list_id)
