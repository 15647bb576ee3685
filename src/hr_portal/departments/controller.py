from __future__ import annotations

from flask import Flask, render_template, request

from ..commands import DeleteDepartment, SaveDepartment
from ..container import Container
from ..routing.controller import submit
from ..routing.router import Route
from ..views import department_rows


def register(app: Flask, container: Container) -> None:
    @app.route("/departments", methods=["GET"], endpoint="departments")
    def departments():
        editing = None
        edit_id = request.args.get("edit")
        if edit_id:
            editing = container.department_service.get(edit_id)

        return render_template(
            "departments.html",
            departments=department_rows(container.department_service),
            editing=editing,
            show_form=bool(editing) or request.args.get("new") == "1",
            active_page="departments",
        )

    @app.route("/departments", methods=["POST"], endpoint="save_department")
    def save_department():
        return submit(
            container,
            SaveDepartment(
                dept_id=request.form.get("dept_id") or None,
                name=request.form.get("name", ""),
                description=request.form.get("description", ""),
            ),
            on_error=Route.DEPARTMENTS,
        )

    @app.route("/departments/<dept_id>/delete", methods=["POST"], endpoint="delete_department")
    def delete_department(dept_id: str):
        return submit(container, DeleteDepartment(dept_id=dept_id), on_error=Route.DEPARTMENTS)
