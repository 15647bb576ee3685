from __future__ import annotations

from flask import Flask, render_template, request

from ..commands import DeleteEmployee, SaveEmployee
from ..container import Container
from ..routing.controller import submit
from ..routing.router import Route
from ..views import employee_rows


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        editing = None
        edit_id = request.args.get("edit")
        if edit_id:
            editing = container.employee_service.get(edit_id)

        return render_template(
            "employees.html",
            employees=employee_rows(container.employee_service),
            departments=container.department_service.list_all(),
            editing=editing,
            show_form=bool(editing) or request.args.get("new") == "1",
            active_page="employees",
        )

    @app.route("/employees", methods=["POST"], endpoint="save_employee")
    def save_employee():
        return submit(
            container,
            SaveEmployee(
                employee_id=request.form.get("employee_id") or None,
                employee_code=request.form.get("employee_code", ""),
                email=request.form.get("email", ""),
                position=request.form.get("position", ""),
                dept_id=request.form.get("dept_id", ""),
                hire_date=request.form.get("hire_date", ""),
            ),
            on_error=Route.EMPLOYEES,
        )

    @app.route("/employees/<employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        return submit(container, DeleteEmployee(employee_id=employee_id), on_error=Route.EMPLOYEES)
