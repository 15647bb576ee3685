from __future__ import annotations

from flask import Flask, render_template, request

from ..commands import DeleteAccount, ResetPassword, SaveAccount
from ..container import Container
from ..core.enums import Role
from ..routing.controller import submit
from ..routing.router import Route
from ..views import account_rows


def register(app: Flask, container: Container) -> None:
    @app.route("/accounts", methods=["GET"], endpoint="accounts")
    def accounts():
        editing = None
        edit_id = request.args.get("edit")
        if edit_id:
            editing = container.account_service.get(edit_id)

        return render_template(
            "accounts.html",
            accounts=account_rows(container.account_service, container.session),
            roles=[r.value for r in Role],
            editing=editing,
            show_form=bool(editing) or request.args.get("new") == "1",
            active_page="accounts",
        )

    @app.route("/accounts", methods=["POST"], endpoint="save_account")
    def save_account():
        return submit(
            container,
            SaveAccount(
                account_id=request.form.get("account_id") or None,
                first_name=request.form.get("first_name", ""),
                last_name=request.form.get("last_name", ""),
                email=request.form.get("email", ""),
                password=request.form.get("password", ""),
                role=request.form.get("role", Role.USER.value),
                verified=request.form.get("verified") is not None,
            ),
            on_error=Route.ACCOUNTS,
        )

    @app.route("/accounts/<account_id>/reset-password", methods=["POST"], endpoint="reset_password")
    def reset_password(account_id: str):
        return submit(
            container,
            ResetPassword(account_id=account_id, new_password=request.form.get("new_password", "")),
            on_error=Route.ACCOUNTS,
        )

    @app.route("/accounts/<account_id>/delete", methods=["POST"], endpoint="delete_account")
    def delete_account(account_id: str):
        return submit(container, DeleteAccount(account_id=account_id), on_error=Route.ACCOUNTS)
