from __future__ import annotations

from flask import Flask, render_template, request

from ..commands import SubmitRequest
from ..container import Container
from ..routing.controller import submit
from ..routing.router import Route
from ..views import request_rows

REQUEST_TYPES = ("Equipment", "Leave", "Resources")
DEFAULT_ITEM_ROWS = 3
MAX_ITEM_ROWS = 50


def _item_pairs(source):
    names = source.getlist("item_name")
    qtys = source.getlist("item_qty")
    return list(zip(names, qtys + [""] * (len(names) - len(qtys))))


def _draft_rows(args):
    """Item rows for the new-request form, keeping what was typed so far."""
    draft = _item_pairs(args)
    wanted = args.get("rows", type=int)
    if wanted is None:
        wanted = max(len(draft), DEFAULT_ITEM_ROWS)
    wanted = min(max(wanted, 1), MAX_ITEM_ROWS)
    draft = draft[:wanted]
    draft += [("", "1")] * (wanted - len(draft))
    return [{"name": name, "qty": qty or "1"} for name, qty in draft]


def register(app: Flask, container: Container) -> None:
    @app.route("/requests", methods=["GET"], endpoint="my_requests")
    def my_requests():
        return render_template(
            "requests.html",
            requests=request_rows(container.request_service, container.session.email),
            request_types=REQUEST_TYPES,
            selected_type=request.args.get("request_type", REQUEST_TYPES[0]),
            item_rows=_draft_rows(request.args),
            active_page="requests",
        )

    @app.route("/requests", methods=["POST"], endpoint="submit_request")
    def submit_request():
        return submit(
            container,
            SubmitRequest(request_type=request.form.get("request_type", ""), items=tuple(_item_pairs(request.form))),
            on_error=Route.REQUESTS,
        )
