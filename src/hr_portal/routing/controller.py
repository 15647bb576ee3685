from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request

from ..commands import SAVE_FAILED_WARNING
from ..container import Container
from ..core.exceptions import DomainError
from ..views import profile_view
from .router import Route

logger = logging.getLogger(__name__)


def submit(container: Container, command, *, on_error: Route):
    """Dispatch a command built from a form post and redirect."""
    try:
        result = container.dispatcher.dispatch(command)
    except DomainError as e:
        flash(str(e), "danger")
        return redirect(on_error.path)
    except Exception:
        logger.exception("unexpected failure handling %s", type(command).__name__)
        flash("System error, please try again", "danger")
        return redirect(on_error.path)

    if result.message:
        flash(result.message, "success")
    if result.warning:
        flash(result.warning, "danger")
    return redirect((result.redirect_to or on_error).path)


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.before_request
    def guard():
        if request.endpoint == "static":
            return None

        decision = container.router.navigate(request.path)
        load_error = container.conn.take_error()
        if load_error is not None:
            flash(SAVE_FAILED_WARNING, "danger")
        if decision.redirected:
            if decision.warning:
                flash(decision.warning, "warning")
            return redirect(decision.page.path)
        return None

    @app.context_processor
    def inject_current_user():
        return {
            "current_user": profile_view(container.session),
            "is_admin": container.session.is_admin,
        }

    @app.errorhandler(404)
    def unknown_page(_error):
        # unknown addresses fall back to the home page
        return redirect(Route.HOME.path)
