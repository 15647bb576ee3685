from __future__ import annotations

from flask import Flask, redirect, render_template, request

from ..commands import RegisterAccount, SignIn, SignOut, UpdateProfile, VerifyEmail
from ..container import Container
from ..routing.controller import submit
from ..routing.router import Route
from ..views import profile_view


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="home")
    def home():
        return render_template("home.html", active_page="home")

    @app.route("/register", methods=["GET", "POST"], endpoint="register")
    def register_account():
        if container.session.is_authenticated:
            return redirect(Route.PROFILE.path)

        if request.method == "POST":
            return submit(
                container,
                RegisterAccount(
                    first_name=request.form.get("first_name", ""),
                    last_name=request.form.get("last_name", ""),
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                ),
                on_error=Route.REGISTER,
            )
        return render_template("register.html", active_page="register")

    @app.route("/verify-email", methods=["GET", "POST"], endpoint="verify_email")
    def verify_email():
        if request.method == "POST":
            return submit(container, VerifyEmail(), on_error=Route.VERIFY_EMAIL)
        return render_template(
            "verify_email.html",
            pending_email=container.account_service.pending_email(),
            active_page="verify_email",
        )

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if container.session.is_authenticated:
            return redirect(Route.PROFILE.path)

        if request.method == "POST":
            return submit(
                container,
                SignIn(email=request.form.get("email", ""), password=request.form.get("password", "")),
                on_error=Route.LOGIN,
            )
        return render_template("login.html", active_page="login")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        return submit(container, SignOut(), on_error=Route.HOME)

    @app.route("/profile", methods=["GET", "POST"], endpoint="profile")
    def profile():
        if request.method == "POST":
            return submit(
                container,
                UpdateProfile(
                    first_name=request.form.get("first_name", ""),
                    last_name=request.form.get("last_name", ""),
                ),
                on_error=Route.PROFILE,
            )
        return render_template(
            "profile.html",
            profile=profile_view(container.session),
            editing=request.args.get("edit") == "1",
            active_page="profile",
        )
