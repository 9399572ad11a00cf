from __future__ import annotations

from flask import Flask, redirect, render_template, url_for

from ..container import Container
from ..session.controller import login_required_for


def register(app: Flask, container: Container) -> None:
    login_required = login_required_for(container)

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("dashboard"))

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        summary = container.dashboard_service.summary()
        return render_template("dashboard.html", summary=summary, active_page="dashboard")
