from __future__ import annotations

from functools import wraps

from flask import Flask, current_app, flash, g, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.enums import SessionState
from ..core.exceptions import AuthenticationError, AuthorizationError
from .context import SessionContext

# Marks the app process in which this client's credential was last verified.
BOOT_KEY = "session_boot"


def current_session(container: Container) -> SessionContext:
    """Session context of the current request, verified once per app process."""
    ctx = g.get("session_context")
    if ctx is not None:
        return ctx

    boot_id = current_app.config["BOOT_ID"]
    if container.tokens.get() and session.get(BOOT_KEY) == boot_id:
        ctx = container.session_context(SessionState.AUTHENTICATED)
    else:
        ctx = container.session_context()
        if ctx.start() == SessionState.AUTHENTICATED:
            session[BOOT_KEY] = boot_id
        else:
            session.pop(BOOT_KEY, None)

    g.session_context = ctx
    return ctx


def login_required_for(container: Container):
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not current_session(container).is_authenticated:
                flash("لطفاً برای ادامه وارد شوید", "warning")
                return redirect(url_for("login", next=request.path))
            return view(*args, **kwargs)

        return wrapper

    return login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        ctx = current_session(container)
        if ctx.is_authenticated:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            try:
                ctx.login(email, password)
                session[BOOT_KEY] = current_app.config["BOOT_ID"]
                flash("Successfully logged in", "success")
                target = request.args.get("next") or ""
                if not target.startswith("/") or target.startswith("//"):
                    target = url_for("dashboard")
                return redirect(target)
            except AuthenticationError as e:
                flash(str(e), "danger")

        return render_template("login.html", email=request.form.get("email", ""))

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        # Only this credential's snapshots go; other users keep theirs.
        container.caches.discard(container.tokens.get())
        current_session(container).logout()
        session.pop(BOOT_KEY, None)
        flash("Successfully logged out", "success")
        return redirect(url_for("login"))

    @app.errorhandler(AuthorizationError)
    def on_authorization_error(e: AuthorizationError):
        current_app.logger.info("credential rejected, redirecting to login: %s", e)
        container.caches.discard(container.tokens.get())
        current_session(container).handle_unauthorized()
        session.pop(BOOT_KEY, None)
        flash("نشست شما منقضی شده است، دوباره وارد شوید", "warning")
        return redirect(url_for("login"))
