from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import ADMIN_USERS_KEY
from ..core.exceptions import AuthorizationError
from ..entities.admin import ADMIN_TABS, USERS
from ..records.page import PageController
from ..session.controller import login_required_for
from .service import summarize_users

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = login_required_for(container)
    tabs = {d.slug: d for d in ADMIN_TABS}

    def _find_user(user_id: int):
        users = container.collections.read(ADMIN_USERS_KEY).data_or([])
        return next((u for u in users if u.get("id") == user_id), None)

    @app.route("/admin", endpoint="admin")
    @login_required
    def admin():
        active = request.args.get("tab", USERS.slug)
        if active not in tabs:
            active = USERS.slug
        search_text = request.args.get("q", "")

        page = PageController(tabs[active], container.collections, container.notifier, search_text=search_text)
        counts = {slug: len(container.collections.items(d.key)) for slug, d in tabs.items()}
        summary = summarize_users(container.collections.items(ADMIN_USERS_KEY))

        return render_template(
            "admin/index.html",
            tabs=ADMIN_TABS,
            active_tab=active,
            page=page.view(),
            counts=counts,
            summary=summary,
            active_page="admin",
            delete_user_url=lambda user_id: url_for("admin_delete_user", user_id=user_id),
        )

    @app.route("/admin/users/<int:user_id>/toggle", methods=["POST"], endpoint="admin_toggle_user")
    @login_required
    def toggle_user(user_id: int):
        user = _find_user(user_id)
        if user is None:
            flash("کاربر یافت نشد", "warning")
        else:
            try:
                container.admin_service.toggle_user(user)
            except AuthorizationError:
                raise
            except Exception:
                logger.exception("toggle user id=%s crashed", user_id)
                flash("خطای سیستم هنگام تغییر وضعیت کاربر", "danger")
        return redirect(url_for("admin", tab=USERS.slug))

    @app.route("/admin/users/<int:user_id>/delete", methods=["POST"], endpoint="admin_delete_user")
    @login_required
    def delete_user(user_id: int):
        page = PageController(USERS, container.collections, container.notifier)
        try:
            page.delete(_find_user(user_id) or {"id": user_id}, confirmed=request.form.get("confirm") == "yes")
        except AuthorizationError:
            raise
        except Exception:
            logger.exception("delete user id=%s crashed", user_id)
            flash("خطای سیستم هنگام حذف کاربر", "danger")
        return redirect(url_for("admin", tab=USERS.slug))
