from __future__ import annotations

import logging
from typing import Sequence

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import AuthorizationError
from ..session.controller import login_required_for
from .page import EntityDefinition, PageController

logger = logging.getLogger(__name__)


def _search(search_text: str) -> dict:
    # An empty search stays out of the URL.
    return {"q": search_text} if search_text else {}


def register(app: Flask, container: Container, definitions: Sequence[EntityDefinition]) -> None:
    login_required = login_required_for(container)

    for definition in definitions:
        _register_entity(app, container, definition, login_required)


def _register_entity(app: Flask, container: Container, definition: EntityDefinition, login_required) -> None:
    slug = definition.slug

    def _page(search_text: str = "") -> PageController:
        return PageController(definition, container.collections, container.notifier, search_text=search_text)

    def _render(page: PageController):
        search_text = page.search_text
        return render_template(
            "records/list.html",
            page=page.view(),
            definition=definition,
            active_page=slug,
            edit_url=lambda record_id: url_for(f"{slug}_list", modal="edit", id=record_id, **_search(search_text)),
            delete_url=lambda record_id: url_for(f"{slug}_delete", record_id=record_id),
        )

    @login_required
    def list_view():
        page = _page(request.args.get("q", ""))

        modal = request.args.get("modal")
        if modal == "create":
            page.open_create()
        elif modal == "edit":
            record_id = request.args.get("id", "")
            record = page.find(int(record_id)) if record_id.isdigit() else None
            if record is None:
                flash("رکورد مورد نظر یافت نشد", "warning")
            else:
                page.open_edit(record)

        return _render(page)

    @login_required
    def save():
        search_text = request.form.get("q", "")
        page = _page(search_text)

        record_id = request.form.get("id", "")
        if record_id:
            record = page.find(int(record_id)) if record_id.isdigit() else None
            if record is None:
                flash("رکورد مورد نظر یافت نشد", "warning")
                return redirect(url_for(f"{slug}_list", **_search(search_text)))
            page.open_edit(record)
        else:
            page.open_create()

        try:
            if page.submit(request.form.to_dict()):
                return redirect(url_for(f"{slug}_list", **_search(search_text)))
        except AuthorizationError:
            raise
        except Exception:
            logger.exception("%s save crashed", slug)
            flash("خطای سیستم هنگام ذخیره", "danger")

        # Validation or API failure: modal stays open with the entered values.
        return _render(page)

    @login_required
    def delete(record_id: int):
        page = _page()
        confirmed = request.form.get("confirm") == "yes"
        record = page.find(record_id) or {"id": record_id}
        try:
            page.delete(record, confirmed=confirmed)
        except AuthorizationError:
            raise
        except Exception:
            logger.exception("%s delete crashed", slug)
            flash("خطای سیستم هنگام حذف", "danger")

        return redirect(url_for(f"{slug}_list", **_search(request.form.get("q", ""))))

    app.add_url_rule(f"/{slug}", endpoint=f"{slug}_list", view_func=list_view)
    app.add_url_rule(f"/{slug}/save", endpoint=f"{slug}_save", view_func=save, methods=["POST"])
    app.add_url_rule(f"/{slug}/<int:record_id>/delete", endpoint=f"{slug}_delete", view_func=delete, methods=["POST"])
