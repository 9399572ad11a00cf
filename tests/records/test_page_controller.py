from __future__ import annotations

from src.staff_portal.staff_portal.core.constants import MAILS_KEY, STAFF_KEY, TASKS_KEY
from src.staff_portal.staff_portal.core.exceptions import ApiError
from src.staff_portal.staff_portal.entities.mails import MAILS
from src.staff_portal.staff_portal.entities.staff import STAFF
from src.staff_portal.staff_portal.entities.tasks import TASKS
from src.staff_portal.staff_portal.records.page import PageController, filter_records
from tests.fakes import make_collections

PEOPLE = [
    {"id": 1, "name": "Ali", "family": "Rezai", "job_label": "Engineer"},
    {"id": 2, "name": "Sara", "family": "Ahmadi", "job_label": "Accountant"},
    {"id": 3, "name": "Reza", "family": "Khalili", "job_label": "Driver"},
]


def test_search_is_case_insensitive_over_configured_fields():
    matches = filter_records(PEOPLE, ("name", "family", "job_label"), "ali")

    assert [r["id"] for r in matches] == [1, 3]


def test_search_is_idempotent_and_never_mutates_input():
    original = list(PEOPLE)
    once = filter_records(PEOPLE, ("name",), "sa")
    twice = filter_records(once, ("name",), "sa")

    assert once == twice
    assert PEOPLE == original


def test_empty_search_keeps_everything():
    assert filter_records(PEOPLE, ("name",), "") == PEOPLE


def test_staff_search_shows_matching_row(notifier):
    collections, _ = make_collections(
        staff=[{"id": 1, "name": "Ali", "family": "Rezai"}, {"id": 2, "name": "Sara", "family": "Ahmadi"}]
    )
    page = PageController(STAFF, collections, notifier, search_text="ali")

    view = page.view()

    assert view.count == 1
    assert view.table.rows[0].id == 1
    assert "Ali" in view.table.rows[0].cells
    assert "Rezai" in view.table.rows[0].cells


def test_open_and_close_modal(notifier):
    collections, _ = make_collections(staff=PEOPLE)
    page = PageController(STAFF, collections, notifier)

    assert page.form() is None
    page.open_edit(PEOPLE[1])
    assert page.form().record == PEOPLE[1]
    page.close_modal()
    assert page.form() is None
    assert page.editing_record is None


def test_delete_requires_confirmation(notifier):
    collections, repos = make_collections(tasks=[{"id": 7, "body": "x"}])
    page = PageController(TASKS, collections, notifier)

    assert not page.delete({"id": 7}, confirmed=False)

    assert repos[TASKS_KEY].deleted == []
    assert collections.cache.invalidated == []


def test_confirmed_delete_invalidates_and_notifies(notifier):
    collections, repos = make_collections(tasks=[{"id": 7, "body": "x"}])
    page = PageController(TASKS, collections, notifier)

    assert page.delete({"id": 7}, confirmed=True)

    assert repos[TASKS_KEY].deleted == [7]
    assert collections.cache.invalidated == [TASKS_KEY]
    assert notifier.messages == [("success", TASKS.deleted)]


def test_failed_delete_leaves_list_unchanged(notifier):
    collections, repos = make_collections(tasks=[{"id": 7, "body": "x"}])
    page = PageController(TASKS, collections, notifier)
    repos[TASKS_KEY].fail_with = ApiError("server", status=500)

    assert not page.delete({"id": 7}, confirmed=True)

    assert [r.id for r in page.view().table.rows] == [7]
    assert notifier.messages == [("danger", TASKS.delete_failed)]


def test_dangling_sender_renders_unknown(notifier, caplog):
    collections, _ = make_collections(
        mails=[{"id": 1, "subject": "Invoice", "sender": 3, "receiver": 1, "project": None}],
        staff=[{"id": 1, "name": "Ali", "family": "Rezai"}, {"id": 2, "name": "Sara", "family": "Ahmadi"}],
        projects=[],
    )

    view = PageController(MAILS, collections, notifier).view()

    cells = dict(zip(view.table.headers, view.table.rows[0].cells))
    assert cells["Sender"] == "Unknown"
    assert cells["Receiver"] == "Ali Rezai"
    assert cells["Project"] == ""
    assert "dangling staff reference id=3" in caplog.text


def test_failed_first_read_shows_placeholder_and_error(notifier):
    collections, repos = make_collections(mails=[])

    def offline():
        raise ApiError("offline")

    repos[MAILS_KEY].list_all = offline

    view = PageController(MAILS, collections, notifier).view()

    assert view.table.placeholder
    assert view.error == "offline"


def test_find_looks_up_cached_records(notifier):
    collections, repos = make_collections(staff=PEOPLE)
    page = PageController(STAFF, collections, notifier)

    assert page.find(2) == PEOPLE[1]
    assert page.find(99) is None
    assert repos[STAFF_KEY].list_calls == 1
