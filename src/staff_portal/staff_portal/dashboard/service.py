from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import MAILS_KEY, MESSAGES_KEY, PROJECTS_KEY, STAFF_KEY, TASKS_KEY, TIMESHEETS_KEY
from ..core.enums import TaskState
from ..records.collections import Collections


@dataclass(frozen=True)
class Stat:
    name: str
    value: Optional[int]
    slug: str
    failed: bool = False


@dataclass(frozen=True)
class DashboardSummary:
    stats: list[Stat]
    completed_tasks: int
    total_tasks: int
    completion_rate: int


def completion_rate(done: int, total: int) -> int:
    return round(done / total * 100) if total > 0 else 0


class DashboardService:
    """Use case: counts per collection and task completion rate."""

    def __init__(self, collections: Collections):
        self._collections = collections

    def _stat(self, name: str, key: str, slug: str, predicate=None) -> Stat:
        state = self._collections.read(key)
        if state.data is None:
            return Stat(name=name, value=None, slug=slug, failed=state.is_error)
        items = state.data
        if predicate is not None:
            items = [r for r in items if predicate(r)]
        return Stat(name=name, value=len(items), slug=slug)

    def summary(self) -> DashboardSummary:
        stats = [
            self._stat("Total Staff", STAFF_KEY, "staff"),
            self._stat("Active Projects", PROJECTS_KEY, "projects"),
            self._stat(
                "Pending Tasks",
                TASKS_KEY,
                "tasks",
                lambda t: t.get("state") == TaskState.IN_PROGRESS.value,
            ),
            self._stat("Timesheets", TIMESHEETS_KEY, "timesheets"),
            self._stat("Mails", MAILS_KEY, "mails"),
            self._stat("Messages", MESSAGES_KEY, "messages"),
        ]

        tasks = self._collections.items(TASKS_KEY)
        done = sum(1 for t in tasks if t.get("state") == TaskState.DONE.value)
        return DashboardSummary(
            stats=stats,
            completed_tasks=done,
            total_tasks=len(tasks),
            completion_rate=completion_rate(done, len(tasks)),
        )
