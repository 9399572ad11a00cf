from __future__ import annotations

from typing import Protocol

from flask import flash


class Notifier(Protocol):
    """Transient user feedback (toast/flash)."""

    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError


class FlashNotifier:
    def success(self, message: str) -> None:
        flash(message, "success")

    def error(self, message: str) -> None:
        flash(message, "danger")


class RecordingNotifier:
    """Collects notices in memory (scripts and tests)."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("danger", message))
