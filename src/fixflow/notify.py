"""User notification channel.

Store and editor operations report their outcome to the user through a
Notifier: a callable taking a Notification. Hosts decide how to present
them (stderr for the CLI, JSON for the REST API).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TextIO

Notifier = Callable[["Notification"], None]


class NotificationStyle(Enum):
    """Flavor of a user notification."""

    SUCCESS = "success"
    FAILURE = "failure"
    WARNING = "warning"


@dataclass(frozen=True)
class Notification:
    """A title/message pair shown to the user."""

    style: NotificationStyle
    title: str
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"style": self.style.value, "title": self.title, "message": self.message}

    def __str__(self) -> str:
        if self.message:
            return f"{self.title} {self.message}"
        return self.title


class RecordingNotifier:
    """Notifier that keeps every notification it receives."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def drain(self) -> list[Notification]:
        """Return and forget the recorded notifications."""
        drained, self.notifications = self.notifications, []
        return drained


class ConsoleNotifier:
    """Notifier that prints to a stream (stderr by default)."""

    _MARKS = {
        NotificationStyle.SUCCESS: "✓",
        NotificationStyle.FAILURE: "✗",
        NotificationStyle.WARNING: "⚠",
    }

    def __init__(self, stream: TextIO | None = None, quiet: bool = False) -> None:
        self._stream = stream
        self._quiet = quiet

    def __call__(self, notification: Notification) -> None:
        # Quiet mode still reports failures
        if self._quiet and notification.style is NotificationStyle.SUCCESS:
            return
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"{self._MARKS[notification.style]} {notification}", file=stream)


def discard(notification: Notification) -> None:
    """Notifier that ignores everything."""
