"""User-visible notifications (toasts)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

logger = logging.getLogger(__name__)

Level = Literal["success", "info", "warning", "error"]


@dataclass
class Notification:
    """A message shown to the seller."""

    level: Level
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


class Notifier:
    """
    Records notifications and emits them.

    The base class only logs; the Gradio layer subclasses it to raise toasts.
    """

    def __init__(self, history_size: int = 100):
        self.history: list[Notification] = []
        self.history_size = history_size

    def success(self, message: str) -> None:
        self.notify("success", message)

    def info(self, message: str) -> None:
        self.notify("info", message)

    def warning(self, message: str) -> None:
        self.notify("warning", message)

    def error(self, message: str) -> None:
        self.notify("error", message)

    def notify(self, level: Level, message: str) -> None:
        notification = Notification(level=level, message=message)
        self.history.append(notification)
        del self.history[: -self.history_size]
        self._emit(notification)

    def _emit(self, notification: Notification) -> None:
        log_level = logging.WARNING if notification.level in ("warning", "error") else logging.INFO
        logger.log(log_level, f"[{notification.level}] {notification.message}")

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None

    def messages(self, level: Level | None = None) -> list[str]:
        """Messages shown so far, optionally filtered by level."""
        return [n.message for n in self.history if level is None or n.level == level]
