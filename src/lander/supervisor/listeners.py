"""Listeners: sinks for the controller's text notifications."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from ..utils.event_logger import NotificationLogger

logger = logging.getLogger(__name__)


class Listener(ABC):
    """Receives every notification the controller fans out."""

    @abstractmethod
    def on_notify(self, message: str) -> None:
        ...


class LoggingListener(Listener):
    """Diagnostic sink: logs '<name>: <message>'."""

    def __init__(self, name: str = "Diagnostic Tool", level: int = logging.INFO) -> None:
        self.name = name
        self.level = level

    def on_notify(self, message: str) -> None:
        logger.log(self.level, "%s: %s", self.name, message)


class RecordingListener(Listener):
    """Keeps every message in arrival order."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def on_notify(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class CallbackListener(Listener):
    """Adapts a plain callable."""

    def __init__(self, fn: Callable[[str], None]) -> None:
        self._fn = fn

    def on_notify(self, message: str) -> None:
        self._fn(message)


class JsonlListener(Listener):
    """Appends each notification to a JSONL file."""

    def __init__(self, path: str | Path, source: str = "lander") -> None:
        self._log = NotificationLogger(path)
        self._source = source

    @property
    def path(self) -> Path:
        return self._log.path

    def on_notify(self, message: str) -> None:
        self._log.log_notification(message, source=self._source)
