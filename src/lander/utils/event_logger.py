"""Append-only JSONL log of supervisor notifications.

Each notification is one JSON dict per line, tagged with the session id so
several runs can share a file. Used by ``JsonlListener``.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class NotificationLogger:
    """Append-only JSONL writer.

    Usage:
        log = NotificationLogger("logs/notifications.jsonl")
        log.log("notification", {"message": "Descending: Engines are operational"})
    """

    def __init__(self, path: str | Path = "logs/notifications.jsonl") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._session_id = f"mission_{int(time.time())}"
        logger.info("NotificationLogger: writing to %s (session=%s)", self._path, self._session_id)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def session_id(self) -> str:
        return self._session_id

    def log(self, event_type: str, data: dict[str, Any] | None = None) -> None:
        """Append one event line to the JSONL file."""
        entry: dict[str, Any] = {
            "timestamp": time.time(),
            "timestamp_mono": time.monotonic(),
            "session": self._session_id,
            "event": event_type,
        }
        if data:
            entry.update(data)
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
        except OSError as e:
            logger.warning("NotificationLogger write failed: %s", e)

    def log_notification(self, message: str, source: str = "") -> None:
        self.log("notification", {"message": message, "source": source})

    def read(self) -> list[dict[str, Any]]:
        """Return every entry written so far (all sessions)."""
        if not self._path.exists():
            return []
        with open(self._path, encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]
