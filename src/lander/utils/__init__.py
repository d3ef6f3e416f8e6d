"""Logging helpers."""

from .event_logger import NotificationLogger
from .logging import setup_logging

__all__ = ["NotificationLogger", "setup_logging"]
