"""User-facing notifications raised by the services layer."""

from __future__ import annotations
from typing import Callable

from .utils import get_logger

SUCCESS = "success"
ERROR = "error"

# (level, title, message)
Notifier = Callable[[str, str, str], None]

log = get_logger("notify")


def log_notifier(level: str, title: str, message: str) -> None:
    """Default notifier: write to the log only."""
    if level == ERROR:
        log.warning("%s - %s", title, message)
    else:
        log.info("%s - %s", title, message)
