"""Transient notifications (toasts) surfaced by the panel."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class ToastStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Toast:
    title: str
    status: ToastStatus
    description: str | None = None
    duration_ms: int | None = None


class Notifier(Protocol):
    def notify(self, toast: Toast) -> None: ...


class LoggingNotifier:
    """Default notifier: writes toasts to the log instead of a screen."""

    def notify(self, toast: Toast) -> None:
        level = logging.INFO if toast.status is ToastStatus.SUCCESS else logging.WARNING
        if toast.description:
            logger.log(level, "%s: %s", toast.title, toast.description)
        else:
            logger.log(level, "%s", toast.title)
