"""SHUNT FILE PURPOSE
Purpose: user feedback channel for status changes (message sinks and severities).
Hot path: no (one message per requested change).
Feature flags: none.
Failure mode: sinks must not raise; log sink only writes to the shunt logger.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from shunt.logging import logger


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STATUS = "status"


FeedbackSink = Callable[[str, Severity], None]


@dataclass(frozen=True)
class FeedbackMessage:
    message: str
    severity: Severity


def no_such_shunt(name: str) -> str:
    return f'No such shunt "{name}".'


def already(name: str, enabled: bool) -> str:
    return f'Shunt "{name}" is already {"enabled" if enabled else "disabled"}.'


def changed(name: str, enabled: bool) -> str:
    return f'Shunt "{name}" has been {"enabled" if enabled else "disabled"}.'


class FeedbackCollector:
    """Sink that keeps every message, in emission order."""

    def __init__(self) -> None:
        self._items: list[FeedbackMessage] = []

    def __call__(self, message: str, severity: Severity) -> None:
        self._items.append(FeedbackMessage(message=message, severity=Severity(severity)))

    def messages(self, severity: Severity | None = None) -> list[FeedbackMessage]:
        if severity is None:
            return list(self._items)
        return [m for m in self._items if m.severity is severity]

    def has_errors(self) -> bool:
        return any(m.severity is Severity.ERROR for m in self._items)

    def as_dicts(self) -> list[dict[str, str]]:
        return [{"message": m.message, "severity": m.severity.value} for m in self._items]

    def clear(self) -> None:
        self._items.clear()


def log_feedback(message: str, severity: Severity) -> None:
    severity = Severity(severity)
    if severity is Severity.ERROR:
        logger.error("SHUNT_FEEDBACK %s", message)
    elif severity is Severity.WARNING:
        logger.warning("SHUNT_FEEDBACK %s", message)
    else:
        logger.info("SHUNT_FEEDBACK %s", message)
