"""Injectable diagnostic sink so decision code never writes to a console directly."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

logger = logging.getLogger(__name__)

SAVED_SNAKE = "saved_snake"
SNAKE_REMOVED = "snake_removed"
ENEMY_SCAN = "enemy_scan"
STRATEGY_DELETED = "strategy_deleted"
TARGET_DONE = "target_done"
ASSIGNED = "assigned"
SPLIT = "split"
NO_TARGET = "no_target"
TARGET_SELECTED = "target_selected"


class DiagnosticSink(Protocol):
    def emit(self, event: str, **fields: Any) -> None:
        """Record a named decision event."""


@dataclass(slots=True, frozen=True)
class DiagnosticEvent:
    event: str
    fields: dict[str, Any]


class LoggingSink:
    def __init__(self, log: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self._log = log or logger
        self._level = level

    def emit(self, event: str, **fields: Any) -> None:
        if not self._log.isEnabledFor(self._level):
            return
        detail = " ".join(f"{key}={value}" for key, value in fields.items())
        self._log.log(self._level, "%s %s", event, detail)


@dataclass(slots=True)
class RecordingSink:
    events: list[DiagnosticEvent] = field(default_factory=list)

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append(DiagnosticEvent(event=event, fields=dict(fields)))

    def named(self, event: str) -> list[DiagnosticEvent]:
        return [item for item in self.events if item.event == event]


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
