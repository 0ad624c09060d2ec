"""Per-snake behavior contract and the tag the orchestrator dispatches on."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from ..address import Address
from ..models import Action


class BehaviorKind(Enum):
    REACH_TARGET = "reach_target"
    HUNT_ENEMY = "hunt_enemy"
    RETREAT_TO_BASE = "retreat_to_base"
    RANDOM_WALK = "random_walk"


class SnakeBehavior(Protocol):
    kind: BehaviorKind
    target: Address | None

    def is_done(self) -> str | None:
        """Return a completion reason, or None while the behavior is still active."""

    def update(self) -> list[Action]:
        """Return this tick's intents for the owning snake."""

    def inspect(self) -> str:
        """Return a one-line description for diagnostics."""
