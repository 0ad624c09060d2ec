"""Core dataclasses representing cells, snakes and the intents they emit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from .address import Address, as_address

logger = logging.getLogger(__name__)

SACRIFICE_SUFFIX = "_k"


@dataclass(slots=True)
class Cell:
    address: Address
    has_food: bool = False
    player: str | None = None
    is_ours: bool = False

    def mark_as_ours(self) -> None:
        self.is_ours = True

    def is_marked_as_ours(self) -> bool:
        return self.is_ours


class ActionType(Enum):
    MOVE = "move"
    SPLIT = "split"


@dataclass(slots=True, frozen=True)
class MoveAction:
    snake_name: str
    next_location: Address

    @property
    def type(self) -> ActionType:
        return ActionType.MOVE


@dataclass(slots=True, frozen=True)
class SplitAction:
    old_snake_name: str
    new_snake_name: str
    snake_segment: int
    next_location: Address

    @property
    def type(self) -> ActionType:
        return ActionType.SPLIT


Action = MoveAction | SplitAction


@dataclass(slots=True)
class Snake:
    name: str
    segments: list[Address]
    target: Address | None = None
    kid_count: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self.segments = [as_address(segment) for segment in self.segments]

    @property
    def head(self) -> Address:
        return self.segments[0]

    @property
    def length(self) -> int:
        return len(self.segments)

    @property
    def is_sacrificial(self) -> bool:
        return self.name.endswith(SACRIFICE_SUFFIX)

    def log(self, message: str, *args: object) -> None:
        logger.debug("[%s] " + message, self.name, *args)

    def apply_move(self, next_location: Address, grow: bool) -> None:
        self.segments.insert(0, as_address(next_location))
        if not grow:
            self.segments.pop()

    def get_kid(self, amount: int) -> Snake:
        """Preview the snake that detaching the last ``amount`` segments would create.

        Each call consumes a lineage number so kid names stay unique even when
        a planned split is never applied.
        """
        amount = max(1, min(amount, self.length - 1))
        self.kid_count += 1
        return Snake(name=f"{self.name}.{self.kid_count}", segments=list(self.segments[-amount:]))

    def apply_split(self, action: SplitAction, grow: bool) -> Snake | None:
        amount = action.snake_segment
        if amount < 1 or amount >= self.length:
            return None
        detached = self.segments[-amount:]
        del self.segments[-amount:]
        kid = Snake(name=action.new_snake_name, segments=detached)
        kid.apply_move(action.next_location, grow)
        return kid
