"""Behaviors that walk a snake towards a fixed address."""

from __future__ import annotations

import random
from collections.abc import Collection

from ..address import Address, all_steps, next_steps, pick_random, same_address, to_flat
from ..models import Action, MoveAction, Snake
from ..state import GameState
from .types import BehaviorKind


class ReachTarget:
    kind = BehaviorKind.REACH_TARGET

    def __init__(self, game_state: GameState, snake: Snake, target: Address | None, rng: random.Random) -> None:
        self.game_state = game_state
        self.snake = snake
        self.target: Address | None = target
        self.rng = rng

    def is_done(self) -> str | None:
        return "target reached" if self.is_target_reached() else None

    def is_target_reached(self) -> bool:
        return self.target is not None and same_address(self.target, self.snake.head)

    def update(self) -> list[Action]:
        if self.target is None:
            return []
        step = self.determine_next_step()
        if step is None:
            return []
        return [MoveAction(snake_name=self.snake.name, next_location=step)]

    def determine_next_step(self, reserved: Collection[str] | None = None) -> Address | None:
        grid = self.game_state.grid
        head = self.snake.head
        for candidates in (next_steps(head, self.target), all_steps(head, self.target)):
            if reserved:
                preferred = grid.filter_available(candidates, reserved)
                if preferred:
                    return pick_random(preferred, self.rng)
            available = grid.filter_available(candidates)
            if available:
                return pick_random(available, self.rng)
        return None

    def inspect(self) -> str:
        target = to_flat(self.target) if self.target is not None else "-"
        return f"[{self.kind.value} target={target}]"


class RetreatToBase(ReachTarget):
    """Walk back to the spawn address; reaching it retires the snake."""

    kind = BehaviorKind.RETREAT_TO_BASE

    def __init__(self, game_state: GameState, snake: Snake, rng: random.Random) -> None:
        super().__init__(game_state, snake, game_state.start_address, rng)
