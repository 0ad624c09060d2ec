"""Random single-step wandering that keeps idle snakes out of the way."""

from __future__ import annotations

import random

from .. import config
from ..address import Address, random_neighbour
from ..models import Action, MoveAction, Snake
from ..state import GameState
from .types import BehaviorKind


class RandomWalk:
    kind = BehaviorKind.RANDOM_WALK

    def __init__(
        self,
        game_state: GameState,
        snake: Snake,
        rng: random.Random,
        attempts: int = config.RANDOM_WALK_ATTEMPTS,
    ) -> None:
        self.game_state = game_state
        self.snake = snake
        self.rng = rng
        self.attempts = attempts
        self.target: Address | None = None

    def is_done(self) -> str | None:
        return None

    def update(self) -> list[Action]:
        step = find_free_neighbour(self.game_state, self.snake.head, self.rng, self.attempts)
        if step is None:
            return []
        return [MoveAction(snake_name=self.snake.name, next_location=step)]

    def inspect(self) -> str:
        return f"[{self.kind.value}]"


def find_free_neighbour(game_state: GameState, address: Address, rng: random.Random, attempts: int) -> Address | None:
    for _ in range(attempts):
        candidate = random_neighbour(address, rng)
        if game_state.grid.check_bounds(candidate) and not game_state.get_cell(candidate).player:
            return candidate
    return None
