"""Sacrificial hunting: chase the cells of the largest enemy player."""

from __future__ import annotations

import random
from collections.abc import Collection

from .. import diagnostics
from ..address import Address, distance, to_flat
from ..models import Action, Snake
from ..state import GameState
from .target import ReachTarget
from .types import BehaviorKind


class HuntEnemy(ReachTarget):
    kind = BehaviorKind.HUNT_ENEMY

    def __init__(self, game_state: GameState, snake: Snake, rng: random.Random) -> None:
        super().__init__(game_state, snake, None, rng)
        self.target_player_name: str | None = None

    @property
    def has_target(self) -> bool:
        return self.target is not None

    def is_done(self) -> str | None:
        # Hunters are never retired by their own accord; a lost target is re-picked next tick.
        return None

    def _pick_target_player(self) -> str | None:
        counts = self.game_state.enemy_cell_counts
        ranked = sorted(
            (item for item in counts.items() if item[1] > 0 and item[0] != self.game_state.player_name),
            key=lambda item: (-item[1], item[0]),
        )
        return ranked[0][0] if ranked else None

    def _claimed_by_other_hunters(self) -> set[str]:
        return {
            to_flat(snake.target)
            for snake in self.game_state.snakes
            if snake is not self.snake and snake.target is not None
        }

    def _pick_target(self) -> None:
        target_name = self.target_player_name
        if not target_name or target_name == self.game_state.player_name:
            self.target_player_name = None
            self.target = None
            self.snake.log("no target available")
            return

        claimed = self._claimed_by_other_hunters()
        head = self.snake.head
        candidates = [
            cell.address
            for cell in self.game_state.grid.cells_owned_by(target_name)
            if to_flat(cell.address) not in claimed
        ]
        self.target = min(candidates, key=lambda addr: distance(addr, head)) if candidates else None
        if self.target is not None:
            self.game_state.sink.emit(
                diagnostics.TARGET_SELECTED,
                snake=self.snake.name,
                player=target_name,
                target=to_flat(self.target),
            )

    def update(self) -> list[Action]:
        if self.target is not None:
            if self.game_state.get_cell(self.target).player != self.target_player_name:
                self.snake.log("target lost, finding new one")
                self.target = None
            else:
                # Keep tracking the closest cell of the same player.
                self._pick_target()

        if self.target is None:
            if not self.target_player_name:
                self.target_player_name = self._pick_target_player()
            self._pick_target()

        if self.target is None:
            self.target_player_name = None
            self.snake.target = None
            self.game_state.sink.emit(diagnostics.NO_TARGET, snake=self.snake.name)
            return []

        self.snake.target = self.target
        return super().update()

    def determine_next_step(self, reserved: Collection[str] | None = None) -> Address | None:
        # Targets are enemy-owned and already unavailable; this only bites once a target cell is vacated.
        return super().determine_next_step(reserved or self._claimed_by_other_hunters())

    def inspect(self) -> str:
        target = to_flat(self.target) if self.target is not None else "-"
        return f"[{self.kind.value} target={target} enemy={self.target_player_name}]"
