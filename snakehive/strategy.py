"""Population-level orchestration of splits, sacrifices and per-snake behaviors."""

from __future__ import annotations

import logging
import random
from collections import Counter

from . import config, diagnostics
from .address import Address, to_flat
from .behaviors import (
    BehaviorKind,
    HuntEnemy,
    RandomWalk,
    ReachTarget,
    RetreatToBase,
    SnakeBehavior,
    find_free_neighbour,
)
from .config import StrategySettings
from .diagnostics import DiagnosticSink
from .models import SACRIFICE_SUFFIX, Action, Snake, SplitAction
from .state import GameState

logger = logging.getLogger(__name__)


class MainStrategy:
    def __init__(
        self,
        game_state: GameState,
        settings: StrategySettings | None = None,
        *,
        rng: random.Random | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.game_state = game_state
        self.settings = settings or StrategySettings()
        self.rng = rng or random.Random()
        self.sink: DiagnosticSink = sink or game_state.sink
        self.snake_strategies: dict[str, SnakeBehavior] = {}
        self.split_count = 0
        self.nr_of_saving_snakes = 0
        self._split_parents: set[str] = set()
        self._saved_names: set[str] = set()

    @classmethod
    def from_config(cls, game_state: GameState) -> MainStrategy:
        return cls(
            game_state,
            StrategySettings.from_env(),
            rng=random.Random(config.RANDOM_SEED),
        )

    def update(self) -> list[Action]:
        self.split_count = 0
        self._split_parents = set()
        self.clean_strategies()
        return [
            *self.execute_kamikaze_strategies(),
            *self.execute_split_strategies(),
            *self.execute_snake_strategies(),
        ]

    def inspect(self) -> str:
        lines = []
        for snake in self.game_state.snakes:
            behavior = self.snake_strategies.get(snake.name)
            described = behavior.inspect() if behavior is not None else None
            lines.append(f"[{snake.name}:{snake.length}] head={to_flat(snake.head)} behavior={described}")
        return "\n".join(lines)

    def describe(self) -> dict:
        kinds = Counter(behavior.kind.value for behavior in self.snake_strategies.values())
        return {
            "player": self.game_state.player_name,
            "running": self.game_state.running,
            "snakes": len(self.game_state.snakes),
            "sacrificialSnakes": sum(1 for snake in self.game_state.snakes if snake.is_sacrificial),
            "savedSnakes": self.game_state.saved_snakes,
            "savingSnakes": self.nr_of_saving_snakes,
            "foods": len(self.game_state.food_manager),
            "enemyCellCounts": dict(self.game_state.enemy_cell_counts),
            "behaviors": dict(sorted(kinds.items())),
        }

    def clean_strategies(self) -> None:
        alive = {snake.name for snake in self.game_state.snakes}
        for name, behavior in list(self.snake_strategies.items()):
            if name in alive:
                continue
            if behavior.kind is BehaviorKind.RETREAT_TO_BASE:
                self._finish_retreat(name)
            del self.snake_strategies[name]
            self.sink.emit(diagnostics.STRATEGY_DELETED, snake=name)
        # Retired snakes are gone for good; only live names need the once-only guard.
        self._saved_names &= alive

    def split_snake(self, snake: Snake, amount: int, kamikaze: bool) -> SplitAction | None:
        kid = snake.get_kid(amount)
        next_location = find_free_neighbour(
            self.game_state,
            kid.head,
            self.rng,
            self.settings.split_search_attempts,
        )
        if next_location is None:
            return None
        return SplitAction(
            old_snake_name=snake.name,
            new_snake_name=kid.name + (SACRIFICE_SUFFIX if kamikaze else ""),
            snake_segment=kid.length,
            next_location=next_location,
        )

    def execute_kamikaze_strategies(self) -> list[Action]:
        actions: list[Action] = []
        snakes = self.game_state.snakes
        kamikaze_count = sum(1 for snake in snakes if snake.is_sacrificial)
        limit = min(self.settings.desired_kamikaze_snakes, self.game_state.enemy_cell_count)

        for snake in list(snakes):
            if kamikaze_count + self.split_count >= limit:
                break
            if snake.length > 1 and snake.length >= self.settings.kamikaze_length:
                action = self._split_once(snake, kamikaze=True)
                if action is not None:
                    actions.append(action)
        return actions

    def execute_split_strategies(self) -> list[Action]:
        actions: list[Action] = []
        snakes = self.game_state.snakes
        food_count = len(self.game_state.food_manager)
        food_cap = food_count / self.settings.food_per_snake

        for snake in list(snakes):
            planned = len(snakes) + self.split_count
            if planned >= min(self.settings.desired_main_snakes, food_count):
                break
            # Only split while there is enough food left to feed the new snake.
            if planned >= food_cap:
                break
            if snake.length > 1:
                action = self._split_once(snake, kamikaze=False)
                if action is not None:
                    actions.append(action)
        return actions

    def _split_once(self, snake: Snake, kamikaze: bool) -> SplitAction | None:
        if snake.name in self._split_parents:
            return None
        action = self.split_snake(snake, 1, kamikaze)
        if action is None:
            snake.log("no room to split")
            return None
        self.split_count += 1
        self._split_parents.add(snake.name)
        self.sink.emit(
            diagnostics.SPLIT,
            snake=snake.name,
            kid=action.new_snake_name,
            kamikaze=kamikaze,
        )
        return action

    def execute_snake_strategies(self) -> list[Action]:
        actions: list[Action] = []
        for snake in list(self.game_state.snakes):
            behavior = self.snake_strategies.get(snake.name)
            if behavior is not None and behavior.kind is BehaviorKind.RANDOM_WALK:
                # Wandering is only a filler; look for real work again every tick.
                behavior = None

            if behavior is not None:
                done_reason = behavior.is_done()
                if done_reason:
                    self.sink.emit(
                        diagnostics.TARGET_DONE,
                        snake=snake.name,
                        reason=done_reason,
                        was=behavior.inspect(),
                    )
                    if behavior.kind is BehaviorKind.RETREAT_TO_BASE:
                        self._finish_retreat(snake.name)
                    behavior = None

            if behavior is None and snake.is_sacrificial:
                behavior = self._assign(snake, HuntEnemy(self.game_state, snake, self.rng))

            if behavior is None:
                food = self._closest_free_food(snake)
                if food is not None:
                    behavior = self._assign(snake, ReachTarget(self.game_state, snake, food, self.rng))

            if (
                behavior is not None
                and behavior.kind is not BehaviorKind.RETREAT_TO_BASE
                and self.nr_of_saving_snakes < self.settings.max_saving_snakes
                and snake.length > self.settings.save_length
            ):
                snake.log("snake too long, saving")
                behavior = self._start_retreat(snake)

            if behavior is None:
                if self.nr_of_saving_snakes < self.settings.idle_retreat_limit:
                    snake.log("no work left, saving snake")
                    behavior = self._start_retreat(snake)
                else:
                    snake.log("no work left, already saving too many snakes")

            if behavior is None:
                # Move out of the way so idle snakes do not block the others.
                behavior = self._assign(snake, RandomWalk(self.game_state, snake, self.rng))

            self.snake_strategies[snake.name] = behavior
            if behavior.kind is not BehaviorKind.HUNT_ENEMY:
                snake.target = None
            actions.extend(behavior.update())
        return actions

    def _closest_free_food(self, snake: Snake) -> Address | None:
        locked = {
            to_flat(behavior.target)
            for name, behavior in self.snake_strategies.items()
            if name != snake.name and behavior.kind is BehaviorKind.REACH_TARGET and behavior.target is not None
        }
        # The home address is excluded so snakes never chase stale food at our own spawn.
        closest = self.game_state.food_manager.get_closest(
            snake.head,
            self.game_state.start_address,
            limit=1,
            skip=locked,
        )
        return closest[0].address if closest else None

    def _assign(self, snake: Snake, behavior: SnakeBehavior) -> SnakeBehavior:
        self.sink.emit(diagnostics.ASSIGNED, snake=snake.name, behavior=behavior.inspect())
        return behavior

    def _start_retreat(self, snake: Snake) -> SnakeBehavior:
        self.nr_of_saving_snakes += 1
        return self._assign(snake, RetreatToBase(self.game_state, snake, self.rng))

    def _finish_retreat(self, snake_name: str) -> None:
        self.nr_of_saving_snakes = max(0, self.nr_of_saving_snakes - 1)
        if snake_name in self._saved_names:
            return
        self._saved_names.add(snake_name)
        self.game_state.saved_snake()
        self.sink.emit(diagnostics.SAVED_SNAKE, snake=snake_name)
        logger.info("Saved snake %s (total saved: %d)", snake_name, self.game_state.saved_snakes)
