"""Authoritative local projection of the shared grid and our snake roster."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from . import diagnostics
from .address import Address, as_address, to_flat
from .diagnostics import DiagnosticSink, LoggingSink
from .food import FoodManager
from .grid import Grid
from .messages import CellUpdate, StateMessage, UpdateMessage
from .models import Action, Cell, MoveAction, Snake, SplitAction


class GameState:
    def __init__(
        self,
        dims: Sequence[int],
        start_address: Sequence[int],
        player_name: str,
        player_identifier: str | None = None,
        running: bool = False,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.grid = Grid(dims)
        self.start_address: Address = as_address(start_address)
        self.player_name = player_name
        self.player_identifier = player_identifier
        self.running = running
        self.snakes: list[Snake] = [Snake(player_name, [self.start_address])]
        self.food_manager = FoodManager()
        self.saved_snakes = 0
        self.enemy_cell_counts: dict[str, int] = {}
        self.enemy_heads: dict[str, list[Address]] = {}
        self.sink: DiagnosticSink = sink or LoggingSink()

    def run(self) -> None:
        self.running = True

    def get_cell(self, address: Sequence[int]) -> Cell:
        return self.grid.get_cell(address)

    def get_snake(self, snake_name: str) -> Snake | None:
        for snake in self.snakes:
            if snake.name == snake_name:
                return snake
        return None

    def saved_snake(self) -> None:
        self.saved_snakes += 1

    @property
    def enemy_cell_count(self) -> int:
        return sum(self.enemy_cell_counts.values())

    def set_state(self, message: StateMessage) -> None:
        for updated in message.updated_cells:
            self._apply_cell(updated)

    def update(self, message: UpdateMessage) -> None:
        self.enemy_heads = {}
        self.grid.clear_own_marks()
        for updated in message.updated_cells:
            cell = self._apply_cell(updated)
            if cell.player:
                self.enemy_heads.setdefault(cell.player, []).append(cell.address)

        if message.removed_snakes:
            before = len(self.snakes)
            self.snakes = [
                snake for snake in self.snakes if f"{self.player_name}:{snake.name}" not in message.removed_snakes
            ]
            self.sink.emit(diagnostics.SNAKE_REMOVED, before=before, after=len(self.snakes))

        self._recount_enemies()

    def _apply_cell(self, updated: CellUpdate) -> Cell:
        has_food = updated.food_value > 0
        cell = Cell(updated.address, has_food=has_food, player=updated.player or None)
        self.grid.set_cell(updated.address, cell)
        if has_food:
            self.food_manager.add_food(updated.address)
        else:
            self.food_manager.remove_food(updated.address)
        return cell

    def _recount_enemies(self) -> None:
        counts: dict[str, int] = {}
        for cell in self.grid.cells.values():
            owner = cell.player
            if not owner or owner == self.player_name:
                continue
            counts[owner] = counts.get(owner, 0) + 1
        self.enemy_cell_counts = counts
        self.sink.emit(diagnostics.ENEMY_SCAN, enemies=len(counts), cells=sum(counts.values()))

    def validate_snakes(self) -> list[str]:
        problems: list[str] = []
        self.grid.clear_own_marks()
        for snake in self.snakes:
            for address in snake.segments:
                cell = self.grid.get_cell(address)
                cell.mark_as_ours()
                if cell.player != self.player_name:
                    problems.append(
                        f"[{snake.name}] contains a cell ({to_flat(cell.address)}) that is not us but {cell.player}."
                    )
        for cell in self.grid.cells.values():
            ours = cell.player == self.player_name
            if ours == cell.is_marked_as_ours():
                continue
            if cell.is_marked_as_ours():
                problems.append(f"Cell {to_flat(cell.address)} is marked as ours but owned by {cell.player}.")
            else:
                problems.append(f"Cell {to_flat(cell.address)} is not marked as ours but owned by us.")
        return problems

    def apply_actions(self, actions: Iterable[Action]) -> None:
        for action in actions:
            if isinstance(action, MoveAction):
                grow = self.grid.get_cell(action.next_location).has_food
                snake = self.get_snake(action.snake_name)
                if snake is not None:
                    snake.apply_move(action.next_location, grow)
            elif isinstance(action, SplitAction):
                grow_kid = self.grid.get_cell(action.next_location).has_food
                parent = self.get_snake(action.old_snake_name)
                kid = parent.apply_split(action, grow_kid) if parent is not None else None
                if kid is not None:
                    self.snakes.append(kid)
