from __future__ import annotations

from snakehive.messages import CellUpdate, UpdateMessage
from snakehive.state import GameState


def owned(address, player: str, food: int = 0) -> CellUpdate:
    return CellUpdate(address=tuple(address), food_value=food, player=player)


def food(address) -> CellUpdate:
    return CellUpdate(address=tuple(address), food_value=1)


def tick(state: GameState, *cells: CellUpdate, removed: tuple[str, ...] = ()) -> None:
    state.update(UpdateMessage(updated_cells=tuple(cells), removed_snakes=frozenset(removed)))
