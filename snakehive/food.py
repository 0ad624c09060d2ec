"""Food-location index answering closest-first queries."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from dataclasses import dataclass

import numpy as np

from . import config
from .address import Address, as_address, to_flat


@dataclass(slots=True, frozen=True)
class FoodState:
    address: Address
    distance: int


class FoodManager:
    def __init__(self) -> None:
        self._foods: dict[str, Address] = {}

    def __len__(self) -> int:
        return len(self._foods)

    def __contains__(self, address: Sequence[int]) -> bool:
        return to_flat(address) in self._foods

    @property
    def foods(self) -> tuple[Address, ...]:
        return tuple(self._foods.values())

    def add_food(self, address: Sequence[int]) -> None:
        self._foods[to_flat(address)] = as_address(address)

    def remove_food(self, address: Sequence[int]) -> None:
        self._foods.pop(to_flat(address), None)

    def get_closest(
        self,
        point: Sequence[int],
        exclude: Sequence[int] | None = None,
        limit: int = config.CLOSEST_FOOD_LIMIT,
        skip: Collection[str] | None = None,
    ) -> list[FoodState]:
        """Closest foods first; ``exclude`` and any flat key in ``skip`` are dropped before ``limit`` applies."""
        excluded_key = to_flat(exclude) if exclude is not None else None
        skipped = skip or ()
        candidates = [addr for key, addr in self._foods.items() if key != excluded_key and key not in skipped]
        if not candidates or limit <= 0:
            return []

        coords = np.asarray(candidates, dtype=np.int64)
        origin = np.asarray(point, dtype=np.int64)
        distances = np.abs(coords - origin).sum(axis=1)
        # Stable so equally distant foods keep insertion order.
        order = np.argsort(distances, kind="stable")[:limit]
        return [FoodState(address=candidates[i], distance=int(distances[i])) for i in order]
