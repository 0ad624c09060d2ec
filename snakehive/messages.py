"""Decoded inbound message shapes handed over by the transport layer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .address import Address, as_address


@dataclass(slots=True, frozen=True)
class CellUpdate:
    address: Address
    food_value: int = 0
    player: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> CellUpdate:
        address = raw.get("address", raw.get("addressList", ()))
        food = raw.get("foodValue", raw.get("food_value", 0)) or 0
        return cls(address=as_address(address), food_value=int(food), player=str(raw.get("player") or ""))


@dataclass(slots=True, frozen=True)
class StateMessage:
    updated_cells: tuple[CellUpdate, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> StateMessage:
        return cls(updated_cells=_cells(raw.get("updatedCells", ())))


@dataclass(slots=True, frozen=True)
class UpdateMessage:
    updated_cells: tuple[CellUpdate, ...] = ()
    removed_snakes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> UpdateMessage:
        return cls(
            updated_cells=_cells(raw.get("updatedCells", ())),
            removed_snakes=frozenset(str(name) for name in raw.get("removedSnakes", ())),
        )


def _cells(raw_cells: Iterable[Mapping[str, Any]]) -> tuple[CellUpdate, ...]:
    return tuple(CellUpdate.from_dict(item) for item in raw_cells)
