"""Sparse N-dimensional grid of cells keyed by flattened address."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from .address import Address, as_address, to_flat
from .models import Cell


class Grid:
    def __init__(self, dimensions: Sequence[int]) -> None:
        dims = tuple(int(d) for d in dimensions)
        if not dims or any(d <= 0 for d in dims):
            raise ValueError(f"Grid dimensions must be positive, got {list(dimensions)}")
        self.dimensions = dims
        self.cells: dict[str, Cell] = {}

    def get_cell(self, address: Sequence[int]) -> Cell:
        cell = self.cells.get(to_flat(address))
        if cell is None:
            return Cell(as_address(address))
        return cell

    def set_cell(self, address: Sequence[int], cell: Cell) -> None:
        self.cells[to_flat(address)] = cell

    def clear_own_marks(self) -> None:
        for cell in self.cells.values():
            cell.is_ours = False

    def check_bounds(self, address: Sequence[int]) -> bool:
        if len(address) != len(self.dimensions):
            raise ValueError(f"Address {list(address)} does not match grid dimensionality {len(self.dimensions)}")
        return all(0 <= value < size for value, size in zip(address, self.dimensions))

    def is_cell_available(self, address: Sequence[int]) -> bool:
        if not self.check_bounds(address):
            return False
        cell = self.cells.get(to_flat(address))
        if cell is None:
            return True
        return not cell.player and not cell.is_marked_as_ours()

    def filter_available(
        self,
        addresses: Iterable[Address],
        reserved: Collection[str] | None = None,
    ) -> list[Address]:
        """Keep the free addresses in input order, dropping any whose flat key is reserved."""
        available: list[Address] = []
        for address in addresses:
            if reserved and to_flat(address) in reserved:
                continue
            if self.is_cell_available(address):
                available.append(address)
        return available

    def cells_owned_by(self, player: str) -> list[Cell]:
        return [cell for cell in self.cells.values() if cell.player == player]
