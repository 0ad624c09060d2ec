"""N-dimensional address helpers and local step generators."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

Address = tuple[int, ...]


def as_address(values: Sequence[int]) -> Address:
    return tuple(int(v) for v in values)


def to_flat(address: Sequence[int]) -> str:
    return ",".join(str(v) for v in address)


def same_address(a: Sequence[int], b: Sequence[int]) -> bool:
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def distance(a: Sequence[int], b: Sequence[int]) -> int:
    return sum(abs(x - y) for x, y in zip(a, b))


def _shifted(address: Sequence[int], axis: int, delta: int) -> Address:
    moved = list(address)
    moved[axis] += delta
    return tuple(moved)


def next_steps(src: Sequence[int], dst: Sequence[int]) -> list[Address]:
    """Single-axis unit moves from ``src`` that bring it closer to ``dst``."""
    steps: list[Address] = []
    for axis, (here, there) in enumerate(zip(src, dst)):
        if there > here:
            steps.append(_shifted(src, axis, 1))
        elif there < here:
            steps.append(_shifted(src, axis, -1))
    return steps


def all_steps(src: Sequence[int], dst: Sequence[int] | None = None) -> list[Address]:
    # dst is accepted for symmetry with next_steps; every neighbour qualifies.
    steps: list[Address] = []
    for axis in range(len(src)):
        steps.append(_shifted(src, axis, 1))
        steps.append(_shifted(src, axis, -1))
    return steps


def random_neighbour(address: Sequence[int], rng: random.Random) -> Address:
    axis = rng.randrange(len(address))
    delta = 1 if rng.randrange(2) > 0 else -1
    return _shifted(address, axis, delta)


def pick_random(items: Sequence[T], rng: random.Random) -> T | None:
    if not items:
        return None
    return items[rng.randrange(len(items))]
