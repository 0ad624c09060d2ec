"""Per-snake behavior state machine."""

from .hunt import HuntEnemy
from .target import ReachTarget, RetreatToBase
from .types import BehaviorKind, SnakeBehavior
from .walk import RandomWalk, find_free_neighbour

__all__ = [
    "BehaviorKind",
    "HuntEnemy",
    "RandomWalk",
    "ReachTarget",
    "RetreatToBase",
    "SnakeBehavior",
    "find_free_neighbour",
]
