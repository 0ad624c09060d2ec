"""Runtime tunables for the snake population strategy."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


RANDOM_SEED = _env_optional_int("SNAKEHIVE_RANDOM_SEED")
LOG_LEVEL = os.getenv("SNAKEHIVE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
DIAGNOSTICS_HOST = os.getenv("SNAKEHIVE_DIAGNOSTICS_HOST", "127.0.0.1")
DIAGNOSTICS_PORT = _env_int("SNAKEHIVE_DIAGNOSTICS_PORT", 8000)

# Offsets tried when looking for a free cell next to a detached tail.
SPLIT_SEARCH_ATTEMPTS = 10
RANDOM_WALK_ATTEMPTS = 10
CLOSEST_FOOD_LIMIT = 10


@dataclass(frozen=True, slots=True)
class StrategySettings:
    save_length: int = 10
    max_saving_snakes: int = 15
    kamikaze_length: int = 3
    desired_main_snakes: int = 75
    desired_kamikaze_snakes: int = 4
    food_per_snake: float = 3.0
    idle_retreat_limit: int = 4
    split_search_attempts: int = SPLIT_SEARCH_ATTEMPTS

    @classmethod
    def from_env(cls) -> StrategySettings:
        defaults = cls()
        return cls(
            save_length=max(1, _env_int("SNAKEHIVE_SAVE_LENGTH", defaults.save_length)),
            max_saving_snakes=max(0, _env_int("SNAKEHIVE_MAX_SAVING_SNAKES", defaults.max_saving_snakes)),
            kamikaze_length=max(2, _env_int("SNAKEHIVE_KAMIKAZE_LENGTH", defaults.kamikaze_length)),
            desired_main_snakes=max(1, _env_int("SNAKEHIVE_DESIRED_MAIN_SNAKES", defaults.desired_main_snakes)),
            desired_kamikaze_snakes=max(
                0,
                _env_int("SNAKEHIVE_DESIRED_KAMIKAZE_SNAKES", defaults.desired_kamikaze_snakes),
            ),
            food_per_snake=max(0.1, _env_float("SNAKEHIVE_FOOD_PER_SNAKE", defaults.food_per_snake)),
            idle_retreat_limit=max(0, _env_int("SNAKEHIVE_IDLE_RETREAT_LIMIT", defaults.idle_retreat_limit)),
            split_search_attempts=max(
                1,
                _env_int("SNAKEHIVE_SPLIT_SEARCH_ATTEMPTS", defaults.split_search_attempts),
            ),
        )
