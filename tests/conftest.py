import random
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from snakehive.diagnostics import RecordingSink  # noqa: E402
from snakehive.state import GameState  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def game_state(sink: RecordingSink) -> GameState:
    return GameState(dims=[20, 20], start_address=(0, 0), player_name="me", sink=sink)
