from __future__ import annotations

from helpers import owned, tick

from snakehive import diagnostics
from snakehive.behaviors import BehaviorKind, HuntEnemy, RandomWalk, ReachTarget, RetreatToBase
from snakehive.models import MoveAction, Snake
from snakehive.state import GameState


def _place(state: GameState, name: str, *segments) -> Snake:
    snake = Snake(name, list(segments))
    state.snakes.append(snake)
    return snake


def test_reach_target_steps_towards_target(game_state, rng):
    snake = _place(game_state, "a", (2, 2))
    behavior = ReachTarget(game_state, snake, (4, 5), rng)

    for _ in range(20):
        (action,) = behavior.update()
        assert isinstance(action, MoveAction)
        assert action.snake_name == "a"
        assert action.next_location in {(3, 2), (2, 3)}


def test_reach_target_avoids_blocked_reducing_step(game_state, rng):
    snake = _place(game_state, "a", (2, 2))
    tick(game_state, owned((3, 2), "bob"))
    behavior = ReachTarget(game_state, snake, (4, 5), rng)

    for _ in range(10):
        assert behavior.update() == [MoveAction("a", (2, 3))]


def test_reach_target_falls_back_to_any_free_step(game_state, rng):
    snake = _place(game_state, "a", (2, 2))
    tick(game_state, owned((3, 2), "bob"))
    behavior = ReachTarget(game_state, snake, (4, 2), rng)

    (action,) = behavior.update()
    assert action.next_location in {(1, 2), (2, 3), (2, 1)}


def test_reach_target_stalls_when_boxed_in(game_state, rng):
    snake = _place(game_state, "a", (0, 0))
    tick(game_state, owned((1, 0), "bob"), owned((0, 1), "bob"))
    behavior = ReachTarget(game_state, snake, (3, 3), rng)

    assert behavior.update() == []
    assert behavior.is_done() is None


def test_reach_target_done_when_head_on_target(game_state, rng):
    snake = _place(game_state, "a", (3, 3), (3, 2))
    behavior = ReachTarget(game_state, snake, (3, 3), rng)
    assert behavior.is_done() == "target reached"
    assert behavior.kind is BehaviorKind.REACH_TARGET


def test_retreat_targets_start_address(game_state, rng):
    snake = _place(game_state, "a", (0, 2))
    behavior = RetreatToBase(game_state, snake, rng)
    assert behavior.kind is BehaviorKind.RETREAT_TO_BASE
    assert behavior.target == game_state.start_address
    assert behavior.update() == [MoveAction("a", (0, 1))]
    assert "retreat_to_base" in behavior.inspect()


def test_hunt_without_enemies_keeps_no_target_state(game_state, rng, sink):
    snake = _place(game_state, "me.1_k", (4, 4))
    behavior = HuntEnemy(game_state, snake, rng)

    assert behavior._pick_target_player() is None
    assert behavior.update() == []
    assert behavior.is_done() is None
    assert not behavior.has_target
    assert behavior.target_player_name is None
    assert snake.target is None
    assert sink.named(diagnostics.NO_TARGET)


def test_hunt_picks_largest_enemy_and_nearest_cell(game_state, rng):
    tick(
        game_state,
        owned((10, 0), "alice"),
        owned((6, 0), "bob"),
        owned((8, 0), "bob"),
        owned((9, 9), "bob"),
    )
    snake = _place(game_state, "me.1_k", (0, 0))
    behavior = HuntEnemy(game_state, snake, rng)

    (action,) = behavior.update()

    assert behavior.target_player_name == "bob"
    assert behavior.target == (6, 0)
    assert snake.target == (6, 0)
    assert action == MoveAction("me.1_k", (1, 0))


def test_hunt_tie_breaks_by_player_name(game_state, rng):
    tick(game_state, owned((5, 5), "zed"), owned((6, 6), "amy"))
    behavior = HuntEnemy(game_state, _place(game_state, "me.1_k", (0, 0)), rng)
    assert behavior._pick_target_player() == "amy"


def test_hunt_avoids_cells_targeted_by_other_hunters(game_state, rng):
    tick(game_state, owned((5, 0), "bob"), owned((7, 0), "bob"))
    other = _place(game_state, "me.1_k", (0, 1))
    other.target = (5, 0)
    snake = _place(game_state, "me.2_k", (0, 0))
    behavior = HuntEnemy(game_state, snake, rng)

    behavior.update()

    assert behavior.target == (7, 0)


def test_hunt_retargets_when_cell_changes_owner(game_state, rng):
    tick(game_state, owned((5, 0), "bob"), owned((9, 0), "bob"))
    snake = _place(game_state, "me.1_k", (0, 0))
    behavior = HuntEnemy(game_state, snake, rng)
    behavior.update()
    assert behavior.target == (5, 0)

    tick(game_state, owned((5, 0), ""))
    behavior.update()
    assert behavior.target == (9, 0)
    assert behavior.target_player_name == "bob"


def test_hunt_drops_player_once_all_cells_gone(game_state, rng):
    tick(game_state, owned((5, 0), "bob"))
    snake = _place(game_state, "me.1_k", (0, 0))
    behavior = HuntEnemy(game_state, snake, rng)
    behavior.update()

    tick(game_state, owned((5, 0), ""))
    assert behavior.update() == []
    assert behavior.target_player_name is None
    assert behavior.is_done() is None


def test_random_walk_moves_to_free_neighbour(game_state, rng):
    snake = _place(game_state, "a", (5, 5))
    behavior = RandomWalk(game_state, snake, rng)
    (action,) = behavior.update()
    assert abs(action.next_location[0] - 5) + abs(action.next_location[1] - 5) == 1
    assert behavior.is_done() is None


def test_random_walk_gives_up_without_free_cell(rng):
    state = GameState(dims=[1, 1], start_address=(0, 0), player_name="me")
    behavior = RandomWalk(state, state.snakes[0], rng)
    assert behavior.update() == []


def test_hunt_step_avoids_cells_other_hunters_target(game_state, rng):
    tick(game_state, owned((4, 4), "bob"), owned((9, 9), "bob"))
    other = _place(game_state, "me.1_k", (10, 0))
    # A vacated cell another hunter is still heading for.
    other.target = (3, 2)
    behavior = HuntEnemy(game_state, _place(game_state, "me.2_k", (2, 2)), rng)

    for _ in range(10):
        assert behavior.update() == [MoveAction("me.2_k", (2, 3))]
    assert behavior.target == (4, 4)


def test_hunt_step_falls_back_to_other_hunters_cells(game_state, rng):
    tick(game_state, owned((4, 4), "bob"), owned((9, 9), "bob"), owned((9, 8), "bob"), owned((2, 3), "alice"))
    other = _place(game_state, "me.1_k", (10, 0))
    other.target = (3, 2)
    behavior = HuntEnemy(game_state, _place(game_state, "me.2_k", (2, 2)), rng)

    assert behavior.update() == [MoveAction("me.2_k", (3, 2))]
