import random

import pytest

from snakegrid.game import GRID_HEIGHT, GRID_WIDTH, Game, ScoreStore, Speed
from snakegrid.snake import Direction


@pytest.fixture
def store(tmp_path):
    return ScoreStore(tmp_path / "save.txt")


@pytest.fixture
def game(store):
    return Game(store, random.Random(0))


def _run_until_over(game, limit=200):
    for _ in range(limit):
        game.tick()
        if game.game_over:
            return
    raise AssertionError("game did not end")


@pytest.mark.parametrize(
    "speed, interval",
    [(Speed.NORMAL, 150), (Speed.ONE_AND_HALF, 100), (Speed.DOUBLE, 75)],
)
def test_speed_intervals(game, speed, interval):
    game.start()
    game.set_speed(speed)
    assert game.speed is speed
    assert game.interval == interval


def test_grid_dimensions(game):
    game.start()
    game.food.position = (0, 0)
    game.handle_key("Down")
    _run_until_over(game)
    assert game.snake.head == (5, GRID_HEIGHT)
    assert game.snake.head == (5, 30)
    assert GRID_WIDTH == 30


def test_store_missing_file_loads_zero(store):
    assert store.load() == 0


def test_store_round_trip(store):
    store.save(17)
    assert store.load() == 17


def test_store_garbage_loads_zero(store):
    store.path.write_text("not a number", encoding="utf-8")
    assert store.load() == 0


def test_initial_state(store):
    store.save(9)
    game = Game(store, random.Random(0))
    assert game.game_over
    assert not game.running
    assert game.interval == 150
    assert game.high_score == 9
    assert game.starts == 0


def test_start_begins_game(game):
    game.start()
    assert not game.game_over
    assert game.running
    assert game.pause_enabled
    assert game.starts == 1
    assert game.snake.body == [(5, 5)]
    assert game.food.position not in game.snake.body


def test_start_ignored_while_playing(game):
    game.start()
    game.tick()
    body = list(game.snake.body)
    game.start()
    assert game.snake.body == body
    assert game.starts == 1


def test_tick_moves_right(game):
    game.start()
    game.food.position = (0, 0)
    x, y = game.snake.head
    game.tick()
    assert game.snake.head == (x + 1, y)
    assert not game.start_enabled


def test_eating_food(game):
    game.start()
    x, y = game.snake.head
    game.food.position = (x + 1, y)
    game.tick()
    assert game.score == 1
    assert len(game.snake.body) == 2
    assert game.food.position not in game.snake.body


def test_wall_ends_game(game):
    game.start()
    game.food.position = (0, 0)
    _run_until_over(game)
    assert game.snake.head == (GRID_WIDTH, 5)
    assert not game.running
    assert game.start_enabled
    assert not game.pause_enabled


def test_high_score_saved(game, store):
    game.start()
    x, y = game.snake.head
    game.food.position = (x + 1, y)
    game.tick()
    game.food.position = (0, 0)
    _run_until_over(game)
    assert game.high_score == 1
    assert store.load() == 1
    assert game.score == 0


def test_lower_score_keeps_record(store):
    store.save(10)
    game = Game(store, random.Random(0))
    game.start()
    game.food.position = (0, 0)
    _run_until_over(game)
    assert game.high_score == 10
    assert store.load() == 10


def test_check_collision_out_of_bounds(game):
    game.start()
    game.snake.body = [(-1, 0)]
    assert game.check_collision()
    assert game.game_over
    assert not game.running


def test_check_collision_inside(game):
    game.start()
    assert not game.check_collision()
    assert not game.game_over


def test_space_toggles_pause(game):
    game.start()
    game.handle_key("space")
    assert game.paused and not game.running
    game.handle_key("space")
    assert not game.paused and game.running


def test_one_turn_per_tick(game):
    game.start()
    game.food.position = (0, 0)
    game.handle_key("Up")
    game.handle_key("s")
    assert game.snake.direction is Direction.UP
    x, y = game.snake.head
    game.tick()
    assert game.snake.head == (x, y - 1)
    game.handle_key("a")
    assert game.snake.direction is Direction.LEFT


def test_reverse_key_ignored(game):
    game.start()
    game.handle_key("left")
    assert game.snake.direction is Direction.RIGHT


def test_r_restarts_after_game_over(game):
    game.start()
    game.food.position = (0, 0)
    _run_until_over(game)
    game.handle_key("R")
    assert not game.game_over
    assert game.running
    assert game.snake.body == [(5, 5)]
    assert not game.pause_enabled
    assert game.starts == 1


def test_r_ignored_while_playing(game):
    game.start()
    game.tick()
    head = game.snake.head
    game.handle_key("r")
    assert game.snake.head == head


def test_set_speed_while_playing(game):
    game.start()
    game.set_speed(Speed.DOUBLE)
    assert game.running
    assert game.interval == 75
    game.set_speed(Speed.ONE_AND_HALF)
    assert game.interval == 100


def test_set_speed_when_over_keeps_timer_stopped(game):
    game.set_speed(Speed.DOUBLE)
    assert game.speed is Speed.DOUBLE
    assert not game.running
    game.start()
    assert game.interval == 75


def test_restart_uses_normal_interval(game):
    game.set_speed(Speed.DOUBLE)
    game.start()
    game.tick()
    game.restart()
    assert game.interval == 150
    assert game.speed is Speed.DOUBLE
    assert game.snake.body == [(5, 5)]
    assert game.score == 0
    assert game.starts == 2


def test_toggle_pause(game):
    game.start()
    game.toggle_pause()
    assert game.paused and not game.running
    game.toggle_pause()
    assert not game.paused and game.running