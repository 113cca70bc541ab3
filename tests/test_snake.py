import random

import pytest

from retroarcade.snake import (
    FOOD_X_RANGE,
    FOOD_Y_RANGE,
    START_BODY,
    Direction,
    SnakeGame,
)


class _FixedRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.values.pop(0)


def _game():
    return SnakeGame(random.Random(0))


def test_initial_state():
    game = _game()
    assert game.body == list(START_BODY)
    assert game.direction is Direction.RIGHT
    assert game.score == 0
    assert game.is_alive()


def test_auto_move_shifts_body():
    game = _game()
    before = list(game.body)
    game.auto_move()
    assert game.head == (before[0][0] + 1, before[0][1])
    assert game.body[1:] == before[:-1]
    assert len(game.body) == len(before)


def test_key_up_turns_up():
    game = _game()
    x, y = game.head
    game.handle_key("w")
    assert game.direction is Direction.UP
    assert game.head == (x, y - 1)


def test_reverse_key_falls_through_to_next():
    game = _game()
    x, y = game.head
    game.handle_key("a")
    assert game.direction is Direction.RIGHT
    assert game.head == (x + 1, y)


def test_down_while_up_turns_left():
    game = _game()
    game.handle_key("w")
    x, y = game.head
    game.handle_key("s")
    assert game.direction is Direction.LEFT
    assert game.head == (x - 1, y)


def test_up_while_down_keeps_down():
    game = _game()
    game.handle_key("s")
    x, y = game.head
    game.handle_key("w")
    assert game.direction is Direction.DOWN
    assert game.head == (x, y + 1)


def test_right_while_left_stalls_and_collides():
    game = _game()
    game.handle_key("w")
    game.handle_key("a")
    head = game.head
    game.handle_key("d")
    assert game.head == head
    assert game.direction is Direction.LEFT
    assert not game.is_alive()


@pytest.mark.parametrize("key", ["x", " ", "q"])
def test_unknown_key_collides_with_body(key):
    game = _game()
    head = game.head
    game.handle_key(key)
    assert game.head == head
    assert not game.is_alive()


def test_hits_top_wall():
    game = _game()
    game.handle_key("w")
    while game.is_alive():
        game.auto_move()
    assert game.head[1] == 1


def test_hits_right_wall():
    game = _game()
    while game.is_alive():
        game.auto_move()
    assert game.head[0] == 40


def test_spawn_food_uses_source_ranges():
    rng = _FixedRng([5, 6])
    game = SnakeGame(rng)
    assert game.spawn_food() == (5, 6)
    assert rng.calls == [FOOD_X_RANGE, FOOD_Y_RANGE]
    assert game.food == (5, 6)


@pytest.mark.parametrize("seed", range(30))
def test_spawn_food_within_bounds(seed):
    game = SnakeGame(random.Random(seed))
    fx, fy = game.spawn_food()
    assert FOOD_X_RANGE[0] <= fx < FOOD_X_RANGE[1]
    assert FOOD_Y_RANGE[0] <= fy < FOOD_Y_RANGE[1]


def test_food_visibility_flag():
    game = SnakeGame(_FixedRng([9, 7]))
    game.spawn_food()
    assert game.food_visible is False
    game = SnakeGame(_FixedRng([20, 15]))
    game.spawn_food()
    assert game.food_visible is True


def test_ate_food_only_on_head():
    game = _game()
    game.food = game.body[1]
    assert not game.ate_food()
    game.food = game.head
    assert game.ate_food()


def test_grow_without_food_does_nothing():
    game = _game()
    game.food = (30, 15)
    before = list(game.body)
    game.grow()
    assert game.body == before


def test_check_food_grows_and_scores():
    game = _game()
    x, y = game.head
    game.food = (x + 1, y)
    game.auto_move()
    before = list(game.body)
    assert game.check_food() is True
    assert game.score == 1
    assert len(game.body) == len(before) + 1
    assert game.body[-1] == before[-1]
    assert game.head == (before[0][0] + 1, before[0][1])
    assert game.food is not None


def test_check_food_miss():
    game = _game()
    game.food = (30, 15)
    assert game.check_food() is False
    assert game.score == 0