import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from retroarcade import snake_app
from retroarcade.snake import SnakeGame


def _center(x, y):
    half = snake_app.BLOCK // 2
    return (
        snake_app.X_ORIGIN + snake_app.BLOCK * x + half,
        snake_app.Y_ORIGIN + snake_app.BLOCK * y + half,
    )


def _color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def surface():
    return pygame.Surface(snake_app.WINDOW_SIZE)


def test_head_drawn_in_head_color(surface):
    game = SnakeGame(random.Random(1))
    snake_app.draw_snake_game(surface, game)
    assert _color_at(surface, _center(*game.head)) == snake_app.HEAD_COLOR


def test_body_drawn_in_body_color(surface):
    game = SnakeGame(random.Random(1))
    snake_app.draw_snake_game(surface, game)
    for cell in game.body[1:]:
        assert _color_at(surface, _center(*cell)) == snake_app.BODY_COLOR


def test_food_drawn_in_food_color(surface):
    game = SnakeGame(random.Random(1))
    game.food = (20, 15)
    snake_app.draw_snake_game(surface, game)
    assert _color_at(surface, _center(20, 15)) == snake_app.FOOD_COLOR


def test_empty_cell_left_unfilled(surface):
    game = SnakeGame(random.Random(1))
    snake_app.draw_snake_game(surface, game)
    assert _color_at(surface, _center(30, 15)) == (0, 0, 0)


def test_snake_follows_moves(surface):
    game = SnakeGame(random.Random(1))
    game.auto_move()
    snake_app.draw_snake_game(surface, game)
    assert _color_at(surface, _center(*game.head)) == snake_app.HEAD_COLOR
    assert _color_at(surface, _center(7, 7)) == (0, 0, 0)


def test_main_without_frames_scores_nothing(tmp_path):
    args = ["--skip-intro", "--frames", "0", "--tick-ms", "0",
            "--seed", "3", "--assets", str(tmp_path)]
    assert snake_app.main(args) == 0


def test_main_runs_a_few_frames(tmp_path):
    args = ["--skip-intro", "--frames", "3", "--tick-ms", "0",
            "--seed", "3", "--assets", str(tmp_path)]
    score = snake_app.main(args)
    assert 0 <= score <= 3


def test_main_rejects_bad_frame_count():
    with pytest.raises(SystemExit):
        snake_app.main(["--frames", "many"])