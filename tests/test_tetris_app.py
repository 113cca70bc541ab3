import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from retroarcade import tetris_app
from retroarcade.tetris import PIECE_COLORS, TetrisGame


def _center(x, y):
    half = tetris_app.BLOCK // 2
    return (
        tetris_app.X_ORIGIN + tetris_app.BLOCK * x + half,
        tetris_app.Y_ORIGIN + tetris_app.BLOCK * y + half,
    )


@pytest.fixture
def surface():
    return pygame.Surface(tetris_app.WINDOW_SIZE)


@pytest.fixture
def game():
    return TetrisGame(random.Random(5))


def test_piece_color_matches_palette():
    for kind, name in enumerate(PIECE_COLORS):
        assert tetris_app.piece_color(kind) == pygame.Color(name)


def test_falling_piece_drawn_in_its_color(surface, game):
    tetris_app.draw_tetris_game(surface, game)
    expected = pygame.Color(PIECE_COLORS[game.kind])
    for cell in game.piece_cells():
        assert surface.get_at(_center(*cell)) == expected


def test_landed_cells_drawn_in_kind_color(surface, game):
    game.board.land(10, 20, 3, 0)
    tetris_app.draw_tetris_game(surface, game)
    expected = pygame.Color(PIECE_COLORS[3])
    for cell in [(10, 20), (8, 20), (9, 20), (11, 20)]:
        assert surface.get_at(_center(*cell)) == expected


def test_empty_board_cell_left_unfilled(surface, game):
    tetris_app.draw_tetris_game(surface, game)
    assert tuple(surface.get_at(_center(10, 25)))[:3] == (0, 0, 0)


def test_next_piece_preview_drawn(surface, game):
    tetris_app.draw_tetris_game(surface, game)
    half = tetris_app.BLOCK // 2
    center = (tetris_app.PREVIEW_X + half, tetris_app.PREVIEW_Y + half)
    assert surface.get_at(center) == pygame.Color(PIECE_COLORS[game.next_kind])


def test_main_without_frames_scores_nothing(tmp_path):
    args = ["--skip-intro", "--frames", "0", "--tick-ms", "0",
            "--seed", "2", "--assets", str(tmp_path)]
    assert tetris_app.main(args) == 0


def test_main_runs_a_few_frames_on_empty_board(tmp_path):
    args = ["--skip-intro", "--frames", "3", "--tick-ms", "0",
            "--seed", "2", "--assets", str(tmp_path)]
    assert tetris_app.main(args) == 0


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit):
        tetris_app.main(["--seed", "abc"])