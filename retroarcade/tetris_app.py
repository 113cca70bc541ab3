"""Window, drawing and main loop for the tetris game."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from .tetris import BOARD_HEIGHT, BOARD_WIDTH, PIECE_COLORS, SHAPES, TetrisGame

BLOCK = 25
X_ORIGIN = 20
Y_ORIGIN = 20
WINDOW_SIZE = (900, 800)
TICK_MS = 300
PREVIEW_BLOCK = 40
PREVIEW_X = X_ORIGIN + 680
PREVIEW_Y = Y_ORIGIN + 100
PREVIEW_BOX_X = X_ORIGIN + BLOCK * BOARD_WIDTH + 50
PREVIEW_BOX_SIZE = 300

LINE_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
RULES_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)
BACKGROUND_COLOR = (40, 20, 70)


def piece_color(kind: int) -> pygame.Color:
    return pygame.Color(PIECE_COLORS[kind])


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _text(surface, text, pos, size, color=TEXT_COLOR) -> None:
    surface.blit(_font(size).render(text, True, color), pos)


def _draw_cell(surface, x: int, y: int, color) -> None:
    center = (X_ORIGIN + x * BLOCK + BLOCK // 2, Y_ORIGIN + y * BLOCK + BLOCK // 2)
    pygame.draw.circle(surface, color, center, BLOCK // 2)
    pygame.draw.circle(surface, LINE_COLOR, center, BLOCK // 2, 3)


def draw_tetris_game(surface, game: TetrisGame) -> None:
    """Draw the board, landed cells, next piece, score and falling piece."""
    board_rect = pygame.Rect(
        X_ORIGIN,
        Y_ORIGIN + 20,
        BLOCK * BOARD_WIDTH,
        BLOCK * BOARD_HEIGHT - 20,
    )
    pygame.draw.rect(surface, LINE_COLOR, board_rect, 1)

    for x, column in enumerate(game.board.cells):
        for y, value in enumerate(column):
            if value > 0:
                _draw_cell(surface, x, y, piece_color(value - 1))

    preview_box = pygame.Rect(PREVIEW_BOX_X, Y_ORIGIN, PREVIEW_BOX_SIZE, PREVIEW_BOX_SIZE)
    pygame.draw.rect(surface, LINE_COLOR, preview_box, 1)
    next_color = piece_color(game.next_kind)
    for dx, dy in SHAPES[game.next_kind][game.next_rotation]:
        center = (
            PREVIEW_X + dx * PREVIEW_BLOCK + BLOCK // 2,
            PREVIEW_Y + dy * PREVIEW_BLOCK + BLOCK // 2,
        )
        pygame.draw.circle(surface, next_color, center, PREVIEW_BLOCK // 2)
        pygame.draw.circle(surface, LINE_COLOR, center, PREVIEW_BLOCK // 2, 1)

    _text(surface, "Score:", (550, 350), 60)
    _text(surface, str(game.score), (600, 450), 60)

    current = piece_color(game.kind)
    for x, y in game.piece_cells():
        _draw_cell(surface, x, y, current)


def _load_image(assets: Path, name: str) -> pygame.Surface | None:
    path = assets / name
    if not path.is_file():
        return None
    try:
        return pygame.transform.scale(pygame.image.load(str(path)), WINDOW_SIZE)
    except pygame.error:
        return None


def _mixer_ready() -> bool:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
    except pygame.error:
        return False
    return True


def _play_music(assets: Path, name: str) -> None:
    path = assets / name
    if not path.is_file() or not _mixer_ready():
        return
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _load_sound(assets: Path, name: str):
    path = assets / name
    if not path.is_file() or not _mixer_ready():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except pygame.error:
        return None


def _paint_backdrop(surface, image) -> None:
    if image is None:
        surface.fill(BACKGROUND_COLOR)
    else:
        surface.blit(image, (0, 0))


def _wait_for_key() -> bool:
    """Block until a key is pressed; False if the window is closed instead."""
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return True


def _poll_key() -> tuple[bool, str | None]:
    key = None
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return True, None
        if event.type == pygame.KEYDOWN and event.unicode and key is None:
            key = event.unicode.lower()
    return False, key


def _intro(screen, assets: Path) -> bool:
    _paint_backdrop(screen, _load_image(assets, "bk2.jpg"))
    _text(screen, "TETRIS", (200, 200), 100)
    _text(screen, "start game", (300, 450), 70)
    pygame.display.flip()
    _play_music(assets, "bgm/m.mp3")
    if not _wait_for_key():
        return False
    _text(screen, "Rules", (330, 550), 50, RULES_COLOR)
    _text(screen, "Steer the piece with W A S D", (200, 600), 30, RULES_COLOR)
    _text(screen, "W: rotate  A: left  S: drop  D: right", (180, 630), 30, RULES_COLOR)
    pygame.display.flip()
    return _wait_for_key()


def _ask_play_again(screen) -> bool:
    _text(screen, "GAME OVER", (250, 250), 100, GAME_OVER_COLOR)
    _text(screen, "Play again? Enter: yes  Esc: no", (150, 400), 50, GAME_OVER_COLOR)
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_y):
                return True
            if event.key in (pygame.K_ESCAPE, pygame.K_n):
                return False


def _final_screen(screen, assets: Path, score: int) -> None:
    _paint_backdrop(screen, _load_image(assets, "bk2.jpg"))
    _text(screen, "GAME OVER", (250, 250), 100, GAME_OVER_COLOR)
    _text(screen, "YOUR SCORE IS", (150, 400), 100, GAME_OVER_COLOR)
    _text(screen, str(score), (400, 500), 100, GAME_OVER_COLOR)
    pygame.display.flip()
    _wait_for_key()


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="tetris", description="Play tetris.")
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding images and music")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="pause between gravity steps")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    parser.add_argument("--skip-intro", action="store_true",
                        help="go straight to the game")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the tetris game and return the final score."""
    args = _parse_args(argv)
    game = TetrisGame(random.Random(args.seed))
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Tetris")
        if not args.skip_intro and not _intro(screen, args.assets):
            return game.score

        backdrop = _load_image(args.assets, "bk.jpg")
        ding = _load_sound(args.assets, "bgm/ding.mp3")

        def render() -> None:
            _paint_backdrop(screen, backdrop)
            draw_tetris_game(screen, game)
            pygame.display.flip()

        render()
        frame = 0
        while args.frames is None or frame < args.frames:
            frame += 1
            closed, key = _poll_key()
            if closed:
                break
            if key is not None:
                if not game.handle_key(key):
                    break
                if key == "s" and ding is not None:
                    ding.play()
            else:
                game.tick()
                pygame.time.wait(args.tick_ms)
            render()

            if game.board.is_game_over():
                if _ask_play_again(screen):
                    game.board.reset()
                    render()
                    continue
                _final_screen(screen, args.assets, game.score)
                break
        return game.score
    finally:
        pygame.quit()