"""Window, drawing and main loop for the snake game."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from .snake import GRID_MAX_X, GRID_MAX_Y, SnakeGame

BLOCK = 22
X_ORIGIN = 30
Y_ORIGIN = 50
WINDOW_SIZE = (1000, 700)
SCREEN_SIZE = (600, 800)
TICK_MS = 200

GRID_COLOR = (255, 255, 255)
FRAME_COLOR = (255, 255, 0)
FOOD_COLOR = (255, 255, 0)
BODY_COLOR = (255, 182, 193)
HEAD_COLOR = (255, 105, 180)
TEXT_COLOR = (255, 255, 255)
WARNING_COLOR = (255, 0, 0)
BACKGROUND_COLOR = (20, 20, 40)


def _cell_rect(x: int, y: int) -> pygame.Rect:
    return pygame.Rect(X_ORIGIN + BLOCK * x, Y_ORIGIN + BLOCK * y, BLOCK, BLOCK)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _text(surface, text, pos, size, color=TEXT_COLOR) -> None:
    surface.blit(_font(size).render(text, True, color), pos)


def draw_snake_game(surface, game: SnakeGame) -> None:
    """Draw the grid, wall, score, food and snake onto ``surface``."""
    for x in range(1, GRID_MAX_X + 1):
        for y in range(1, GRID_MAX_Y + 1):
            pygame.draw.rect(surface, GRID_COLOR, _cell_rect(x, y), 1)

    frame = pygame.Rect(
        X_ORIGIN + BLOCK,
        Y_ORIGIN + BLOCK,
        BLOCK * GRID_MAX_X,
        BLOCK * GRID_MAX_Y,
    )
    pygame.draw.rect(surface, FRAME_COLOR, frame, 6)

    _text(surface, "Your Score", (300, 520), 60)
    _text(surface, str(game.score), (400, 580), 60)

    if game.food is not None:
        pygame.draw.rect(surface, FOOD_COLOR, _cell_rect(*game.food))

    for x, y in game.body[1:]:
        pygame.draw.rect(surface, BODY_COLOR, _cell_rect(x, y))
    pygame.draw.rect(surface, HEAD_COLOR, _cell_rect(*game.head))


def _load_image(assets: Path, name: str, size) -> pygame.Surface | None:
    path = assets / name
    if not path.is_file():
        return None
    try:
        return pygame.transform.scale(pygame.image.load(str(path)), size)
    except pygame.error:
        return None


def _play_music(assets: Path, name: str) -> None:
    path = assets / name
    if not path.is_file():
        return
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _stop_music() -> None:
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()


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


def _intro(assets: Path) -> bool:
    screen = pygame.display.set_mode(SCREEN_SIZE)
    pygame.display.set_caption("Snake")
    _play_music(assets, "bgm.mp3")

    _paint_backdrop(screen, _load_image(assets, "start.jpg", SCREEN_SIZE))
    _text(screen, "Snake", (190, 650), 50)
    pygame.display.flip()
    if not _wait_for_key():
        return False

    _paint_backdrop(screen, _load_image(assets, "start2.jpg", SCREEN_SIZE))
    _text(screen, "Rules", (160, 60), 50)
    _text(screen, "Steer the snake with W A S D", (60, 400), 30, WARNING_COLOR)
    _text(screen, "W: up  A: left  S: down  D: right", (60, 430), 30, WARNING_COLOR)
    _text(screen, "1. Do not bite your own body", (60, 460), 30, WARNING_COLOR)
    _text(screen, "2. Do not touch the yellow wall", (60, 490), 30, WARNING_COLOR)
    _text(screen, "Eat as many yellow blocks as you can", (60, 520), 40, WARNING_COLOR)
    pygame.display.flip()
    proceed = _wait_for_key()
    _stop_music()
    return proceed


def _game_over(assets: Path) -> None:
    _stop_music()
    _play_music(assets, "loser.mp3")
    screen = pygame.display.set_mode(SCREEN_SIZE)
    pygame.display.set_caption("Game over")
    _paint_backdrop(screen, _load_image(assets, "lose.jpg", SCREEN_SIZE))
    _text(screen, "You lost!", (80, 60), 50)
    _text(screen, "Don't give up!", (70, 110), 50)
    _text(screen, "Let's try once more!", (70, 160), 50)
    pygame.display.flip()
    _wait_for_key()
    _stop_music()


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="snake", description="Play snake.")
    parser.add_argument("--assets", type=Path, default=Path("."),
                        help="directory holding images and music")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="pause between automatic steps")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    parser.add_argument("--skip-intro", action="store_true",
                        help="go straight to the game")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the snake game and return the final score."""
    args = _parse_args(argv)
    game = SnakeGame(random.Random(args.seed))
    pygame.init()
    try:
        if not args.skip_intro and not _intro(args.assets):
            return game.score

        _play_music(args.assets, "bgm2.mp3")
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Snake")
        backdrop = _load_image(args.assets, "background.jpg", (1020, 800))

        def render() -> None:
            _paint_backdrop(screen, backdrop)
            draw_snake_game(screen, game)
            pygame.display.flip()

        render()
        if not args.skip_intro and not _wait_for_key():
            return game.score
        game.spawn_food()
        render()

        frame = 0
        while args.frames is None or frame < args.frames:
            frame += 1
            closed, key = _poll_key()
            if closed:
                return game.score
            if key is not None:
                game.handle_key(key)
            else:
                game.auto_move()
            game.check_food()
            render()
            if key is None:
                pygame.time.wait(args.tick_ms)
            if not game.is_alive():
                _game_over(args.assets)
                break
        return game.score
    finally:
        pygame.quit()