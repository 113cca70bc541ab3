"""Snake game state: movement, collisions, food and score."""

from __future__ import annotations

import random
from enum import IntEnum

GRID_MIN = 1
GRID_MAX_X = 40
GRID_MAX_Y = 20
FOOD_X_RANGE = (2, 40)
FOOD_Y_RANGE = (2, 20)
START_BODY = ((9, 7), (8, 7), (7, 7))


class Direction(IntEnum):
    """Heading of the snake."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Keys are tried in this order; a key whose move is forbidden passes on to the next.
_KEY_ORDER = (
    ("w", Direction.UP),
    ("s", Direction.DOWN),
    ("a", Direction.LEFT),
    ("d", Direction.RIGHT),
)
_KEYS = [key for key, _ in _KEY_ORDER]


class SnakeGame:
    """A snake on a bordered grid that eats food and grows."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.body: list[tuple[int, int]] = list(START_BODY)
        self.direction = Direction.RIGHT
        self.food: tuple[int, int] | None = None
        self.food_visible = False
        self.score = 0

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    def _shift_body(self) -> None:
        self.body[1:] = self.body[:-1]

    def _step_head(self, direction: Direction) -> None:
        dx, dy = direction.delta
        x, y = self.body[0]
        self.body[0] = (x + dx, y + dy)

    def handle_key(self, key: str) -> None:
        """Move one step in response to a key press.

        The body always advances. A key that would reverse the snake hands the
        move on to the next key in w, s, a, d order; any other key leaves the
        head where it is.
        """
        self._shift_body()
        if key not in _KEYS:
            return
        for _, direction in _KEY_ORDER[_KEYS.index(key):]:
            if self.direction != direction.opposite:
                self._step_head(direction)
                self.direction = direction
                return

    def auto_move(self) -> None:
        """Advance one step in the current direction."""
        self._shift_body()
        self._step_head(self.direction)

    def is_alive(self) -> bool:
        """False once the head touches the wall or the body."""
        x, y = self.head
        if x >= GRID_MAX_X or y >= GRID_MAX_Y or x <= GRID_MIN or y <= GRID_MIN:
            return False
        return self.head not in self.body[1:]

    def spawn_food(self) -> tuple[int, int]:
        """Place food at a random cell and return its position."""
        food_x = self.rng.randrange(*FOOD_X_RANGE)
        food_y = self.rng.randrange(*FOOD_Y_RANGE)
        self.food = (food_x, food_y)
        self.food_visible = any(
            food_x != sx and food_y != sy for sx, sy in self.body
        )
        return self.food

    def ate_food(self) -> bool:
        """True when the head sits on the food."""
        return self.food is not None and self.head == self.food

    def grow(self) -> None:
        """When the food is eaten, move on and keep the old tail."""
        if not self.ate_food():
            return
        tail = self.body[-1]
        self.auto_move()
        self.body.append(tail)

    def check_food(self) -> bool:
        """Grow, respawn food and score if the food was eaten."""
        if not self.ate_food():
            return False
        self.grow()
        self.spawn_food()
        self.score += 1
        return True