"""Tetris board and game state."""

from __future__ import annotations

import random

# Cell offsets for each piece kind and each of its four rotations.
SHAPES: tuple[tuple[tuple[tuple[int, int], ...], ...], ...] = (
    # T
    (((0, 0), (-1, 0), (0, -1), (1, 0)),
     ((0, 0), (0, -1), (1, 0), (0, 1)),
     ((0, 0), (1, 0), (0, 1), (-1, 0)),
     ((0, 0), (0, 1), (-1, 0), (0, -1))),
    # S
    (((0, 0), (-1, 0), (0, -1), (1, -1)),
     ((0, 0), (0, -1), (1, 0), (1, 1)),
     ((0, 0), (1, 0), (0, 1), (-1, 1)),
     ((0, 0), (0, 1), (-1, 0), (-1, -1))),
    # Z
    (((0, 0), (-1, -1), (0, -1), (1, 0)),
     ((0, 0), (1, -1), (1, 0), (0, 1)),
     ((0, 0), (1, 1), (0, 1), (-1, 0)),
     ((0, 0), (-1, 1), (-1, 0), (0, -1))),
    # I
    (((0, 0), (-2, 0), (-1, 0), (1, 0)),
     ((0, 0), (0, -2), (0, -1), (0, 1)),
     ((0, 0), (2, 0), (1, 0), (-1, 0)),
     ((0, 0), (0, 2), (0, 1), (0, -1))),
    # O
    (((0, 0), (-1, 0), (-1, -1), (0, -1)),
     ((0, 0), (0, -1), (1, -1), (1, 0)),
     ((0, 0), (1, 0), (1, 1), (0, 1)),
     ((0, 0), (0, 1), (-1, 1), (-1, 0))),
    # L
    (((0, 0), (-1, 0), (1, 0), (1, -1)),
     ((0, 0), (0, -1), (0, 1), (1, 1)),
     ((0, 0), (1, 0), (-1, 0), (-1, 1)),
     ((0, 0), (0, 1), (0, -1), (-1, -1))),
    # J
    (((0, 0), (-1, 0), (1, 0), (1, 1)),
     ((0, 0), (0, -1), (0, 1), (-1, 1)),
     ((0, 0), (1, 0), (-1, 0), (-1, -1)),
     ((0, 0), (0, 1), (0, -1), (1, -1))),
)

PIECE_COLORS = ("blue", "green", "cyan", "red", "magenta", "brown", "yellow")

BOARD_WIDTH = 20
BOARD_HEIGHT = 30
SPAWN_X = 4
SPAWN_Y = 1
ROW_SCORE = 10
EMPTY = -1


def _cells(x: int, y: int, kind: int, rotation: int):
    return [(x + dx, y + dy) for dx, dy in SHAPES[kind][rotation]]


class Board:
    """Grid of landed cells; each holds a piece kind plus one, or EMPTY."""

    width = BOARD_WIDTH
    height = BOARD_HEIGHT

    def __init__(self):
        self.cells: list[list[int]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[EMPTY] * self.height for _ in range(self.width)]

    def _filled(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[x][y] > 0
        return False

    def can_go_left(self, x, y, kind, rotation) -> bool:
        for cx, cy in _cells(x - 1, y, kind, rotation):
            if cx < 0 or self._filled(cx, cy):
                return False
        return True

    def can_go_right(self, x, y, kind, rotation) -> bool:
        for cx, cy in _cells(x + 1, y, kind, rotation):
            if cx >= self.width or self._filled(cx, cy):
                return False
        return True

    def can_fall(self, x, y, kind, rotation) -> bool:
        for cx, cy in _cells(x, y + 1, kind, rotation):
            if cy >= self.height or self._filled(cx, cy):
                return False
        return True

    def can_rotate(self, x, y, kind, rotation) -> bool:
        for cx, cy in _cells(x, y, kind, (rotation + 1) % 4):
            if not (0 <= cx < self.width and 0 <= cy < self.height):
                return False
            if self.cells[cx][cy] > 0:
                return False
        return True

    def land(self, x, y, kind, rotation) -> None:
        """Fix a piece into the grid."""
        for cx, cy in _cells(x, y, kind, rotation):
            if 0 <= cx < self.width and 0 <= cy < self.height:
                self.cells[cx][cy] = kind + 1

    def is_row_full(self, row) -> bool:
        return all(column[row] > 0 for column in self.cells)

    def remove_row(self, row) -> None:
        """Shift every row above ``row`` down by one; the top row stays."""
        for column in self.cells:
            column[1:row + 1] = column[0:row]

    def clear_full_rows(self) -> int:
        """Remove full rows from top to bottom and return how many went."""
        cleared = 0
        for row in range(self.height):
            if self.is_row_full(row):
                self.remove_row(row)
                cleared += 1
        return cleared

    def is_game_over(self) -> bool:
        """True once any cell of the top row is filled."""
        return any(column[0] > 0 for column in self.cells)


class TetrisGame:
    """A falling piece, the next piece, the board and the score."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.board = Board()
        self.score = 0
        self.block_count = 0
        self.kind = 0
        self.rotation = 0
        self.next_kind = 0
        self.next_rotation = 0
        self.x = SPAWN_X
        self.y = SPAWN_Y
        self.landed = False
        self.score_full_rows()
        self.spawn()
        self.generate_next()

    def generate_next(self) -> None:
        """Pick the kind and rotation of the next piece."""
        self.block_count += 1
        self.next_kind = self.rng.randrange(len(SHAPES))
        self.next_rotation = self.rng.randrange(4)

    def spawn(self) -> None:
        """Put the current piece at the spawn point."""
        self.x = SPAWN_X
        self.y = SPAWN_Y

    def _land(self) -> None:
        self.board.land(self.x, self.y, self.kind, self.rotation)
        self.landed = True

    def _move(self, key: str) -> None:
        board = self.board
        piece = (self.x, self.y, self.kind, self.rotation)
        if key == "a":
            if board.can_go_left(*piece):
                self.x -= 1
        elif key == "d":
            if board.can_go_right(*piece):
                self.x += 1
        elif key == "s":
            if board.can_fall(*piece):
                while board.can_fall(self.x, self.y, self.kind, self.rotation):
                    self.y += 1
            else:
                self._land()
        elif key == "w":
            if board.can_rotate(*piece):
                self.rotation = (self.rotation + 1) % 4

    def _take_next(self) -> None:
        self.kind = self.next_kind
        self.rotation = self.next_rotation
        self.spawn()

    def handle_key(self, key) -> bool:
        """Apply a key press; returns False when the key asks to quit.

        ``a``/``d`` move sideways, ``w`` rotates, ``s`` drops the piece to the
        floor, or lands it when it already rests there.
        """
        if key == "q":
            return False
        self._move(key)
        if not self.landed:
            self.board.clear_full_rows()
            self.score_full_rows()
        else:
            self._take_next()
            self.board.clear_full_rows()
            self.landed = False
            self.generate_next()
            self.score_full_rows()
        return True

    def _auto_move(self) -> None:
        if self.board.can_fall(self.x, self.y, self.kind, self.rotation):
            self.y += 1
        else:
            self._land()

    def tick(self) -> None:
        """Advance one step of gravity, bringing in the next piece after a landing."""
        if not self.landed:
            self._auto_move()
            self.score_full_rows()
        else:
            self._take_next()
            self.landed = False
            self._auto_move()
            self.board.clear_full_rows()
            self.score_full_rows()
            self.generate_next()

    def score_full_rows(self) -> int:
        """Add points for every row that is full right now; return the score."""
        full = sum(1 for row in range(self.board.height) if self.board.is_row_full(row))
        self.score += ROW_SCORE * full
        return self.score

    def piece_cells(self) -> list[tuple[int, int]]:
        """Grid cells covered by the current piece."""
        return _cells(self.x, self.y, self.kind, self.rotation)