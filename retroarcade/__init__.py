"""Snake and Tetris arcade games, with their rules kept apart from the pygame display."""

__version__ = "0.1.0"