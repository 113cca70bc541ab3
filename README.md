# retroarcade

Two small keyboard arcade games, each in its own pygame window: Snake and Tetris.

## Installing

    pip install retroarcade

This also installs pygame, which draws the windows and plays the music.

## Playing Snake

    retro-snake

Two opening screens come first, a title and the rules; press any key to get
past each of them, and once more when the board appears to start. Steer with
`W` `A` `S` `D`; when no key is pressed the snake keeps moving in its current
direction. Each yellow food block eaten makes the snake one cell longer and adds
a point to the score. The game ends when the head reaches the yellow wall or
runs into the body; a game-over screen is shown until a key is pressed.

## Playing Tetris

    retro-tetris

After the title screen and the rules (a key press each), the game starts.

- `A` and `D` move the falling piece left and right.
- `W` rotates the piece.
- `S` drops the piece to the bottom; pressed again while the piece rests
  there, it lands the piece at once.
- `Q` quits.

Full rows are cleared and are worth 10 points each. The next piece is shown in
the box beside the board. When a landed cell reaches the top row you are asked
whether to play again: `Enter` or `Y` empties the board and carries on with the
same score, `Esc` or `N` shows the final score.

## Command options

Both commands take the same options:

- `--assets DIR` – directory holding the images and music (default: the
  current directory).
- `--seed N` – seed for the random food positions or pieces.
- `--tick-ms MS` – pause between automatic steps (200 for Snake, 300 for Tetris).
- `--frames N` – stop after this many frames.
- `--skip-intro` – go straight to the game.

Images and music are optional. Snake looks for `start.jpg`, `start2.jpg`,
`background.jpg`, `lose.jpg`, `bgm.mp3`, `bgm2.mp3` and `loser.mp3`; Tetris for
`bk2.jpg`, `bk.jpg`, `bgm/m.mp3` and `bgm/ding.mp3` (played on each `S`). Any
file that is missing or cannot be loaded is skipped: a plain coloured
background is drawn instead and no sound is played.

## Using the game logic

The rules of each game do not depend on the display, so you can drive them
directly:

```python
import random
from retroarcade.snake import SnakeGame
from retroarcade.tetris import TetrisGame

snake = SnakeGame(random.Random(1))
snake.spawn_food()
snake.handle_key("d")
snake.check_food()
print(snake.is_alive(), snake.score)

tetris = TetrisGame(random.Random(1))
tetris.tick()
print(tetris.piece_cells())
```

- `retroarcade.snake.SnakeGame` keeps the body, the `Direction`, the food and
  the score; `handle_key`, `auto_move`, `spawn_food`, `ate_food`, `grow`,
  `check_food` and `is_alive` step and inspect it.
- `retroarcade.tetris.Board` holds the landed cells. It checks moves with
  `can_go_left`, `can_go_right`, `can_fall` and `can_rotate`, fixes pieces with
  `land`, and clears rows with `clear_full_rows`; `is_game_over` tells when the
  top row is reached.
- `retroarcade.tetris.TetrisGame` drives the falling piece with `handle_key`
  and `tick`, and keeps the score.
- `retroarcade.snake_app.draw_snake_game` and
  `retroarcade.tetris_app.draw_tetris_game` draw a game onto any pygame surface.

## What it does not do

Scores are not saved anywhere: there is no high-score table, and each run
starts from zero.