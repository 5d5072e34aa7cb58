from __future__ import annotations

from .linalg import Coord

# Board, in cells.
BOARD_SIZE = Coord(25, 15)

START_HEAD = Coord(2, 2)
START_TAIL = (Coord(1, 0), Coord(1, 0))

# Steering keys. Anything else goes straight.
LEFT_KEY = "a"
RIGHT_KEY = "s"
# Returned by key readers when nothing was pressed in time.
TIMEOUT_KEY = " "
# Longest key sequence read in one go; the rest of a burst is dropped.
KEY_READ_BYTES = 8

INSTRUCTIONS = "A to turn left, S to turn right"

# Difficulty ramp: per-tick input timeout in milliseconds.
COUNTDOWN_START = 700.0
COUNTDOWN_STOP = 0.0
COUNTDOWN_STEP = 0.5

# Text renderer.
SNAKE_CHAR = "*"
APPLE_CHAR = "@"
EMPTY_CHAR = " "

# Pygame renderer.
BLOCK = 20
BACKGROUND_COLOR = (0, 0, 0)
SNAKE_COLOR = (0, 255, 0)
APPLE_COLOR = (255, 0, 0)
