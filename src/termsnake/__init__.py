from __future__ import annotations

from .game import countdown, initial_board, play
from .linalg import Coord
from .logic import Crash, advance, crash, tail_crash, wall_crash
from .orientation import Facing, Steering, steering_for_key, turn
from .render import render
from .state import Board, Snake, roll_apple

__all__ = [
    "Board",
    "Coord",
    "Crash",
    "Facing",
    "Snake",
    "Steering",
    "advance",
    "countdown",
    "crash",
    "initial_board",
    "play",
    "render",
    "roll_apple",
    "steering_for_key",
    "tail_crash",
    "turn",
    "wall_crash",
]
