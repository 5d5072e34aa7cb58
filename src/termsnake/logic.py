from __future__ import annotations

import logging
import random
from enum import Enum

from .orientation import Steering, turn
from .state import Board, roll_apple

logger = logging.getLogger(__name__)

__all__ = ["Crash", "advance", "crash", "roll_apple", "tail_crash", "wall_crash"]


class Crash(Enum):
    WALL = "Wall crash!"
    TAIL = "Tail crash!"


def advance(board: Board, steering: Steering, rng: random.Random | None = None) -> Board:
    """Compute the next board. Collisions are not checked here."""
    delta, facing = turn(board.snake.facing, steering)
    new_head = board.snake.head + delta

    if new_head != board.apple:
        return board._replace(snake=board.snake.wriggle(delta, facing))

    apple = roll_apple(board.size, rng)
    # A one-cell board has nowhere else to put it.
    while apple == new_head and board.size.x * board.size.y > 1:
        apple = roll_apple(board.size, rng)
    logger.debug("apple eaten at %s, next apple at %s", new_head, apple)
    return board._replace(snake=board.snake.grow(delta, facing), apple=apple)


def wall_crash(board: Board) -> bool:
    x, y = board.snake.head
    return not (0 <= x < board.size.x and 0 <= y < board.size.y)


def tail_crash(board: Board) -> bool:
    return board.snake.head in board.positions()[1:]


def crash(board: Board) -> Crash | None:
    if wall_crash(board):
        return Crash.WALL
    if tail_crash(board):
        return Crash.TAIL
    return None
