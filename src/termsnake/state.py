from __future__ import annotations

import random
from typing import NamedTuple

from . import config
from .linalg import Coord
from .orientation import Facing


def roll_apple(size: Coord, rng: random.Random | None = None) -> Coord:
    """Pick a uniformly random cell. The snake body is not avoided."""
    rng = rng or random
    return Coord(rng.randrange(size.x), rng.randrange(size.y))


class Snake(NamedTuple):
    head: Coord
    # Segment deltas, head end first: each one points from a segment back to
    # the one before it.
    tail: tuple[Coord, ...]
    facing: Facing

    def positions(self) -> list[Coord]:
        body = [self.head]
        for segment in self.tail:
            body.append(body[-1] - segment)
        return body

    def wriggle(self, delta: Coord, facing: Facing) -> Snake:
        """Move one step, dropping the oldest segment."""
        return Snake(self.head + delta, (delta,) + self.tail[:-1], facing)

    def grow(self, delta: Coord, facing: Facing) -> Snake:
        """Move one step, keeping every segment."""
        return Snake(self.head + delta, (delta,) + self.tail, facing)


class Board(NamedTuple):
    snake: Snake
    apple: Coord | None
    size: Coord = config.BOARD_SIZE

    @classmethod
    def new(
        cls,
        snake: Snake,
        apple: Coord | None = None,
        size: Coord = config.BOARD_SIZE,
        rng: random.Random | None = None,
    ) -> Board:
        if apple is None:
            apple = roll_apple(size, rng)
        return cls(snake, apple, size)

    def positions(self) -> list[Coord]:
        return self.snake.positions()
