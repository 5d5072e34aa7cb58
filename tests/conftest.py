from __future__ import annotations

import os
import random
from collections.abc import Callable

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from termsnake.linalg import Coord  # noqa: E402
from termsnake.orientation import Facing  # noqa: E402
from termsnake.state import Board, Snake  # noqa: E402


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def make_board() -> Callable[..., Board]:
    def _make(
        head: tuple[int, int] = (2, 2),
        tail: tuple[tuple[int, int], ...] = ((1, 0), (1, 0)),
        facing: Facing = Facing.RIGHT,
        apple: tuple[int, int] | None = (10, 10),
        size: tuple[int, int] = (25, 15),
    ) -> Board:
        snake = Snake(Coord(*head), tuple(Coord(*d) for d in tail), facing)
        return Board(snake, None if apple is None else Coord(*apple), Coord(*size))

    return _make
