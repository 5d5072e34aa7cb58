from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Iterator

from . import config
from .linalg import Coord
from .logic import Crash, advance, crash
from .orientation import Facing, steering_for_key
from .state import Board, Snake

logger = logging.getLogger(__name__)


def countdown(
    start: float = config.COUNTDOWN_START,
    stop: float = config.COUNTDOWN_STOP,
    step: float = config.COUNTDOWN_STEP,
) -> Iterator[float]:
    """Per-tick input timeouts in ms, from start down to stop inclusive."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    i = 0
    while (t := start - i * step) >= stop:
        yield t
        i += 1


def initial_board(size: Coord = config.BOARD_SIZE, rng: random.Random | None = None) -> Board:
    snake = Snake(config.START_HEAD, config.START_TAIL, Facing.RIGHT)
    return Board.new(snake, size=size, rng=rng)


def play(
    board: Board,
    read_key: Callable[[float], str],
    show: Callable[[Board], None],
    schedule: Iterable[float],
    rng: random.Random | None = None,
) -> tuple[Crash | None, Board]:
    """Run ticks until a crash or until the schedule runs out."""
    for tick, timeout in enumerate(schedule):
        result = crash(board)
        if result is not None:
            logger.info("%s after %d ticks, length %d", result.name.lower(), tick, len(board.positions()))
            return result, board

        show(board)
        steering = steering_for_key(read_key(timeout))
        logger.debug("tick %d: timeout %.1fms, %s", tick, timeout, steering.name)
        board = advance(board, steering, rng)

    logger.info("schedule exhausted, length %d", len(board.positions()))
    return None, board


def run(
    renderer: str = "text",
    size: Coord = config.BOARD_SIZE,
    seed: int | None = None,
    start: float = config.COUNTDOWN_START,
    step: float = config.COUNTDOWN_STEP,
) -> int:
    rng = random.Random(seed)
    board = initial_board(size, rng)

    if renderer == "pygame":
        from .render_pygame import PygameFrontend

        frontend = PygameFrontend(size)
    else:
        from .term import TextFrontend

        frontend = TextFrontend()

    print(config.INSTRUCTIONS)
    with frontend:
        result, board = play(board, frontend.read_key, frontend.show, countdown(start, step=step), rng)

    if result is not None:
        print(result.value)
    return 0
