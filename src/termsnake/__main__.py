from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .game import run
from .linalg import Coord


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="termsnake", description="Snake in a terminal.")
    parser.add_argument(
        "--renderer",
        choices=("text", "pygame"),
        default="text",
        help="Front-end (text=raw terminal, pygame=window).",
    )
    parser.add_argument(
        "--size",
        default=f"{config.BOARD_SIZE.x}x{config.BOARD_SIZE.y}",
        help="Board size as WIDTHxHEIGHT (default: %(default)s).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    parser.add_argument(
        "--start",
        type=float,
        default=config.COUNTDOWN_START,
        help="First tick's input timeout in ms (default: %(default)s).",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=config.COUNTDOWN_STEP,
        help="Timeout decrease per tick in ms (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level; logs go to stderr.",
    )
    args = parser.parse_args(argv)

    try:
        size = Coord.parse(args.size)
    except ValueError as e:
        parser.error(str(e))
    if size.x <= 0 or size.y <= 0:
        parser.error(f"board size must be positive, got {args.size}")
    if args.step <= 0:
        parser.error(f"--step must be positive, got {args.step}")

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args.renderer, size, args.seed, args.start, args.step)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
