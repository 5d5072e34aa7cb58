from __future__ import annotations

from . import config
from .linalg import Coord
from .state import Board


def render(board: Board) -> str:
    """Draw the board as a bordered block of text, one character per cell."""
    body = set(board.positions())

    def cell(square: Coord) -> str:
        if square in body:
            return config.SNAKE_CHAR
        if square == board.apple:
            return config.APPLE_CHAR
        return config.EMPTY_CHAR

    width, height = board.size
    rows = [
        "|" + "".join(cell(Coord(x, y)) for x in range(width)) + "|"
        for y in range(height)
    ]
    border = "+" + "-" * width + "+"
    return "\n".join([border, *rows, border])
