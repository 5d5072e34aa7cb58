from __future__ import annotations

import logging
import sys

import pygame

from . import config
from .linalg import Coord
from .state import Board

logger = logging.getLogger(__name__)


def draw_board(surface: pygame.Surface, board: Board) -> None:
    surface.fill(config.BACKGROUND_COLOR)

    # Apple first so the snake is drawn over it when they share a cell.
    if board.apple is not None:
        ax, ay = board.apple
        apple_rect = pygame.Rect(ax * config.BLOCK, ay * config.BLOCK, config.BLOCK, config.BLOCK)
        pygame.draw.rect(surface, config.APPLE_COLOR, apple_rect)

    for x, y in board.positions():
        rect = pygame.Rect(x * config.BLOCK, y * config.BLOCK, config.BLOCK, config.BLOCK)
        pygame.draw.rect(surface, config.SNAKE_COLOR, rect)


class PygameFrontend:
    """Window front-end: draws the board and reads keys from the event queue."""

    def __init__(self, size: Coord) -> None:
        self.size = size
        self.screen: pygame.Surface | None = None

    def __enter__(self) -> PygameFrontend:
        pygame.init()
        self.screen = pygame.display.set_mode((self.size.x * config.BLOCK, self.size.y * config.BLOCK))
        pygame.display.set_caption("termsnake")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        pygame.quit()

    def show(self, board: Board) -> None:
        draw_board(self.screen, board)
        pygame.display.flip()

    def read_key(self, timeout_ms: float) -> str:
        deadline = pygame.time.get_ticks() + int(timeout_ms)
        while True:
            remaining = deadline - pygame.time.get_ticks()
            if remaining <= 0:
                return config.TIMEOUT_KEY
            event = pygame.event.wait(remaining)
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                return event.unicode or config.TIMEOUT_KEY
            # NOEVENT on timeout; anything else is ignored until the deadline.

    def _quit(self) -> None:
        logger.info("window closed")
        pygame.quit()
        sys.exit()
