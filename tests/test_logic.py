from __future__ import annotations

import random

import pytest

from termsnake.linalg import Coord
from termsnake.logic import Crash, advance, crash, tail_crash, wall_crash
from termsnake.orientation import Facing, Steering


def test_straight_advance_shifts_body(make_board) -> None:
    board = make_board(apple=(20, 10))
    nxt = advance(board, Steering.STRAIGHT)
    assert nxt.snake.head == Coord(3, 2)
    assert nxt.positions() == [Coord(3, 2), Coord(2, 2), Coord(1, 2)]
    assert nxt.apple == Coord(20, 10)
    assert nxt.size == board.size


def test_turn_changes_facing_and_movement(make_board) -> None:
    board = make_board()
    nxt = advance(board, Steering.TURN_LEFT)
    assert nxt.snake.facing is Facing.UP
    assert nxt.snake.head == Coord(2, 1)
    nxt = advance(nxt, Steering.TURN_LEFT)
    assert nxt.snake.facing is Facing.LEFT
    assert nxt.snake.head == Coord(1, 1)


def test_eating_grows_and_moves_apple(make_board, rng: random.Random) -> None:
    board = make_board(apple=(3, 2))
    nxt = advance(board, Steering.STRAIGHT, rng)
    assert len(nxt.positions()) == len(board.positions()) + 1
    assert nxt.snake.head == Coord(3, 2)
    assert nxt.apple is not None
    assert nxt.apple != Coord(3, 2)
    assert 0 <= nxt.apple.x < 25 and 0 <= nxt.apple.y < 15


class _Scripted:
    """randrange stub that replays fixed values."""

    def __init__(self, values) -> None:
        self.values = list(values)

    def randrange(self, n: int) -> int:
        return self.values.pop(0)


def test_eaten_apple_is_rerolled_until_it_moves(make_board) -> None:
    board = make_board(apple=(3, 2))
    # First roll lands on the eaten cell again.
    nxt = advance(board, Steering.STRAIGHT, _Scripted([3, 2, 5, 6]))
    assert nxt.apple == Coord(5, 6)


def test_advance_does_not_check_collisions(make_board) -> None:
    board = make_board(head=(24, 0), facing=Facing.RIGHT)
    nxt = advance(board, Steering.STRAIGHT)
    assert nxt.snake.head == Coord(25, 0)
    assert wall_crash(nxt)


@pytest.mark.parametrize("head", [(-1, 5), (25, 5), (5, -1), (5, 15)])
def test_wall_crash_outside(make_board, head) -> None:
    board = make_board(head=head, tail=())
    assert wall_crash(board)
    assert crash(board) is Crash.WALL


@pytest.mark.parametrize("head", [(0, 0), (24, 14), (12, 7)])
def test_no_wall_crash_inside(make_board, head) -> None:
    board = make_board(head=head, tail=())
    assert not wall_crash(board)
    assert crash(board) is None


def test_tail_crash_when_head_meets_body(make_board) -> None:
    # Head at (2,2); body goes right, down, left, up and back onto the head.
    board = make_board(
        head=(2, 2),
        tail=((-1, 0), (0, -1), (1, 0), (0, 1)),
    )
    assert board.positions()[4] == board.snake.head
    assert tail_crash(board)
    assert crash(board) is Crash.TAIL


def test_no_tail_crash_on_straight_body(make_board) -> None:
    assert not tail_crash(make_board())


def test_snake_can_turn_into_itself(make_board) -> None:
    # A length-5 snake turning a tight square runs into its own body.
    board = make_board(head=(5, 5), tail=((1, 0), (1, 0), (1, 0), (1, 0)), apple=(0, 0))
    for _ in range(2):
        board = advance(board, Steering.TURN_LEFT)
        assert crash(board) is None
    board = advance(board, Steering.TURN_LEFT)
    assert board.snake.head == Coord(4, 5)
    assert crash(board) is Crash.TAIL


def test_short_snake_chases_its_tail(make_board) -> None:
    # At length 4 the tail end moves out of the way just in time.
    board = make_board(head=(5, 5), tail=((1, 0), (1, 0), (1, 0)), apple=(0, 0))
    for _ in range(8):
        board = advance(board, Steering.TURN_LEFT)
        assert crash(board) is None
    assert len(board.positions()) == 4


def test_crash_messages() -> None:
    assert Crash.WALL.value == "Wall crash!"
    assert Crash.TAIL.value == "Tail crash!"


def test_end_to_end_straight_until_apple(make_board, rng: random.Random) -> None:
    board = make_board(head=(2, 2), tail=((1, 0), (1, 0)), apple=(7, 2))
    assert board.apple not in board.positions()

    board = advance(board, Steering.STRAIGHT, rng)
    assert board.snake.head == Coord(3, 2)
    assert len(board.positions()) == 3

    while board.snake.head + board.snake.facing.unit != board.apple:
        board = advance(board, Steering.STRAIGHT, rng)
        assert len(board.positions()) == 3
    assert board.snake.head == Coord(6, 2)

    eaten = board.apple
    board = advance(board, Steering.STRAIGHT, rng)
    assert board.snake.head == eaten
    assert len(board.positions()) == 4
    assert board.apple != eaten
