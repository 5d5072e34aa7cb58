from __future__ import annotations

from enum import Enum

from . import config
from .linalg import Coord


class Facing(Enum):
    UP = Coord(0, -1)
    DOWN = Coord(0, 1)
    LEFT = Coord(-1, 0)
    RIGHT = Coord(1, 0)

    @property
    def unit(self) -> Coord:
        return self.value


class Steering(Enum):
    TURN_LEFT = "left"
    TURN_RIGHT = "right"
    STRAIGHT = "straight"


# (facing, steering) -> new facing. Straight is handled separately.
_TURNS: dict[tuple[Facing, Steering], Facing] = {
    (Facing.UP, Steering.TURN_LEFT): Facing.LEFT,
    (Facing.UP, Steering.TURN_RIGHT): Facing.RIGHT,
    (Facing.DOWN, Steering.TURN_LEFT): Facing.RIGHT,
    (Facing.DOWN, Steering.TURN_RIGHT): Facing.LEFT,
    (Facing.LEFT, Steering.TURN_LEFT): Facing.DOWN,
    (Facing.LEFT, Steering.TURN_RIGHT): Facing.UP,
    (Facing.RIGHT, Steering.TURN_LEFT): Facing.UP,
    (Facing.RIGHT, Steering.TURN_RIGHT): Facing.DOWN,
}


def turn(facing: Facing, steering: Steering) -> tuple[Coord, Facing]:
    """Apply a relative steering input to a facing.

    Returns the displacement for this tick together with the new facing; the
    displacement is always the unit vector of the new facing.
    """
    if steering is Steering.STRAIGHT:
        new_facing = facing
    else:
        new_facing = _TURNS[(facing, steering)]
    return new_facing.unit, new_facing


def steering_for_key(key: str | None) -> Steering:
    if not key:
        return Steering.STRAIGHT
    key = key.lower()
    if key == config.LEFT_KEY:
        return Steering.TURN_LEFT
    if key == config.RIGHT_KEY:
        return Steering.TURN_RIGHT
    return Steering.STRAIGHT
