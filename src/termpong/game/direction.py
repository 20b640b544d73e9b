"""
Discrete grid directions for the ball.

The ball only ever travels along one of the four diagonals or purely
horizontally. UP and DOWN exist for completeness (paddle intents) and
are rejected by step().
"""

import random
from enum import Enum, auto

from termpong.errors import DirectionError


class Direction(Enum):
    """The eight grid directions."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_RIGHT = auto()
    DOWN_RIGHT = auto()
    UP_LEFT = auto()
    DOWN_LEFT = auto()

    def __str__(self) -> str:
        return self.name

    @property
    def is_diagonal(self) -> bool:
        return self in DIAGONALS

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


# Serve direction set
DIAGONALS: tuple[Direction, ...] = (
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
)

_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP_LEFT: (-1, -1),
    Direction.UP_RIGHT: (1, -1),
    Direction.DOWN_LEFT: (-1, 1),
    Direction.DOWN_RIGHT: (1, 1),
}

_VERTICAL_MIRROR: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.UP_LEFT: Direction.DOWN_LEFT,
    Direction.DOWN_LEFT: Direction.UP_LEFT,
    Direction.UP_RIGHT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.UP_RIGHT,
}

_HORIZONTAL_MIRROR: dict[Direction, Direction] = {
    Direction.UP: Direction.UP,
    Direction.DOWN: Direction.DOWN,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP_LEFT: Direction.UP_RIGHT,
    Direction.UP_RIGHT: Direction.UP_LEFT,
    Direction.DOWN_LEFT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.DOWN_LEFT,
}


def general_horizontal(direction: Direction) -> Direction:
    """Return LEFT or RIGHT, the horizontal component of a direction."""
    if direction in (Direction.LEFT, Direction.UP_LEFT, Direction.DOWN_LEFT):
        return Direction.LEFT
    return Direction.RIGHT


def reflect_vertical(direction: Direction, off_top: bool = True) -> Direction:
    """
    Mirror the vertical component of a direction.

    Pure LEFT/RIGHT have no vertical component to mirror; they pick one
    up pointing away from the wall that was hit.

    Args:
        direction: Incoming direction
        off_top: True when bouncing off the top wall, False for the bottom

    Returns:
        Reflected direction
    """
    if direction.is_horizontal:
        if off_top:
            return Direction.DOWN_LEFT if direction is Direction.LEFT else Direction.DOWN_RIGHT
        return Direction.UP_LEFT if direction is Direction.LEFT else Direction.UP_RIGHT
    return _VERTICAL_MIRROR[direction]


def reflect_horizontal(direction: Direction) -> Direction:
    """Mirror the horizontal component of a direction."""
    return _HORIZONTAL_MIRROR[direction]


def step(direction: Direction, x: int, y: int) -> tuple[int, int]:
    """
    Advance one cell in the given direction.

    Raises:
        DirectionError: for UP/DOWN, which are never valid ball directions
    """
    try:
        dx, dy = _STEPS[direction]
    except KeyError:
        raise DirectionError(f"Cannot step ball in direction {direction}") from None
    return x + dx, y + dy


def random_diagonal(rng: random.Random | None = None) -> Direction:
    """Pick one of the four diagonals uniformly."""
    return (rng or random).choice(DIAGONALS)
