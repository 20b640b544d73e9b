"""Ball, paddle and player entities."""

import logging
from dataclasses import dataclass
from enum import Enum

from termpong.game.arena import Arena
from termpong.game.direction import Direction, step

logger = logging.getLogger(__name__)

# Rows covered by a paddle, inclusive
PADDLE_HEIGHT = 4

# Ticks the ball stays frozen after a serve reset
LOCK_TICKS = 10


class Side(Enum):
    """Which half of the court a player defends."""
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


@dataclass
class Ball:
    """
    The ball.

    While ``lock`` is positive the ball is serving: it stays put and
    the lock counts down once per tick.
    """
    x: int
    y: int
    direction: Direction
    lock: int = 0

    def is_locked(self) -> bool:
        return self.lock > 0

    def tick_lock(self) -> None:
        if self.lock > 0:
            self.lock -= 1

    def advance(self) -> None:
        """Move one cell along the current direction."""
        self.x, self.y = step(self.direction, self.x, self.y)

    def serve(self, arena: Arena, direction: Direction, lock: int = LOCK_TICKS) -> None:
        """Put the ball back on the center spot."""
        self.x = arena.mid_x
        self.y = arena.mid_y
        self.direction = direction
        self.lock = lock

    def translate(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


@dataclass
class Paddle:
    """A vertical paddle on a fixed column."""
    y_top: int
    y_bot: int
    x: int

    @classmethod
    def centered(cls, arena: Arena, x: int) -> "Paddle":
        """Paddle whose middle row lines up with the serve row."""
        y_top = arena.mid_y - 2
        return cls(y_top=y_top, y_bot=y_top + PADDLE_HEIGHT - 1, x=x)

    @property
    def middle(self) -> int:
        """Row of the paddle's center (upper-middle rounds down)."""
        return self.y_top + (self.y_bot - self.y_top + 1) // 2

    def covers(self, y: int) -> bool:
        return self.y_top <= y <= self.y_bot

    def move_up(self, arena: Arena) -> bool:
        """Shift up one row if that keeps clear of the top border."""
        if self.y_top > arena.top + 1:
            self.y_top -= 1
            self.y_bot -= 1
            return True
        return False

    def move_down(self, arena: Arena) -> bool:
        """Shift down one row if that keeps clear of the bottom border."""
        if self.y_bot < arena.bottom - 1:
            self.y_top += 1
            self.y_bot += 1
            return True
        return False

    def set_span(self, y_top: int, y_bot: int) -> None:
        """Place the paddle directly. Caller keeps it in bounds."""
        self.y_top = y_top
        self.y_bot = y_bot

    def translate(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y_top += dy
        self.y_bot += dy


@dataclass
class Player:
    """A side of the court: its paddle and score."""
    side: Side
    paddle: Paddle
    score: int = 0

    @classmethod
    def for_side(cls, side: Side, arena: Arena) -> "Player":
        x = arena.left + 1 if side is Side.LEFT else arena.right - 1
        return cls(side=side, paddle=Paddle.centered(arena, x))

    def award_point(self) -> None:
        self.score += 1
        logger.info(f"Point to {self.side} player, score now {self.score}")
