"""
Collision resolution for the ball.

Rules are checked in order and the first match wins:

1. Wall: the ball sits on the row next to the top or bottom border.
   Its vertical component is mirrored.
2. Paddle: the ball sits in the column next to the paddle, within the
   paddle's rows. The outgoing direction depends on which region of
   the paddle was hit:
   - middle row: straight back horizontally
   - below the middle: incoming diagonals mirror horizontally,
     horizontal balls leave on the downward diagonal
   - above the middle: as below, with the upward diagonal
3. Otherwise nothing happens.
"""

import logging

from termpong.game.arena import Arena
from termpong.game.direction import (
    Direction,
    reflect_horizontal,
    reflect_vertical,
)
from termpong.game.entities import Ball, Paddle

logger = logging.getLogger(__name__)


def resolve_collision(ball: Ball, paddle: Paddle, arena: Arena) -> tuple[bool, Direction]:
    """
    Work out the ball's next direction.

    Args:
        ball: Ball before it moves this tick
        paddle: Paddle on the side the ball is heading toward
        arena: Current arena geometry

    Returns:
        (collided, direction). When nothing was hit the ball's current
        direction is returned unchanged.
    """
    if ball.y == arena.top + 1 or ball.y == arena.bottom - 1:
        off_top = ball.y == arena.top + 1
        return True, reflect_vertical(ball.direction, off_top=off_top)

    if paddle.covers(ball.y) and ball.x in (paddle.x + 1, paddle.x - 1):
        # L: ball is on the paddle's right, so it bounces back rightwards
        side = "L" if ball.x == paddle.x + 1 else "R"
        new_dir = _paddle_bounce(ball, paddle, side)
        logger.debug(
            f"Paddle hit at x={paddle.x} rows {paddle.y_top}..{paddle.y_bot}: "
            f"ball y={ball.y} side={side} {ball.direction} -> {new_dir}"
        )
        return True, new_dir

    return False, ball.direction


def _paddle_bounce(ball: Ball, paddle: Paddle, side: str) -> Direction:
    mid = paddle.middle

    if ball.y == mid:
        return Direction.RIGHT if side == "L" else Direction.LEFT

    if ball.direction.is_diagonal:
        return reflect_horizontal(ball.direction)

    if ball.y > mid:
        return Direction.DOWN_RIGHT if side == "L" else Direction.DOWN_LEFT
    return Direction.UP_RIGHT if side == "L" else Direction.UP_LEFT
