"""Computer paddle: follows the ball's row, clamped to the arena."""

from termpong.game.arena import Arena
from termpong.game.entities import PADDLE_HEIGHT, Ball, Paddle


def track_ball(paddle: Paddle, ball: Ball, arena: Arena) -> None:
    """Center the paddle on the ball's row, pinned against the walls when needed."""
    y_top = ball.y - 2
    y_bot = ball.y + 1

    if y_top <= arena.top + 1:
        paddle.set_span(arena.top + 1, arena.top + PADDLE_HEIGHT)
    elif y_bot >= arena.bottom - 1:
        paddle.set_span(arena.bottom - PADDLE_HEIGHT, arena.bottom - 1)
    else:
        paddle.set_span(y_top, y_bot)
