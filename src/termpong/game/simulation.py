"""
Per-tick simulation.

One call to advance_tick() is one step of the discrete physics:
serve countdown, collision, movement and scoring.
"""

import logging
import random
from dataclasses import dataclass

from termpong.core.state import GameState
from termpong.errors import DirectionError
from termpong.game.collision import resolve_collision
from termpong.game.direction import Direction, general_horizontal, random_diagonal
from termpong.game.entities import LOCK_TICKS, Side

logger = logging.getLogger(__name__)


@dataclass
class TickOutcome:
    """What happened during one tick."""
    locked: bool = False
    collided: bool = False
    scorer: Side | None = None


def advance_tick(state: GameState, rng: random.Random | None = None) -> TickOutcome:
    """
    Advance the simulation by one tick.

    Args:
        state: Game state, mutated in place
        rng: Random source for serve directions (module random if None)

    Returns:
        TickOutcome describing the tick
    """
    ball = state.ball
    arena = state.arena

    try:
        _check_direction(ball.direction)
    except DirectionError as e:
        ball.direction = random_diagonal(rng)
        logger.error(f"{e}; coerced to {ball.direction}")

    if ball.is_locked():
        ball.tick_lock()
        logger.debug(f"Serve lock at {ball.lock}")
        return TickOutcome(locked=True)

    orig_dir = ball.direction
    if general_horizontal(ball.direction) is Direction.LEFT:
        paddle = state.left.paddle
    else:
        paddle = state.right.paddle

    collided, new_dir = resolve_collision(ball, paddle, arena)
    if collided:
        ball.direction = new_dir

    ball.advance()

    if collided:
        logger.info(f"Set direction from {orig_dir} to {ball.direction} at x: {ball.x} y: {ball.y}")
    else:
        logger.debug(f"Ball {ball.direction} to x: {ball.x} y: {ball.y}")

    scorer = None
    if ball.x <= arena.left:
        scorer = Side.RIGHT
    elif ball.x >= arena.right:
        scorer = Side.LEFT

    if scorer is not None:
        state.player(scorer).award_point()
        reset_ball(state, rng)

    return TickOutcome(collided=collided, scorer=scorer)


def reset_ball(state: GameState, rng: random.Random | None = None) -> None:
    """Serve from the center spot after a point."""
    state.ball.serve(state.arena, random_diagonal(rng), LOCK_TICKS)
    logger.info(
        f"Serve {state.ball.direction} from ({state.ball.x}, {state.ball.y}), "
        f"score {state.left.score}:{state.right.score}"
    )


def _check_direction(direction: Direction) -> None:
    if direction.is_vertical:
        raise DirectionError(f"Ball observed moving {direction}")
