"""
Game state for termpong.

A single GameState is created at start-up and owned by the coordinator
for the lifetime of the process. No other component keeps a reference
it mutates between frames.
"""

import logging
import random
from dataclasses import dataclass

from termpong.game.arena import Arena
from termpong.game.direction import random_diagonal
from termpong.game.entities import Ball, Player, Side

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Everything the simulation needs.

    Attributes:
        arena: Current arena geometry
        left: Human-controlled player
        right: Computer-controlled player
        ball: The ball
        tick_count: Simulation ticks processed so far
    """
    arena: Arena
    left: Player
    right: Player
    ball: Ball
    tick_count: int = 0

    @classmethod
    def new(cls, arena: Arena, rng: random.Random | None = None) -> "GameState":
        """Fresh match: ball on the center spot, unlocked, scores at zero."""
        state = cls(
            arena=arena,
            left=Player.for_side(Side.LEFT, arena),
            right=Player.for_side(Side.RIGHT, arena),
            ball=Ball(arena.mid_x, arena.mid_y, random_diagonal(rng)),
        )
        logger.info(
            f"New game: arena {arena}, ball {state.ball.direction} "
            f"from ({state.ball.x}, {state.ball.y})"
        )
        return state

    def player(self, side: Side) -> Player:
        return self.left if side is Side.LEFT else self.right

    @property
    def scores(self) -> tuple[int, int]:
        return self.left.score, self.right.score

    def relocate(self, arena: Arena) -> None:
        """
        Move to new arena geometry after a terminal resize.

        The arena keeps its size, so shifting every entity by the change
        in origin keeps all positions valid.
        """
        if arena == self.arena:
            return

        dx, dy = self.arena.offset_to(arena)
        self.ball.translate(dx, dy)
        self.left.paddle.translate(dx, dy)
        self.right.paddle.translate(dx, dy)
        self.arena = arena
        logger.info(f"Arena moved by ({dx}, {dy}): {arena}")
