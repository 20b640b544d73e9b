"""Grid physics for termpong: geometry, entities, collisions and the tick."""

from termpong.game.arena import INNER_HEIGHT, INNER_WIDTH, Arena
from termpong.game.direction import Direction
from termpong.game.entities import LOCK_TICKS, PADDLE_HEIGHT, Ball, Paddle, Player, Side

__all__ = [
    "Arena",
    "INNER_WIDTH",
    "INNER_HEIGHT",
    "Direction",
    "Ball",
    "Paddle",
    "Player",
    "Side",
    "PADDLE_HEIGHT",
    "LOCK_TICKS",
]
