"""Draws the game state onto a screen, one cell at a time."""

import logging

from termpong.core.state import GameState
from termpong.errors import MinimumSizeError
from termpong.game.arena import Arena
from termpong.game.entities import Ball, Paddle
from termpong.hardware.base import DEFAULT_STYLE, Screen, Style

logger = logging.getLogger(__name__)

# Box drawing
HLINE = "─"
VLINE = "│"
UL_CORNER = "┌"
UR_CORNER = "┐"
LL_CORNER = "└"
LR_CORNER = "┘"

BLOCK = "█"
DIAMOND = "◆"

SCORE_LABEL = "SCORE"


def format_score(score: int) -> str:
    """Zero-padded three digit counter."""
    return f"{score:03d}"


class Renderer:
    """
    Renderer adapter between game state and a Screen.

    Only ever calls set_cell() (via write_text()); clearing and
    presenting the frame is the coordinator's job.
    """

    def __init__(self, screen: Screen, style: Style = DEFAULT_STYLE) -> None:
        self.screen = screen
        self.style = style

    def draw(self, state: GameState) -> None:
        """Draw score, border, ball and both paddles."""
        arena = state.arena
        self.draw_score(arena, state.left.score, state.right.score)
        self.draw_border(arena)
        self.draw_ball(state.ball)
        self.draw_paddle(state.left.paddle)
        self.draw_paddle(state.right.paddle)

    def draw_score(self, arena: Arena, left: int, right: int) -> None:
        y = arena.bottom + 2
        self.screen.write_text(arena.mid_x - 2, y, SCORE_LABEL, self.style)
        self.screen.write_text(arena.mid_x - 8, y + 1, format_score(left), self.style)
        self.screen.write_text(arena.mid_x + 6, y + 1, format_score(right), self.style)

    def draw_border(self, arena: Arena) -> None:
        for x in range(arena.left, arena.right + 1):
            self.screen.set_cell(x, arena.top, HLINE, self.style)
            self.screen.set_cell(x, arena.bottom, HLINE, self.style)

        for y in range(arena.top, arena.bottom + 1):
            self.screen.set_cell(arena.left, y, VLINE, self.style)
            self.screen.set_cell(arena.right, y, VLINE, self.style)

        self.screen.set_cell(arena.left, arena.top, UL_CORNER, self.style)
        self.screen.set_cell(arena.right, arena.top, UR_CORNER, self.style)
        self.screen.set_cell(arena.left, arena.bottom, LL_CORNER, self.style)
        self.screen.set_cell(arena.right, arena.bottom, LR_CORNER, self.style)

    def draw_ball(self, ball: Ball) -> None:
        self.screen.set_cell(ball.x, ball.y, DIAMOND, self.style)

    def draw_paddle(self, paddle: Paddle) -> None:
        for y in range(paddle.y_top, paddle.y_bot + 1):
            self.screen.set_cell(paddle.x, y, BLOCK, self.style)

    def draw_size_warning(self, error: MinimumSizeError) -> None:
        """Short notice in the top-left corner while the window is too small."""
        self.screen.write_text(0, 0, str(error), self.style)
