import pytest

from termpong.core.state import GameState
from termpong.errors import MinimumSizeError
from termpong.game.arena import Arena
from termpong.game.direction import Direction
from termpong.game.entities import Ball
from termpong.graphics.renderer import (
    BLOCK,
    DIAMOND,
    HLINE,
    LL_CORNER,
    LR_CORNER,
    UL_CORNER,
    UR_CORNER,
    VLINE,
    Renderer,
    format_score,
)
from termpong.hardware.base import Style
from termpong.simulator.mock_hardware import MockScreen


@pytest.fixture()
def screen():
    return MockScreen(150, 60)


@pytest.fixture()
def game(rng):
    state = GameState.new(Arena.from_size(150, 60), rng)
    state.ball = Ball(75, 30, Direction.UP_LEFT)
    return state


def draw(screen, state, style=Style()):
    Renderer(screen, style).draw(state)
    screen.show()


def test_border(screen, game):
    draw(screen, game)
    assert screen.cell(20, 10) == UL_CORNER
    assert screen.cell(130, 10) == UR_CORNER
    assert screen.cell(20, 50) == LL_CORNER
    assert screen.cell(130, 50) == LR_CORNER
    assert screen.cell(21, 10) == HLINE
    assert screen.cell(75, 50) == HLINE
    assert screen.cell(20, 11) == VLINE
    assert screen.cell(130, 49) == VLINE
    assert screen.cell(19, 10) == ' '
    assert screen.cell(131, 10) == ' '


def test_ball_and_paddles(screen, game):
    draw(screen, game)
    assert screen.find(DIAMOND) == [(75, 30)]
    assert screen.find(BLOCK) == sorted(
        [(21, y) for y in range(28, 32)] + [(129, y) for y in range(28, 32)],
        key=lambda cell: (cell[1], cell[0]),
    )


def test_score_is_drawn_below_arena(screen, game):
    game.left.score = 7
    game.right.score = 12
    draw(screen, game)
    assert screen.row_text(52)[73:78] == 'SCORE'
    assert screen.row_text(53)[67:70] == '007'
    assert screen.row_text(53)[81:84] == '012'


def test_style_is_applied(screen, game):
    style = Style('green', bold=True)
    draw(screen, game, style)
    assert screen.styles[(75, 30)] == style
    assert style.formatter_name == 'bold_green'


@pytest.mark.parametrize('score, text', [(0, '000'), (5, '005'), (42, '042'), (999, '999')])
def test_format_score(score, text):
    assert format_score(score) == text


def test_size_warning(screen):
    renderer = Renderer(screen)
    renderer.draw_size_warning(MinimumSizeError(100, 40, 150, 60))
    screen.show()
    assert screen.row_text(0).startswith('Window too small: 100x40')
