import random

import pytest

from termpong.config.settings import Settings
from termpong.core.state import GameState
from termpong.game.arena import Arena


@pytest.fixture()
def arena():
    # Small literal offsets: top=1, bottom=41, left=1, right=111
    return Arena(top=1, bottom=41, left=1, right=111, mid_x=56, mid_y=21)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def state(arena, rng):
    return GameState.new(arena, rng)


@pytest.fixture()
def settings(tmp_path):
    """Settings with a clock slow enough that no tick fires during a test."""
    return Settings(tick_period_ms=60_000, input_poll_ms=5, log_file=tmp_path / "app.log")


@pytest.fixture()
def fast_settings(tmp_path):
    return Settings(tick_period_ms=1, input_poll_ms=5, log_file=tmp_path / "app.log")
