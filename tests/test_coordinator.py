import asyncio

import pytest

from termpong.core.coordinator import Coordinator
from termpong.core.events import key_event, resize_event, tick_event
from termpong.core.state import GameState
from termpong.game.arena import Arena
from termpong.game.direction import Direction
from termpong.game.entities import Ball
from termpong.graphics.renderer import BLOCK, UL_CORNER
from termpong.hardware.base import Key, KeyEvent, screen_session
from termpong.simulator.mock_hardware import MockScreen


async def wait_until(condition, timeout=5.0):
    async def poll():
        while not condition():
            await asyncio.sleep(0.005)
    await asyncio.wait_for(poll(), timeout)


@pytest.mark.asyncio
async def test_keys_move_left_paddle_until_escape(settings):
    screen = MockScreen(150, 60, events=[
        KeyEvent(Key.UP),
        KeyEvent(Key.UP),
        KeyEvent(Key.DOWN),
        KeyEvent(Key.UP),
        KeyEvent(Key.ESCAPE),
    ])

    state = await asyncio.wait_for(Coordinator(screen, settings).run(), timeout=5)

    assert (state.left.paddle.y_top, state.left.paddle.y_bot) == (26, 29)
    assert state.tick_count == 0
    # Initial frame plus one per key
    assert screen.frames == 5
    assert not screen.mouse_enabled
    assert screen.cell(21, 26) == BLOCK


@pytest.mark.asyncio
async def test_ticks_drive_the_simulation(fast_settings):
    screen = MockScreen(150, 60)
    coordinator = Coordinator(screen, fast_settings)
    task = asyncio.create_task(coordinator.run())

    await wait_until(lambda: coordinator.state is not None and coordinator.state.tick_count >= 20)
    screen.push_event(KeyEvent(Key.ESCAPE))
    state = await asyncio.wait_for(task, timeout=5)

    assert state.tick_count >= 20
    assert state.arena.contains(state.ball.x, state.ball.y)
    assert screen.frames >= state.tick_count + 1
    # Computer paddle follows the ball
    assert state.right.paddle.y_top <= state.ball.y <= state.right.paddle.y_bot


@pytest.mark.asyncio
async def test_resize_moves_the_arena(settings):
    screen = MockScreen(150, 60)
    coordinator = Coordinator(screen, settings)
    task = asyncio.create_task(coordinator.run())

    await wait_until(lambda: screen.frames >= 1)
    ball = coordinator.state.ball
    start = (ball.x, ball.y)
    screen.resize(200, 80)
    screen.push_event(KeyEvent(Key.ESCAPE))
    state = await asyncio.wait_for(task, timeout=5)

    assert state.arena == Arena.from_size(200, 80)
    assert (state.ball.x, state.ball.y) == (start[0] + 25, start[1] + 10)
    assert state.left.paddle.x == state.arena.left + 1
    assert state.right.paddle.x == state.arena.right - 1
    assert state.tick_count == 0
    assert screen.syncs == 1
    assert screen.cell(45, 20) == UL_CORNER


@pytest.mark.asyncio
async def test_small_window_skips_drawing_but_keeps_playing(settings):
    screen = MockScreen(100, 40)
    coordinator = Coordinator(screen, settings)
    task = asyncio.create_task(coordinator.run())

    await wait_until(lambda: screen.frames >= 1)
    assert screen.row_text(0).startswith('Window too small')
    assert screen.find(UL_CORNER) == []

    screen.push_event(KeyEvent(Key.DOWN))
    await wait_until(lambda: screen.frames >= 2)
    assert coordinator.state.left.paddle.y_top == coordinator.state.arena.mid_y - 1

    screen.resize(150, 60)
    screen.push_event(KeyEvent(Key.ESCAPE))
    await asyncio.wait_for(task, timeout=5)

    assert screen.find(UL_CORNER) == [(20, 10)]
    assert not screen.row_text(0).startswith('Window too small')


def test_key_during_serve_lock(settings, arena, rng):
    coordinator = Coordinator(MockScreen(), settings, rng=rng)
    coordinator.state = state = GameState.new(arena, rng)
    state.ball = Ball(56, 21, Direction.UP_RIGHT, lock=10)
    y_top = state.left.paddle.y_top

    coordinator.handle_event(key_event(Key.UP))
    coordinator.handle_event(tick_event(0))

    assert state.left.paddle.y_top == y_top - 1
    assert (state.ball.x, state.ball.y) == (56, 21)
    assert state.ball.lock == 9
    assert state.tick_count == 1


def test_key_respects_arena_bounds(settings, arena, rng):
    coordinator = Coordinator(MockScreen(), settings, rng=rng)
    coordinator.state = state = GameState.new(arena, rng)
    state.left.paddle.set_span(2, 5)

    coordinator.handle_event(key_event(Key.UP))

    assert (state.left.paddle.y_top, state.left.paddle.y_bot) == (2, 5)


def test_resize_event_is_not_a_tick(settings, arena, rng):
    screen = MockScreen()
    coordinator = Coordinator(screen, settings, rng=rng)
    coordinator.state = state = GameState.new(arena, rng)
    before = (state.ball.x, state.ball.y, state.ball.direction)

    coordinator.handle_event(resize_event(112, 42))

    assert (state.ball.x, state.ball.y, state.ball.direction) == before
    assert state.tick_count == 0
    assert screen.syncs == 1


class BrokenKeyboard(MockScreen):
    def poll_event(self, timeout=None):
        raise OSError('keyboard unplugged')


@pytest.mark.asyncio
async def test_input_failure_stops_the_loop(settings):
    with pytest.raises(OSError, match='keyboard unplugged'):
        await asyncio.wait_for(Coordinator(BrokenKeyboard(), settings).run(), timeout=5)


@pytest.mark.asyncio
async def test_screen_is_released_when_the_loop_fails(settings):
    screen = BrokenKeyboard()
    with pytest.raises(OSError):
        with screen_session(screen):
            await asyncio.wait_for(Coordinator(screen, settings).run(), timeout=5)
    assert screen.initialized
    assert screen.finished
