"""
Game coordinator.

Owns the GameState and runs the frame loop. Each iteration handles
exactly one event (tick, key, resize or shutdown), then updates the
computer paddle, draws and presents the frame. The ticker and input
tasks only talk to it through channels; nothing else mutates state.
"""

import asyncio
import logging
import random

from termpong.config.settings import Settings, get_settings
from termpong.core.events import Channel, Channels, Event, EventType, run_input, run_ticker
from termpong.core.state import GameState
from termpong.errors import MinimumSizeError
from termpong.game.ai import track_ball
from termpong.game.arena import Arena
from termpong.game.simulation import advance_tick
from termpong.graphics.renderer import Renderer
from termpong.hardware.base import Key, Screen, Style

logger = logging.getLogger(__name__)


class Coordinator:
    """
    Single owner of the game state and the frame loop.

    Usage:
        coordinator = Coordinator(screen)
        state = await coordinator.run()
    """

    def __init__(
        self,
        screen: Screen,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.screen = screen
        self.settings = settings or get_settings()
        self.rng = rng
        self.channels = Channels()
        self.renderer = Renderer(
            screen,
            Style(self.settings.display.foreground, self.settings.display.bold),
        )

        self.state: GameState | None = None
        self._size_error: MinimumSizeError | None = None
        self._receivers: dict[Channel[Event], asyncio.Task[Event]] = {}
        self._helpers: list[asyncio.Task[None]] = []
        self._last_tick = -1

    async def run(self) -> GameState:
        """
        Play until shutdown.

        Returns:
            The final game state
        """
        width, height = self.screen.size()
        self.state = GameState.new(Arena.from_size(width, height), self.rng)
        self._check_size(width, height)

        self.screen.clear()
        self.screen.disable_mouse()
        self._present()

        self._helpers = [
            asyncio.create_task(
                run_ticker(self.channels.tick, self.settings.tick_period),
                name="ticker",
            ),
            asyncio.create_task(
                run_input(self.screen, self.channels, self.settings.input_poll_timeout),
                name="input",
            ),
        ]

        try:
            await self._loop()
        finally:
            await self._stop_tasks()

        logger.info(
            f"Game over after {self.state.tick_count} ticks, "
            f"score {self.state.left.score}:{self.state.right.score}"
        )
        return self.state

    async def _loop(self) -> None:
        while True:
            self.screen.clear()

            event = await self._next_event()
            if event.type is EventType.SHUTDOWN:
                logger.info(f"Shutting down: {event.data.get('reason')}")
                return

            self.handle_event(event)
            self._present()

    def handle_event(self, event: Event) -> None:
        """Apply one tick, key or resize event to the state."""
        state = self.state
        if state is None:
            raise RuntimeError("Coordinator is not running")

        if event.type is EventType.TICK:
            index = event.data["index"]
            if index <= self._last_tick:
                logger.warning(f"Out of order tick {index} after {self._last_tick}")
            self._last_tick = index
            state.tick_count += 1
            advance_tick(state, self.rng)

        elif event.type is EventType.KEY:
            paddle = state.left.paddle
            if event.data["key"] is Key.UP:
                paddle.move_up(state.arena)
            elif event.data["key"] is Key.DOWN:
                paddle.move_down(state.arena)

        elif event.type is EventType.RESIZE:
            width, height = event.data["width"], event.data["height"]
            self.screen.sync()
            state.relocate(Arena.from_size(width, height))
            self._check_size(width, height)

    def _present(self) -> None:
        """Update the computer paddle, draw and show the frame."""
        state = self.state
        track_ball(state.right.paddle, state.ball, state.arena)

        if self._size_error is None:
            self.renderer.draw(state)
        else:
            self.renderer.draw_size_warning(self._size_error)
        self.screen.show()

    def _check_size(self, width: int, height: int) -> None:
        try:
            Arena.check_size(
                width,
                height,
                self.settings.display.min_width,
                self.settings.display.min_height,
            )
        except MinimumSizeError as e:
            if self._size_error is None:
                logger.warning(f"{e}; drawing paused")
            self._size_error = e
        else:
            if self._size_error is not None:
                logger.info(f"Window resized to {width}x{height}; drawing resumed")
            self._size_error = None

    async def _next_event(self) -> Event:
        """
        Wait for exactly one event.

        A receive stays armed on every channel between calls, so a value
        taken from a channel is never lost; it is simply handled on a
        later iteration.
        """
        while True:
            for channel in self.channels.by_priority():
                if channel not in self._receivers:
                    self._receivers[channel] = asyncio.create_task(
                        channel.receive(), name=f"receive-{channel.name}"
                    )

            for channel in self.channels.by_priority():
                task = self._receivers[channel]
                if task.done():
                    del self._receivers[channel]
                    return task.result()

            live_helpers = [task for task in self._helpers if not task.done()]
            await asyncio.wait(
                [*self._receivers.values(), *live_helpers],
                return_when=asyncio.FIRST_COMPLETED,
            )

            for helper in self._helpers:
                if helper.done() and not helper.cancelled() and helper.exception():
                    raise helper.exception()

    async def _stop_tasks(self) -> None:
        tasks = [*self._helpers, *self._receivers.values()]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._helpers = []
        self._receivers = {}
