"""
Simulated screen for headless runs and tests.

Keeps the frame in a numpy character buffer and serves input from a
scripted event queue instead of a keyboard.
"""

import logging
import threading
import time
from collections import deque
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from termpong.errors import ScreenInitError
from termpong.hardware.base import (
    DEFAULT_STYLE,
    ResizeEvent,
    Screen,
    ScreenEvent,
    Style,
)

logger = logging.getLogger(__name__)


class MockScreen(Screen):
    """
    In-memory cell screen.

    Events pushed with push_event() are returned by poll_event() in
    order. The last presented frame is kept in ``presented`` so tests
    can inspect exactly what a player would have seen.
    """

    def __init__(
        self,
        width: int = 150,
        height: int = 60,
        events: Iterable[ScreenEvent] = (),
        fail_init: bool = False,
    ) -> None:
        self._width = width
        self._height = height
        self._events: deque[ScreenEvent] = deque(events)
        self._fail_init = fail_init
        self._lock = threading.Lock()
        self._buffer = self._blank()
        self.presented = self._blank()
        self.styles: dict[tuple[int, int], Style] = {}

        self.initialized = False
        self.finished = False
        self.mouse_enabled = True
        self.frames = 0
        self.syncs = 0

    def _blank(self) -> NDArray[np.str_]:
        return np.full((self._height, self._width), " ", dtype="<U1")

    def init(self) -> None:
        if self._fail_init:
            raise ScreenInitError("Simulated screen failure")
        self.initialized = True

    def fini(self) -> None:
        self.finished = True

    def size(self) -> tuple[int, int]:
        with self._lock:
            return self._width, self._height

    def clear(self) -> None:
        self._buffer.fill(" ")
        self.styles.clear()

    def set_cell(self, x: int, y: int, glyph: str, style: Style = DEFAULT_STYLE) -> None:
        height, width = self._buffer.shape
        if 0 <= x < width and 0 <= y < height:
            self._buffer[y, x] = glyph
            self.styles[(x, y)] = style

    def show(self) -> None:
        self.presented = self._buffer.copy()
        self.frames += 1

    def sync(self) -> None:
        self._buffer = self._blank()
        self.presented = self._blank()
        self.syncs += 1

    def poll_event(self, timeout: float | None = None) -> ScreenEvent | None:
        try:
            return self._events.popleft()
        except IndexError:
            pass
        # Nothing scripted; behave like an idle keyboard
        time.sleep(0.005 if timeout is None else min(timeout, 0.005))
        return None

    def disable_mouse(self) -> None:
        self.mouse_enabled = False

    # Simulator controls

    def push_event(self, event: ScreenEvent) -> None:
        self._events.append(event)

    def resize(self, width: int, height: int) -> None:
        """Change the simulated window size and report it as an event."""
        with self._lock:
            self._width = width
            self._height = height
        self.push_event(ResizeEvent(width, height))

    def cell(self, x: int, y: int) -> str:
        """Glyph at (x, y) in the last presented frame."""
        return str(self.presented[y, x])

    def row_text(self, y: int) -> str:
        return "".join(self.presented[y])

    def find(self, glyph: str) -> list[tuple[int, int]]:
        """All (x, y) cells showing a glyph in the last presented frame."""
        ys, xs = np.nonzero(self.presented == glyph)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]
