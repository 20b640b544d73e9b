"""
Abstract screen interface.

This is the contract the game core draws through and reads input
from. The real terminal backend and the simulator's in-memory screen
both implement it.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, auto

logger = logging.getLogger(__name__)


class Key(Enum):
    """Keys the game reacts to."""
    UP = auto()
    DOWN = auto()
    ESCAPE = auto()
    INTERRUPT = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Style:
    """Cell style: a foreground color name and optional bold."""
    foreground: str = "white"
    bold: bool = False

    @property
    def formatter_name(self) -> str:
        """Compound attribute name as understood by terminal formatters."""
        return f"bold_{self.foreground}" if self.bold else self.foreground


DEFAULT_STYLE = Style()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    text: str = ""


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


ScreenEvent = KeyEvent | ResizeEvent


class Screen(ABC):
    """Abstract base class for cell-addressable screens."""

    @abstractmethod
    def init(self) -> None:
        """
        Acquire the output device.

        Raises:
            ScreenInitError: if the screen cannot be set up
        """
        ...

    @abstractmethod
    def fini(self) -> None:
        """Release the output device and restore its previous state."""
        ...

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Current (width, height) in cells."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Blank the frame buffer."""
        ...

    @abstractmethod
    def set_cell(self, x: int, y: int, glyph: str, style: Style = DEFAULT_STYLE) -> None:
        """Write one glyph into the frame buffer. Off-screen cells are ignored."""
        ...

    @abstractmethod
    def show(self) -> None:
        """Present the frame buffer."""
        ...

    @abstractmethod
    def sync(self) -> None:
        """Adopt the current size and force a full redraw on the next show()."""
        ...

    @abstractmethod
    def poll_event(self, timeout: float | None = None) -> ScreenEvent | None:
        """
        Wait for the next input event.

        Args:
            timeout: Seconds to wait, or None to block

        Returns:
            The event, or None if the timeout expired
        """
        ...

    @abstractmethod
    def disable_mouse(self) -> None:
        """Turn off mouse reporting."""
        ...

    def write_text(self, x: int, y: int, text: str, style: Style = DEFAULT_STYLE) -> None:
        """Write a string left to right starting at (x, y)."""
        for i, char in enumerate(text):
            self.set_cell(x + i, y, char, style)


@contextmanager
def screen_session(screen: Screen) -> Iterator[Screen]:
    """
    Hold the screen for the duration of the block.

    The screen is released on every exit path; exceptions from the
    block propagate after teardown so the terminal is never left in a
    broken state.
    """
    screen.init()
    logger.info("Screen acquired")
    try:
        yield screen
    finally:
        screen.fini()
        logger.info("Screen released")
