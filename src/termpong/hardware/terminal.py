"""
Terminal screen backed by blessed.

Draws into a numpy cell buffer and writes only the rows that changed
since the last frame.
"""

import logging
import sys
from contextlib import ExitStack
from itertools import groupby

import numpy as np
from blessed import Terminal
from blessed.keyboard import Keystroke
from numpy.typing import NDArray

from termpong.errors import ScreenInitError
from termpong.hardware.base import (
    DEFAULT_STYLE,
    Key,
    KeyEvent,
    ResizeEvent,
    Screen,
    ScreenEvent,
    Style,
)

logger = logging.getLogger(__name__)

# Control character delivered for Ctrl-C while the terminal is in raw mode
CTRL_C = "\x03"

# Turns off X10, normal and button-event mouse tracking
MOUSE_OFF = "\x1b[?1000l\x1b[?1002l\x1b[?1003l"

# Glyph that never appears on screen, marks cells for redraw
_STALE = "\x00"


def translate_keystroke(term: Terminal, keystroke: Keystroke) -> Key:
    """Map a blessed keystroke to a game key."""
    if keystroke.code == term.KEY_UP:
        return Key.UP
    if keystroke.code == term.KEY_DOWN:
        return Key.DOWN
    if keystroke.code == term.KEY_ESCAPE:
        return Key.ESCAPE
    if str(keystroke) == CTRL_C:
        return Key.INTERRUPT
    return Key.OTHER


class TerminalScreen(Screen):
    """
    Full-screen terminal using blessed.

    The terminal is put in raw mode so Ctrl-C arrives as a key and the
    game can shut down cleanly instead of being interrupted mid-frame.
    """

    def __init__(self, term: Terminal | None = None) -> None:
        self._term = term
        self._stack = ExitStack()
        self._active = False
        self._last_size = (0, 0)
        self._styles: list[Style] = [DEFAULT_STYLE]
        self._style_ids: dict[Style, int] = {DEFAULT_STYLE: 0}
        self._glyphs: NDArray[np.str_] = np.full((0, 0), " ", dtype="<U1")
        self._style_map: NDArray[np.int16] = np.zeros((0, 0), dtype=np.int16)
        self._front_glyphs = self._glyphs.copy()
        self._front_styles = self._style_map.copy()

    @property
    def term(self) -> Terminal:
        if self._term is None:
            raise ScreenInitError("Screen not initialized")
        return self._term

    def init(self) -> None:
        try:
            if self._term is None:
                self._term = Terminal()
            if not self._term.is_a_tty or not sys.stdin.isatty():
                raise ScreenInitError("termpong needs an interactive terminal")
            self._stack.enter_context(self._term.fullscreen())
            self._stack.enter_context(self._term.raw())
            self._stack.enter_context(self._term.hidden_cursor())
        except ScreenInitError:
            self._stack.close()
            raise
        except Exception as e:
            self._stack.close()
            raise ScreenInitError(f"Could not initialize terminal: {e}") from e

        self._active = True
        self._last_size = self.size()
        self._allocate(*self._last_size)
        logger.info(f"Terminal {self._term.kind} initialized at {self._last_size}")

    def fini(self) -> None:
        if not self._active:
            return
        self._active = False
        self._write(self.term.normal)
        self._stack.close()
        logger.info("Terminal restored")

    def size(self) -> tuple[int, int]:
        return self.term.width, self.term.height

    def clear(self) -> None:
        self._glyphs.fill(" ")
        self._style_map.fill(0)

    def set_cell(self, x: int, y: int, glyph: str, style: Style = DEFAULT_STYLE) -> None:
        height, width = self._glyphs.shape
        if 0 <= x < width and 0 <= y < height:
            self._glyphs[y, x] = glyph
            self._style_map[y, x] = self._style_id(style)

    def show(self) -> None:
        dirty = np.any(self._glyphs != self._front_glyphs, axis=1)
        dirty |= np.any(self._style_map != self._front_styles, axis=1)

        output = []
        for y in np.flatnonzero(dirty):
            output.append(self.term.move_xy(0, int(y)))
            output.append(self._render_row(int(y)))

        np.copyto(self._front_glyphs, self._glyphs)
        np.copyto(self._front_styles, self._style_map)
        if output:
            self._write("".join(output))

    def sync(self) -> None:
        width, height = self.size()
        self._allocate(width, height)
        self._write(self.term.clear)
        logger.debug(f"Screen synced to {width}x{height}")

    def poll_event(self, timeout: float | None = None) -> ScreenEvent | None:
        resize = self._check_resize()
        if resize is not None:
            return resize

        keystroke = self.term.inkey(timeout=timeout)
        if not keystroke:
            return self._check_resize()
        return KeyEvent(translate_keystroke(self.term, keystroke), str(keystroke))

    def disable_mouse(self) -> None:
        self._write(MOUSE_OFF)

    def _check_resize(self) -> ResizeEvent | None:
        size = self.size()
        if size == self._last_size:
            return None
        self._last_size = size
        return ResizeEvent(*size)

    def _allocate(self, width: int, height: int) -> None:
        self._glyphs = np.full((height, width), " ", dtype="<U1")
        self._style_map = np.zeros((height, width), dtype=np.int16)
        # Everything is stale until the next show()
        self._front_glyphs = np.full((height, width), _STALE, dtype="<U1")
        self._front_styles = np.zeros((height, width), dtype=np.int16)

    def _style_id(self, style: Style) -> int:
        style_id = self._style_ids.get(style)
        if style_id is None:
            style_id = len(self._styles)
            self._styles.append(style)
            self._style_ids[style] = style_id
        return style_id

    def _render_row(self, y: int) -> str:
        width = self._glyphs.shape[1]
        if y == self._glyphs.shape[0] - 1:
            # Writing the bottom-right cell scrolls some terminals
            width -= 1

        cells = zip(self._style_map[y, :width], self._glyphs[y, :width])
        parts = []
        for style_id, run in groupby(cells, key=lambda cell: cell[0]):
            text = "".join(glyph for _, glyph in run)
            formatter = getattr(self.term, self._styles[style_id].formatter_name)
            parts.append(formatter(text))
        return "".join(parts)

    def _write(self, text: str) -> None:
        stream = self.term.stream
        stream.write(text)
        stream.flush()
