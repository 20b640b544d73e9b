"""Screen abstraction layer for termpong."""

from .base import (
    DEFAULT_STYLE,
    Key,
    KeyEvent,
    ResizeEvent,
    Screen,
    ScreenEvent,
    Style,
    screen_session,
)

__all__ = [
    # Contract
    "Screen",
    "screen_session",
    # Events
    "Key",
    "KeyEvent",
    "ResizeEvent",
    "ScreenEvent",
    # Styling
    "Style",
    "DEFAULT_STYLE",
]
