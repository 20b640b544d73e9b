"""Exception types raised by termpong components."""


class TermPongError(Exception):
    """Base class for all termpong errors."""


class ScreenInitError(TermPongError):
    """The terminal screen could not be acquired. Fatal at startup."""


class MinimumSizeError(TermPongError):
    """
    The terminal is smaller than the playable minimum.

    Recoverable: the coordinator skips drawing the arena until a
    resize brings the window back above the minimum.
    """

    def __init__(self, width: int, height: int, min_width: int, min_height: int) -> None:
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        super().__init__(
            f"Window too small: {width}x{height} (need {min_width}x{min_height})"
        )


class DirectionError(TermPongError):
    """A direction that can never be applied to the ball was observed."""
