"""termpong: two-player pong on a terminal cell grid."""

__version__ = "0.1.0"
