"""Mock hardware implementations for the simulator."""

from .screen import MockScreen

__all__ = [
    "MockScreen",
]
