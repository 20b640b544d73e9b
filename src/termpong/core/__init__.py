"""Core framework components for termpong."""

from .state import GameState
from .events import Channel, Channels, Event, EventType

__all__ = ["GameState", "Channel", "Channels", "Event", "EventType"]
