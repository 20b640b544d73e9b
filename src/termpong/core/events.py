"""
Event sources for the game loop.

The coordinator is fed by two helper tasks, a ticker and a keyboard
reader, over one-slot rendezvous channels. A send only completes once
the coordinator has taken the value, so while a frame is being
processed the producers wait: late ticks slip instead of piling up and
at most one event is handled per frame.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from termpong.hardware.base import Key, KeyEvent, ResizeEvent, Screen

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EventType(Enum):
    """Events the coordinator reacts to."""
    TICK = auto()
    KEY = auto()
    RESIZE = auto()
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Task that emitted the event
        timestamp: Monotonic time the event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.monotonic)


class Channel(Generic[T]):
    """
    Unbuffered channel between one producer task and the coordinator.

    send() returns only after receive() has taken the value.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._queue: asyncio.Queue[T] = asyncio.Queue(maxsize=1)

    async def send(self, item: T) -> None:
        await self._queue.put(item)
        await self._queue.join()

    async def receive(self) -> T:
        item = await self._queue.get()
        self._queue.task_done()
        return item

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"


@dataclass
class Channels:
    """The coordinator's inputs, one channel per event source."""
    tick: Channel[Event] = field(default_factory=lambda: Channel("tick"))
    key: Channel[Event] = field(default_factory=lambda: Channel("key"))
    resize: Channel[Event] = field(default_factory=lambda: Channel("resize"))
    shutdown: Channel[Event] = field(default_factory=lambda: Channel("shutdown"))

    def by_priority(self) -> tuple[Channel[Event], ...]:
        """Order used when several sources are ready at once."""
        return (self.shutdown, self.resize, self.key, self.tick)


# Convenience functions for creating events
def tick_event(index: int) -> Event:
    return Event(EventType.TICK, data={"index": index}, source="ticker")


def key_event(key: Key) -> Event:
    return Event(EventType.KEY, data={"key": key}, source="input")


def resize_event(width: int, height: int) -> Event:
    return Event(EventType.RESIZE, data={"width": width, "height": height}, source="input")


def shutdown_event(reason: str) -> Event:
    return Event(EventType.SHUTDOWN, data={"reason": reason}, source="input")


async def run_ticker(channel: Channel[Event], period: float) -> None:
    """Send a monotonically increasing tick index every period seconds."""
    index = 0
    logger.info(f"Ticker started ({period * 1000:.0f} ms)")
    while True:
        await asyncio.sleep(period)
        await channel.send(tick_event(index))
        index += 1


async def run_input(screen: Screen, channels: Channels, poll_timeout: float) -> None:
    """
    Forward keyboard and window events to the coordinator.

    The blocking poll runs in a worker thread with a short timeout so
    cancellation is noticed promptly. Returns after emitting shutdown.
    """
    logger.info("Input reader started")
    while True:
        event = await asyncio.to_thread(screen.poll_event, poll_timeout)
        if event is None:
            continue

        if isinstance(event, ResizeEvent):
            await channels.resize.send(resize_event(event.width, event.height))
        elif isinstance(event, KeyEvent):
            if event.key in (Key.ESCAPE, Key.INTERRUPT):
                logger.info(f"Shutdown requested ({event.key.name})")
                await channels.shutdown.send(shutdown_event(event.key.name))
                return
            if event.key in (Key.UP, Key.DOWN):
                await channels.key.send(key_event(event.key))
