"""Bounded message queues and the table that routes system events to them."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Hashable


class WouldBlock(Exception):
    """Raised by a non-blocking queue operation that would have had to wait."""


class MessageQueue:
    """A fixed-capacity FIFO of messages shared between threads.

    Blocking operations wait until the queue has room or holds a message;
    non-blocking operations raise WouldBlock instead of waiting.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._messages: deque[Any] = deque()
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._cond:
            return len(self._messages)

    @property
    def empty(self) -> bool:
        return len(self) == 0

    @property
    def full(self) -> bool:
        return len(self) >= self._capacity

    def _wait_for_room(self, block: bool) -> None:
        while len(self._messages) >= self._capacity:
            if not block:
                raise WouldBlock("message queue is full")
            self._cond.wait()

    def send(self, msg: Any, block: bool = True) -> None:
        """Append msg at the back of the queue."""
        with self._cond:
            self._wait_for_room(block)
            self._messages.append(msg)
            self._cond.notify_all()

    def jam(self, msg: Any, block: bool = True) -> None:
        """Put msg at the front of the queue so it is received next."""
        with self._cond:
            self._wait_for_room(block)
            self._messages.appendleft(msg)
            self._cond.notify_all()

    def recv(self, block: bool = True) -> Any:
        """Remove and return the message at the front of the queue."""
        with self._cond:
            while not self._messages:
                if not block:
                    raise WouldBlock("message queue is empty")
                self._cond.wait()
            msg = self._messages.popleft()
            self._cond.notify_all()
            return msg


class EventTable:
    """Maps each event to the queue and message to post when it occurs."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, tuple[MessageQueue | None, Any]] = {}
        self._lock = threading.Lock()

    def set(self, event: Hashable, queue: MessageQueue | None, msg: Any) -> None:
        """Register queue and msg for event, replacing any earlier registration."""
        with self._lock:
            self._entries[event] = (queue, msg)

    def get(self, event: Hashable) -> tuple[MessageQueue | None, Any] | None:
        """Return the (queue, msg) registered for event, or None."""
        with self._lock:
            return self._entries.get(event)