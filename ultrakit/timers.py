"""One-shot and periodic timers driven by a free-running 32-bit counter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ultrakit.mesgqueue import MessageQueue, WouldBlock

_U32 = 0xFFFFFFFF


@dataclass(eq=False)
class Timer:
    """A timer; while pending, value counts relative to the timer before it."""

    value: int = 0
    interval: int = 0
    queue: MessageQueue | None = None
    msg: Any = None


class TimerService:
    """Keeps pending timers in expiry order and fires them from interrupts.

    clock returns the current hardware count; set_compare, if given, is called
    with each value written to the compare register.
    """

    def __init__(
        self,
        clock: Callable[[], int],
        set_compare: Callable[[int], Any] | None = None,
    ) -> None:
        self._clock = clock
        self._set_compare = set_compare
        self._timers: list[Timer] = []
        self.current_time = 0
        self.base_counter = 0
        self.timer_counter = 0
        self.compare = 0

    @property
    def pending(self) -> tuple[Timer, ...]:
        """Pending timers in the order they will expire."""
        return tuple(self._timers)

    def __contains__(self, timer: object) -> bool:
        return any(t is timer for t in self._timers)

    def _count(self) -> int:
        return self._clock() & _U32

    def _write_compare(self, value: int) -> None:
        self.compare = value & _U32
        if self._set_compare is not None:
            self._set_compare(self.compare)

    def _set_timer_intr(self, time: int) -> None:
        self.timer_counter = self._count()
        self._write_compare(time + self.timer_counter)

    def _index(self, timer: Timer) -> int:
        for index, t in enumerate(self._timers):
            if t is timer:
                return index
        raise ValueError("timer is not running")

    def insert(self, timer: Timer) -> int:
        """Insert timer in expiry order; return its delta from the timer before it."""
        remaining = timer.value
        index = 0
        for index, t in enumerate(self._timers):
            if remaining <= t.value:
                break
            remaining -= t.value
        else:
            index = len(self._timers)
        timer.value = remaining
        if index < len(self._timers):
            self._timers[index].value -= remaining
        self._timers.insert(index, timer)
        return remaining

    def set_timer(
        self,
        timer: Timer,
        value: int,
        interval: int,
        queue: MessageQueue | None = None,
        msg: Any = None,
    ) -> None:
        """Start timer to expire after value counts, then every interval if nonzero."""
        timer.interval = interval
        timer.value = value if value != 0 else interval
        timer.queue = queue
        timer.msg = msg
        time = self.insert(timer)
        if self._timers[0] is timer:
            self._set_timer_intr(time)

    def stop(self, timer: Timer) -> None:
        """Cancel a pending timer; raises ValueError if it is not pending."""
        index = self._index(timer)
        del self._timers[index]
        if index < len(self._timers):
            self._timers[index].value += timer.value
        if not self._timers:
            self._write_compare(0)

    def interrupt(self) -> None:
        """Fire every timer whose time has come and rearm the compare register."""
        if not self._timers:
            return
        while True:
            if not self._timers:
                self._write_compare(0)
                self.timer_counter = 0
                return
            timer = self._timers[0]
            count = self._count()
            elapsed = (count - self.timer_counter) & _U32
            self.timer_counter = count
            if elapsed < timer.value:
                timer.value -= elapsed
                self._set_timer_intr(timer.value)
                return
            del self._timers[0]
            if timer.queue is not None:
                try:
                    timer.queue.send(timer.msg, block=False)
                except WouldBlock:
                    pass
            if timer.interval != 0:
                timer.value = timer.interval
                self.insert(timer)

    def get_time(self) -> int:
        """Current time: the stored time plus counts elapsed since the base count."""
        elapsed = (self._count() - self.base_counter) & _U32
        return self.current_time + elapsed

    def set_time(self, time: int) -> None:
        """Set the stored time."""
        self.current_time = time