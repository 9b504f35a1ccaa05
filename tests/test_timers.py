from itertools import accumulate

import pytest

from ultrakit.mesgqueue import MessageQueue, WouldBlock
from ultrakit.timers import Timer, TimerService


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make_service(now=0):
    clock = FakeClock(now)
    writes = []
    return clock, writes, TimerService(clock, writes.append)


def test_insert_orders_by_expiry():
    _, _, service = make_service()
    a, b, c = Timer(value=10), Timer(value=30), Timer(value=20)
    for t in (a, b, c):
        service.insert(t)
    assert service.pending == (a, c, b)
    assert list(accumulate(t.value for t in service.pending)) == [10, 20, 30]


def test_insert_returns_delta():
    _, _, service = make_service()
    service.insert(Timer(value=10))
    assert service.insert(Timer(value=25)) == 25 - 10


def test_set_timer_arms_compare_for_first_timer():
    clock, writes, service = make_service(now=100)
    t = Timer()
    service.set_timer(t, 50, 0)
    assert t in service
    assert writes[-1] == 100 + 50
    assert service.compare == writes[-1]


def test_set_timer_uses_interval_when_value_is_zero():
    _, _, service = make_service()
    t = Timer()
    service.set_timer(t, 0, 40)
    assert t.value == 40
    assert t.interval == 40


def test_interrupt_fires_one_shot_timer():
    clock, writes, service = make_service()
    q = MessageQueue(2)
    t = Timer()
    service.set_timer(t, 50, 0, q, "tick")
    clock.now = 60
    service.interrupt()
    assert q.recv(block=False) == "tick"
    assert t not in service
    assert writes[-1] == 0
    assert service.timer_counter == 0


def test_interrupt_reinserts_periodic_timer():
    clock, writes, service = make_service()
    q = MessageQueue(4)
    t = Timer()
    service.set_timer(t, 50, 50, q, "tick")
    clock.now = 60
    service.interrupt()
    assert q.recv(block=False) == "tick"
    assert t in service
    assert t.value == 50
    assert writes[-1] == clock.now + 50


def test_interrupt_before_expiry_reduces_value():
    clock, writes, service = make_service()
    q = MessageQueue(1)
    t = Timer()
    service.set_timer(t, 50, 0, q, "tick")
    clock.now = 20
    service.interrupt()
    assert t.value == 50 - 20
    assert writes[-1] == clock.now + t.value
    with pytest.raises(WouldBlock):
        q.recv(block=False)


def test_interrupt_ignores_full_queue():
    clock, _, service = make_service()
    q = MessageQueue(1)
    q.send("old", block=False)
    t = Timer()
    service.set_timer(t, 5, 0, q, "new")
    clock.now = 10
    service.interrupt()
    assert t not in service
    assert q.recv(block=False) == "old"


def test_stop_gives_delta_back_to_next_timer():
    _, _, service = make_service()
    a, b = Timer(), Timer()
    service.set_timer(a, 10, 0)
    service.set_timer(b, 25, 0)
    service.stop(a)
    assert service.pending == (b,)
    assert b.value == 25


def test_stop_last_timer_clears_compare():
    _, writes, service = make_service(now=7)
    t = Timer()
    service.set_timer(t, 10, 0)
    service.stop(t)
    assert writes[-1] == 0
    assert service.pending == ()


def test_stop_idle_timer_raises():
    _, _, service = make_service()
    with pytest.raises(ValueError):
        service.stop(Timer())


def test_get_time_adds_elapsed_count():
    clock, _, service = make_service()
    service.set_time(100)
    clock.now = 5
    assert service.get_time() == 100 + 5


def test_get_time_wraps_counter():
    clock, _, service = make_service()
    service.base_counter = 0xFFFFFFFF
    clock.now = 1
    assert service.get_time() == 2