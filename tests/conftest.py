"""
Shared fixtures: fake clock va manual timers cho debounce tests.

ManualTimer co cung interface start()/cancel()/dispose() voi SafeTimer,
nhung chi fire khi test goi fire().
"""

import pytest


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualTimer:
    """Timer gia: chi fire khi test goi fire()."""

    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.active = False
        self.disposed = False
        self.start_count = 0

    def start(self):
        if not self.disposed:
            self.active = True
            self.start_count += 1

    def cancel(self):
        self.active = False

    def dispose(self):
        self.disposed = True
        self.active = False

    def fire(self):
        if self.active:
            self.active = False
            self.callback()


class TimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, callback):
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer

    @property
    def current(self) -> ManualTimer:
        return self.timers[-1]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timers():
    return TimerFactory()
