"""
Interfaces cho Stats pipeline (scheduler, timers, sinks).

Sink chi la mot capability: callable nhan StatsSnapshot va render.
Khong can class hierarchy - function, bound method, hay object co
__call__ deu dung duoc.
"""

from typing import Callable, Protocol

from core.text_stats import StatsSnapshot

# Display surface nhan snapshot moi nhat
Sink = Callable[[StatsSnapshot], None]


class ICancellableTimer(Protocol):
    """One-shot timer co the cancel (SafeTimer, QtSingleShotTimer)."""

    def start(self) -> None: ...

    def cancel(self) -> None: ...

    def dispose(self) -> None: ...


# (interval_seconds, callback) -> timer chua start
TimerFactory = Callable[[float, Callable[[], None]], ICancellableTimer]
