"""
Stats Package - Scheduler va Sink Registry cho text statistics.

Export cac symbols chinh:
- RecomputeScheduler (debounce + broadcast)
- SinkRegistry (tap hop display surfaces)
- Idle, PendingAt (scheduler states)
"""

from services.stats_pkg.scheduler import (
    DEFAULT_QUIET_WINDOW_MS,
    IDLE,
    Idle,
    PendingAt,
    RecomputeScheduler,
)
from services.stats_pkg.sink_registry import SinkRegistry

__all__ = [
    "DEFAULT_QUIET_WINDOW_MS",
    "IDLE",
    "Idle",
    "PendingAt",
    "RecomputeScheduler",
    "SinkRegistry",
]
