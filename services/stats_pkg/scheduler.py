"""
Recompute Scheduler - Quyet dinh KHI NAO tinh lai stats.

State machine:
    Idle --edit--> PendingAt(deadline) --edit--> PendingAt(deadline moi)
    PendingAt --timer fire--> Idle (+ recompute, broadcast)
    PendingAt --focus change / recompute_now--> Idle (+ recompute ngay)
    * --shutdown--> Idle (timer bi dispose, khong broadcast nua)

Hai loai trigger:
- Immediate: active document doi -> recompute dong bo, broadcast ngay
- Coalesced: edit lien tuc -> chi 1 recompute sau quiet window ke tu
  edit cuoi cung (debounce)

Recompute luon doc content va config TAI THOI DIEM CHAY, khong phai
tai thoi diem trigger.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from core.logging_config import log_debug, log_error
from core.text_stats import StatsSnapshot
from core.utils.safe_timer import thread_timer_factory
from services.interfaces.stats_service import ICancellableTimer, TimerFactory
from services.stats_pkg.sink_registry import SinkRegistry

DEFAULT_QUIET_WINDOW_MS = 500

# Timer co the fire som hon deadline mot chut (QTimer, clock jitter)
_EARLY_FIRE_TOLERANCE = 0.02


@dataclass(frozen=True)
class Idle:
    """Khong co recompute nao dang cho."""


@dataclass(frozen=True)
class PendingAt:
    """Co mot coalesced recompute se chay tai deadline (clock seconds)."""

    deadline: float


SchedulerState = Union[Idle, PendingAt]

IDLE = Idle()


class RecomputeScheduler:
    """
    Debounce edit events va broadcast StatsSnapshot toi SinkRegistry.

    So huu duy nhat mot cancellable timer (tao mot lan, restart moi
    lan co edit). Lock bao ve state va timer handle khi chay voi
    OS threads (watchdog thread, Timer thread).

    Attributes:
        _compute_snapshot: Callable doc document + config hien tai va tinh snapshot
        _registry: SinkRegistry nhan snapshot
        _state: Idle hoac PendingAt(deadline)
    """

    def __init__(
        self,
        compute_snapshot: Callable[[], StatsSnapshot],
        registry: SinkRegistry,
        quiet_window_ms: int = DEFAULT_QUIET_WINDOW_MS,
        timer_factory: Optional[TimerFactory] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            compute_snapshot: Ham tinh snapshot tu state hien tai cua host
            registry: Noi broadcast ket qua
            quiet_window_ms: Quiet window cho debounce (ms, >= 0)
            timer_factory: Tao one-shot timer (mac dinh SafeTimer tren Timer thread)
            clock: Monotonic clock (seconds), inject duoc cho tests
        """
        if quiet_window_ms < 0:
            raise ValueError(f"quiet_window_ms must be >= 0, got {quiet_window_ms}")

        self._compute_snapshot = compute_snapshot
        self._registry = registry
        self._quiet_window_ms = quiet_window_ms
        self._clock = clock

        factory = timer_factory or thread_timer_factory
        self._timer: ICancellableTimer = factory(
            quiet_window_ms / 1000.0, self._on_timer_fired
        )
        self._timer_factory = factory

        self._lock = threading.Lock()
        self._state: SchedulerState = IDLE
        self._is_shutdown = False
        self._last_snapshot: Optional[StatsSnapshot] = None
        self._recompute_count = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> SchedulerState:
        with self._lock:
            return self._state

    @property
    def is_pending(self) -> bool:
        return isinstance(self.state, PendingAt)

    @property
    def is_shutdown(self) -> bool:
        with self._lock:
            return self._is_shutdown

    @property
    def last_snapshot(self) -> Optional[StatsSnapshot]:
        """Snapshot broadcast gan nhat (None neu chua co lan nao)."""
        with self._lock:
            return self._last_snapshot

    @property
    def recompute_count(self) -> int:
        with self._lock:
            return self._recompute_count

    @property
    def quiet_window_ms(self) -> int:
        return self._quiet_window_ms

    def set_quiet_window_ms(self, quiet_window_ms: int) -> None:
        """
        Doi quiet window. Timer duoc tao lai; recompute dang cho (neu co)
        duoc hen lai theo window moi.
        """
        if quiet_window_ms < 0:
            raise ValueError(f"quiet_window_ms must be >= 0, got {quiet_window_ms}")

        with self._lock:
            if self._is_shutdown or quiet_window_ms == self._quiet_window_ms:
                return
            was_pending = isinstance(self._state, PendingAt)
            self._timer.dispose()
            self._state = IDLE
            self._quiet_window_ms = quiet_window_ms
            self._timer = self._timer_factory(
                quiet_window_ms / 1000.0, self._on_timer_fired
            )
            if was_pending:
                self._state = PendingAt(self._clock() + quiet_window_ms / 1000.0)
                self._timer.start()

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def notify_active_document_changed(self) -> Optional[StatsSnapshot]:
        """Immediate trigger: focus switch. Huy pending edit va tinh ngay."""
        return self.recompute_now(reason="focus")

    def notify_content_edited(self) -> None:
        """
        Coalesced trigger: edit tai cho.

        Moi edit huy timer dang cho va hen lai sau quiet window.
        """
        with self._lock:
            if self._is_shutdown:
                return
            deadline = self._clock() + self._quiet_window_ms / 1000.0
            self._state = PendingAt(deadline)
            # start() tu cancel lan hen truoc
            self._timer.start()

        log_debug(f"[Scheduler] Edit coalesced, recompute at {deadline:.3f}")

    def recompute_now(self, reason: str = "manual") -> Optional[StatsSnapshot]:
        """
        Recompute dong bo va broadcast ngay (vd: sau khi settings doi).

        Returns:
            Snapshot moi, hoac None neu da shutdown / compute loi
        """
        with self._lock:
            if self._is_shutdown:
                return None
            self._timer.cancel()
            self._state = IDLE

        return self._recompute(reason)

    def shutdown(self) -> None:
        """Huy timer dang cho. Sau shutdown khong con broadcast nao."""
        with self._lock:
            if self._is_shutdown:
                return
            self._is_shutdown = True
            self._state = IDLE
            self._timer.dispose()

        log_debug("[Scheduler] Shutdown")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _on_timer_fired(self) -> None:
        """Callback cua timer: PendingAt -> Idle + recompute."""
        with self._lock:
            state = self._state
            if self._is_shutdown or not isinstance(state, PendingAt):
                return
            # Fire tre cua mot burst truoc; timer da duoc hen lai
            if self._clock() + _EARLY_FIRE_TOLERANCE < state.deadline:
                return
            self._state = IDLE

        self._recompute("edit")

    def _recompute(self, reason: str) -> Optional[StatsSnapshot]:
        try:
            snapshot = self._compute_snapshot()
        except Exception as e:
            log_error(f"[Scheduler] Recompute ({reason}) failed", e)
            return None

        with self._lock:
            if self._is_shutdown:
                return None
            self._last_snapshot = snapshot
            self._recompute_count += 1

        log_debug(
            f"[Scheduler] Recompute ({reason}): "
            f"{snapshot.words} words, {snapshot.characters} chars"
        )
        self._registry.broadcast(snapshot)
        return snapshot
