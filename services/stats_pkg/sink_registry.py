"""
Sink Registry - Tap hop dong cac display surfaces nhan StatsSnapshot.

Sinks co the register/unregister bat ky luc nao (panel mo/dong).
broadcast() lay snapshot membership tai thoi diem goi, sau do moi
deliver - nen sink them vao giua chung khong nhan snapshot do, va sink
bi go ra sau khi da duoc phuc vu khong bi anh huong.
"""

import threading

from core.logging_config import log_debug, log_error
from core.text_stats import StatsSnapshot
from services.interfaces.stats_service import Sink


class SinkRegistry:
    """
    Registry giu membership cua sinks (khong so huu logic render).

    Thread Safety: lock chi bao ve membership set, khong giu lock
    trong luc deliver de sink co the unregister chinh no.
    """

    def __init__(self) -> None:
        # dict lam ordered set
        self._sinks: dict[Sink, None] = {}
        self._lock = threading.Lock()

    def register(self, sink: Sink) -> None:
        """Them sink. Register lai sink da co la no-op."""
        with self._lock:
            self._sinks[sink] = None

    def unregister(self, sink: Sink) -> None:
        """Go sink. Sink chua register -> no-op."""
        with self._lock:
            self._sinks.pop(sink, None)

    def __contains__(self, sink: object) -> bool:
        with self._lock:
            return sink in self._sinks

    def __len__(self) -> int:
        with self._lock:
            return len(self._sinks)

    def clear(self) -> None:
        """Go tat ca sinks (khi shutdown)."""
        with self._lock:
            self._sinks.clear()

    def broadcast(self, snapshot: StatsSnapshot) -> int:
        """
        Gui snapshot toi moi sink dang register.

        Sink raise exception se duoc log va bo qua, cac sink con lai
        van nhan snapshot.

        Returns:
            So sinks nhan thanh cong
        """
        with self._lock:
            targets = list(self._sinks)

        delivered = 0
        for sink in targets:
            try:
                sink(snapshot)
                delivered += 1
            except Exception as e:
                log_error(f"[SinkRegistry] Sink {sink!r} failed", e)

        log_debug(f"[SinkRegistry] Delivered snapshot to {delivered}/{len(targets)} sinks")
        return delivered
