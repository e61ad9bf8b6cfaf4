"""
SafeTimer - Thread-safe one-shot timer với cancellation.

Giải quyết các vấn đề với threading.Timer:
- Timer.cancel() không stop callback đã bắt đầu chờ lock
- Callback có thể chạy sau khi service đã cleanup

Usage:
    timer = SafeTimer(0.5, my_callback)
    timer.start()   # Start timer (auto-cancels previous)
    timer.cancel()  # Cancel timer và prevent callback
    timer.dispose() # Không thể start lại
"""

import threading
from threading import Timer
from typing import Callable, Optional

from core.logging_config import log_error


class SafeTimer:
    """
    Thread-safe timer với built-in cancellation.

    Features:
    - Cancellation flag được check trước khi execute callback
    - Auto-cancel timer cũ khi start() được gọi lại
    - Disposal-aware: không execute nếu đã bị disposed
    """

    def __init__(self, interval: float, callback: Callable[[], None]):
        """
        Khởi tạo SafeTimer.

        Args:
            interval: Số giây delay trước khi execute callback
            callback: Function sẽ được gọi sau interval (không nhận arguments)
        """
        self._interval = interval
        self._callback = callback

        self._lock = threading.Lock()
        self._cancelled = threading.Event()
        self._timer: Optional[Timer] = None
        self._is_disposed = False

    def start(self) -> None:
        """
        Start timer.

        Nếu có timer đang chạy, tự động cancel trước khi start timer mới.
        Thread-safe: có thể gọi từ bất kỳ thread nào.
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

            self._cancelled.clear()

            if self._is_disposed:
                return

            self._timer = Timer(self._interval, self._execute)
            self._timer.daemon = True  # Không block app shutdown
            self._timer.start()

    def cancel(self) -> None:
        """Cancel timer và prevent callback execution."""
        with self._lock:
            self._cancelled.set()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def dispose(self) -> None:
        """
        Dispose timer và prevent tất cả future callbacks.
        Sau khi dispose, timer không thể start lại.
        """
        with self._lock:
            self._is_disposed = True
            self._cancelled.set()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def is_active(self) -> bool:
        """Check xem timer có đang chờ fire không."""
        with self._lock:
            return self._timer is not None and not self._cancelled.is_set()

    def _execute(self) -> None:
        """Internal method - được gọi bởi Timer thread."""
        if self._cancelled.is_set():
            return

        with self._lock:
            if self._is_disposed or self._cancelled.is_set():
                return
            self._timer = None

        try:
            self._callback()
        except Exception as e:
            # Không để exception làm crash Timer thread
            log_error("[SafeTimer] Error in timer callback", e)


def thread_timer_factory(interval: float, callback: Callable[[], None]) -> SafeTimer:
    """Timer factory mặc định cho RecomputeScheduler (chạy trên Timer thread)."""
    return SafeTimer(interval, callback)
