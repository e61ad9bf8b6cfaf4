"""
Qt Utilities - Thread-safe UI update functions cho PySide6

Sử dụng signal/slot pattern và QTimer cho UI-safe operations.
"""

from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Qt, QTimer, Signal, Slot

from core.logging_config import log_error


class SignalBridge(QObject):
    """
    Bridge để emit signals từ background threads tới main thread.

    Dùng signal/slot mechanism của Qt - thread-safe by design.

    Usage:
        bridge = SignalBridge()

        # Từ watchdog thread:
        bridge.run_on_main(lambda: scheduler.notify_content_edited())
    """

    callback_signal = Signal(object)  # Emit callable object

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.callback_signal.connect(
            self._execute_callback, Qt.ConnectionType.QueuedConnection
        )

    @Slot(object)
    def _execute_callback(self, callback: Callable[[], Any]) -> None:
        """Execute callback trên main thread."""
        try:
            callback()
        except Exception as e:
            log_error("Error in main-thread callback", e)

    def run_on_main(self, callback: Callable[[], Any]) -> None:
        """
        Schedule callback để chạy trên main (GUI) thread.

        Thread-safe: có thể gọi từ bất kỳ thread nào.

        Args:
            callback: Function không nhận argument
        """
        self.callback_signal.emit(callback)


# Global signal bridge instance
_global_bridge: Optional[SignalBridge] = None


def get_signal_bridge() -> SignalBridge:
    """
    Lấy global SignalBridge instance.

    Tạo mới nếu chưa có. PHẢI gọi lần đầu trên main thread.
    """
    global _global_bridge
    if _global_bridge is None:
        _global_bridge = SignalBridge()
    return _global_bridge


def run_on_main_thread(callback: Callable[[], Any]) -> None:
    """
    Chạy callback trên main thread.
    Thread-safe: có thể gọi từ bất kỳ thread nào.
    """
    get_signal_bridge().run_on_main(callback)


class QtSingleShotTimer:
    """
    One-shot timer sử dụng QTimer, chạy callback trên GUI thread.

    Cùng interface start()/cancel()/dispose() với SafeTimer để
    RecomputeScheduler có thể dùng thay thế khi chạy trong Qt event loop.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        parent: Optional[QObject] = None,
    ):
        """
        Args:
            interval: Delay tính bằng giây
            callback: Function sẽ được gọi sau delay
            parent: QObject parent (cho memory management)
        """
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(int(interval * 1000))
        self._callback = callback
        self._timer.timeout.connect(self._on_timeout)
        self._is_disposed = False

    def start(self) -> None:
        """Start/restart timer. Nếu timer đang chạy sẽ bị reset."""
        if not self._is_disposed:
            self._timer.start()

    def cancel(self) -> None:
        """Cancel timer."""
        self._timer.stop()

    def dispose(self) -> None:
        """Cancel và không cho start lại."""
        self._is_disposed = True
        self._timer.stop()

    def is_active(self) -> bool:
        """Check xem timer có đang chạy không."""
        return self._timer.isActive()

    def _on_timeout(self) -> None:
        if self._is_disposed:
            return
        try:
            self._callback()
        except Exception as e:
            log_error("[QtSingleShotTimer] Error in timer callback", e)


def qt_timer_factory(
    interval: float, callback: Callable[[], None]
) -> QtSingleShotTimer:
    """Timer factory cho RecomputeScheduler khi chạy trong Qt event loop."""
    return QtSingleShotTimer(interval, callback)
