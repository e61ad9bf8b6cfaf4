"""
DocumentWatcher - Lifecycle management cho watchdog Observer.

Theo doi thu muc cha cua active document (non-recursive) va goi
callback khi chinh file do thay doi. Khong debounce o day: viec gom
nhom edit thuoc ve RecomputeScheduler.
"""

from pathlib import Path
from typing import Any, Callable, Optional

from watchdog.observers import Observer

from core.logging_config import log_error, log_info
from services.document_pkg.handler import ActiveDocumentEventHandler


class DocumentWatcher:
    """
    Service theo doi mot file tren disk.

    Usage:
        watcher = DocumentWatcher()
        watcher.start(Path("notes/chapter1.md"), on_change=scheduler.notify_content_edited)
        # ... later
        watcher.stop()
    """

    def __init__(self) -> None:
        # Any de tranh false positive voi Observer type
        self._observer: Optional[Any] = None
        self._handler: Optional[ActiveDocumentEventHandler] = None
        self._current_path: Optional[Path] = None

    def start(self, path: Path, on_change: Callable[[], None]) -> None:
        """
        Bat dau theo doi mot file.

        Neu dang theo doi file khac, se tu dong stop truoc.

        Args:
            path: Duong dan file can theo doi
            on_change: Callback khi file thay doi (goi tren watchdog thread)
        """
        self.stop()

        directory = path.parent
        if not directory.is_dir():
            log_error(f"[DocumentWatcher] Invalid directory: {directory}")
            return

        try:
            self._handler = ActiveDocumentEventHandler(str(path), on_change)

            self._observer = Observer()
            self._observer.schedule(self._handler, str(directory), recursive=False)
            self._observer.start()

            self._current_path = path
            log_info(f"[DocumentWatcher] Started watching: {path}")

        except Exception as e:
            log_error("[DocumentWatcher] Failed to start", e)
            self.stop()

    def stop(self) -> None:
        """Dung theo doi."""
        self._handler = None

        observer = self._observer
        if observer is not None:
            try:
                observer.stop()
                observer.join(timeout=2.0)
                log_info(f"[DocumentWatcher] Stopped watching: {self._current_path}")
            except Exception as e:
                log_error("[DocumentWatcher] Error stopping", e)
            finally:
                self._observer = None

        self._current_path = None

    def is_running(self) -> bool:
        """Kiem tra watcher co dang chay khong."""
        observer = self._observer
        return observer is not None and observer.is_alive()

    @property
    def current_path(self) -> Optional[Path]:
        """Lay duong dan dang duoc theo doi."""
        return self._current_path
