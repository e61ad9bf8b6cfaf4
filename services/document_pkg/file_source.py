"""
FileDocumentSource - Active document la mot file tren disk.

- set_active_path(): focus switch -> on_active_document_changed
- Watchdog phat hien file bi sua -> on_content_edited
- Document countable khi la regular file co suffix nam trong
  countable extensions (.md, .markdown, .txt mac dinh)
"""

import threading
from pathlib import Path
from typing import Iterable, Optional

from config.app_settings import AppSettings
from core.logging_config import log_info, log_warning
from core.text_stats import DocumentSnapshot
from services.document_pkg.watcher import DocumentWatcher
from services.interfaces.document_source import DocumentCallbacks, IDocumentSource

DEFAULT_COUNTABLE_EXTENSIONS = AppSettings().get_countable_extensions()

_NOT_COUNTABLE = DocumentSnapshot(raw_text="", is_countable=False)


class FileDocumentSource(IDocumentSource):
    """
    Document source doc file tu disk va theo doi thay doi bang watchdog.

    Attributes:
        _active_path: File dang duoc "focus" (None neu chua mo file nao)
        _countable_extensions: Suffix (lowercase, co dau ".") duoc dem
        _watcher: DocumentWatcher, None neu tat watch (vd: --once)
    """

    def __init__(
        self,
        countable_extensions: Iterable[str] = DEFAULT_COUNTABLE_EXTENSIONS,
        watcher: Optional[DocumentWatcher] = None,
        watch: bool = True,
    ):
        """
        Args:
            countable_extensions: Suffix duoc coi la plain-text/markdown
            watcher: Custom watcher (mac dinh tao DocumentWatcher moi)
            watch: False de khong theo doi thay doi tren disk
        """
        self._countable_extensions = frozenset(
            ext.lower() for ext in countable_extensions
        )
        self._watcher: Optional[DocumentWatcher] = (
            (watcher or DocumentWatcher()) if watch else None
        )
        self._callbacks = DocumentCallbacks()
        self._active_path: Optional[Path] = None
        self._lock = threading.Lock()

    @property
    def active_path(self) -> Optional[Path]:
        with self._lock:
            return self._active_path

    def set_countable_extensions(self, extensions: Iterable[str]) -> None:
        """Cap nhat danh sach suffix duoc dem (vd: sau khi doi settings)."""
        with self._lock:
            self._countable_extensions = frozenset(ext.lower() for ext in extensions)

    def is_countable_path(self, path: Path) -> bool:
        """Check suffix cua path co nam trong countable extensions khong."""
        with self._lock:
            return path.suffix.lower() in self._countable_extensions

    def set_active_path(self, path: Optional[Path]) -> None:
        """
        Doi active document (focus switch).

        Restart watcher cho file moi roi goi on_active_document_changed.

        Args:
            path: File moi, hoac None de dong document
        """
        resolved = path.expanduser().resolve() if path is not None else None

        with self._lock:
            self._active_path = resolved

        if self._watcher is not None:
            if resolved is None:
                self._watcher.stop()
            else:
                self._watcher.start(resolved, on_change=self._on_file_changed)

        log_info(f"[DocumentSource] Active document: {resolved}")

        callback = self._callbacks.on_active_document_changed
        if callback is not None:
            callback()

    def get_active_document(self) -> DocumentSnapshot:
        """
        Doc active document.

        Returns:
            DocumentSnapshot countable, hoac snapshot rong (is_countable=False)
            khi khong co file, sai loai file, hay doc loi.
        """
        path = self.active_path
        if path is None or not self.is_countable_path(path):
            return _NOT_COUNTABLE

        try:
            if not path.is_file():
                return _NOT_COUNTABLE
            return DocumentSnapshot(raw_text=self.read_content(path), is_countable=True)
        except OSError as e:
            log_warning(f"[DocumentSource] Cannot read {path}: {e}")
            return _NOT_COUNTABLE

    def read_content(self, doc_ref: Path) -> str:
        """Doc file dang UTF-8; byte khong hop le duoc thay bang U+FFFD."""
        return doc_ref.read_text(encoding="utf-8", errors="replace")

    def subscribe(self, callbacks: DocumentCallbacks) -> None:
        self._callbacks = callbacks

    def close(self) -> None:
        """Dung watcher va bo callbacks."""
        if self._watcher is not None:
            self._watcher.stop()
        self._callbacks = DocumentCallbacks()

    def _on_file_changed(self) -> None:
        callback = self._callbacks.on_content_edited
        if callback is not None:
            callback()
