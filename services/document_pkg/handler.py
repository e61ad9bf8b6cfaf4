"""
Active Document Event Handler.

Nhan events tu watchdog cho thu muc chua active document, chi
chuyen tiep nhung event cham toi chinh file dang mo.

Editor thuong save theo kieu atomic (ghi file tam roi rename de len
file goc), nen moved-onto va created cung duoc coi la edit.
"""

import os
from typing import Callable

from watchdog.events import (
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
    FileSystemEventHandler,
)

from core.logging_config import log_debug


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.realpath(path))


class ActiveDocumentEventHandler(FileSystemEventHandler):
    """
    Event handler loc events theo target path va goi on_edit.

    Attributes:
        _target: Duong dan (da normalize) cua active document
        _on_edit: Callback khi target bi sua/tao/xoa/rename de len
    """

    def __init__(self, target: str, on_edit: Callable[[], None]):
        """
        Args:
            target: Duong dan active document
            on_edit: Callback, duoc goi tren watchdog thread
        """
        super().__init__()
        self._target = _normalize(target)
        self._on_edit = on_edit

    def _matches(self, path: object) -> bool:
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return bool(path) and _normalize(str(path)) == self._target

    def _handle(self, event_type: str, path: object) -> None:
        log_debug(f"[DocumentWatcher] Event: {event_type} - {path}")
        self._on_edit()

    def on_modified(self, event: object) -> None:
        """File bi sua tai cho."""
        if isinstance(event, FileModifiedEvent) and self._matches(event.src_path):
            self._handle("modified", event.src_path)

    def on_created(self, event: object) -> None:
        """File duoc tao lai (save kieu xoa + ghi moi)."""
        if isinstance(event, FileCreatedEvent) and self._matches(event.src_path):
            self._handle("created", event.src_path)

    def on_deleted(self, event: object) -> None:
        """File bi xoa -> document khong con countable."""
        if isinstance(event, FileDeletedEvent) and self._matches(event.src_path):
            self._handle("deleted", event.src_path)

    def on_moved(self, event: object) -> None:
        """Atomic save: file tam duoc rename de len target."""
        if not isinstance(event, FileMovedEvent):
            return
        if self._matches(event.dest_path):
            self._handle("moved", event.dest_path)
        elif self._matches(event.src_path):
            self._handle("moved-away", event.src_path)
