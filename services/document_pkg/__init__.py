"""
Document Package - Host-side document source.

Export cac symbols chinh:
- FileDocumentSource (active document tren disk)
- DocumentWatcher (watchdog lifecycle)
- DocumentCallbacks (focus change / content edit)
"""

from services.document_pkg.file_source import (
    DEFAULT_COUNTABLE_EXTENSIONS,
    FileDocumentSource,
)
from services.document_pkg.watcher import DocumentWatcher
from services.interfaces.document_source import DocumentCallbacks

__all__ = [
    "DEFAULT_COUNTABLE_EXTENSIONS",
    "FileDocumentSource",
    "DocumentWatcher",
    "DocumentCallbacks",
]
