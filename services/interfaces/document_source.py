"""
Interfaces cho Document Source.

Dinh nghia contracts cho:
- IDocumentSource: Cung cap active document va su kien thay doi
- DocumentCallbacks: Callbacks cho focus change va content edit
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from core.text_stats import DocumentSnapshot


@dataclass
class DocumentCallbacks:
    """
    Callbacks ma document source goi khi co su kien.

    Attributes:
        on_active_document_changed: Active document doi (focus switch)
        on_content_edited: Noi dung active document bi sua tai cho
    """

    on_active_document_changed: Optional[Callable[[], None]] = None
    on_content_edited: Optional[Callable[[], None]] = None


class IDocumentSource(ABC):
    """
    Interface cho host collaborator cung cap document.

    Implementation phai tra ve is_countable=False cho document
    khong phai plain-text/markdown (hoac khi khong co document nao).
    """

    @abstractmethod
    def get_active_document(self) -> DocumentSnapshot:
        """Doc noi dung hien tai cua active document."""
        ...

    @abstractmethod
    def read_content(self, doc_ref: Path) -> str:
        """
        Doc raw text cua mot document.

        Raises:
            OSError: Neu khong doc duoc document
        """
        ...

    @abstractmethod
    def subscribe(self, callbacks: DocumentCallbacks) -> None:
        """Dang ky callbacks (thay the callbacks cu neu co)."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Dung theo doi va giai phong resources."""
        ...
