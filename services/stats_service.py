"""
StatsService - Composition root cho text statistics pipeline.

Wiring:
    FileDocumentSource --focus/edit--> RecomputeScheduler
    RecomputeScheduler --compute()--> SinkRegistry --> sinks

Su dung:
    service = StatsService()
    service.register_sink(panel.update_stats)
    service.open_document(Path("draft.md"))
    ...
    service.shutdown()

Thread Safety: Edit events den tu watchdog thread. Truyen
`dispatch=run_on_main_thread` khi chay trong Qt de edit trigger duoc
xu ly tren GUI thread.
"""

from pathlib import Path
from typing import Callable, Optional

from config.app_settings import AppSettings
from core.logging_config import log_info
from core.text_stats import DocumentSnapshot, StatsConfig, StatsSnapshot, compute
from services.document_pkg import DocumentCallbacks, FileDocumentSource
from services.interfaces.stats_service import Sink, TimerFactory
from services.settings_manager import load_app_settings
from services.stats_pkg import RecomputeScheduler, SinkRegistry

Dispatch = Callable[[Callable[[], object]], None]


def _call_directly(callback: Callable[[], object]) -> None:
    callback()


class StatsService:
    """
    Single point of control cho document source, scheduler va sinks.

    So huu: SinkRegistry, RecomputeScheduler
    Tham chieu: FileDocumentSource (tao mac dinh neu khong truyen vao)
    """

    def __init__(
        self,
        source: Optional[FileDocumentSource] = None,
        settings_provider: Callable[[], AppSettings] = load_app_settings,
        timer_factory: Optional[TimerFactory] = None,
        dispatch: Dispatch = _call_directly,
        watch: bool = True,
    ):
        """
        Args:
            source: Document source (mac dinh FileDocumentSource tu settings)
            settings_provider: Doc settings hien tai, goi moi lan recompute
            timer_factory: Timer cho debounce (SafeTimer hoac QTimer)
            dispatch: Chuyen edit events (watchdog thread) sang thread xu ly
            watch: Co theo doi file tren disk hay khong
        """
        self._settings_provider = settings_provider
        self._dispatch = dispatch
        settings = settings_provider()

        self.registry = SinkRegistry()
        self.source = source or FileDocumentSource(
            settings.get_countable_extensions(), watch=watch
        )
        self.scheduler = RecomputeScheduler(
            compute_snapshot=self._compute_current,
            registry=self.registry,
            quiet_window_ms=settings.debounce_ms,
            timer_factory=timer_factory,
        )

        self.source.subscribe(
            DocumentCallbacks(
                on_active_document_changed=self._on_active_document_changed,
                on_content_edited=self._on_content_edited,
            )
        )
        log_info("StatsService initialized")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def compute(doc: DocumentSnapshot, config: StatsConfig) -> StatsSnapshot:
        """Pure computation, khong dung toi state cua service."""
        return compute(doc, config)

    def register_sink(self, sink: Sink) -> None:
        self.registry.register(sink)

    def unregister_sink(self, sink: Sink) -> None:
        self.registry.unregister(sink)

    def open_document(self, path: Optional[Path]) -> None:
        """Doi active document; recompute ngay lap tuc."""
        self.source.set_active_path(path)

    @property
    def active_path(self) -> Optional[Path]:
        return self.source.active_path

    @property
    def last_snapshot(self) -> Optional[StatsSnapshot]:
        return self.scheduler.last_snapshot

    def refresh_now(self) -> Optional[StatsSnapshot]:
        """
        Ap dung settings moi nhat va recompute ngay.

        Goi sau khi user doi settings (filters, words per page,
        countable extensions, debounce).
        """
        settings = self._settings_provider()
        self.source.set_countable_extensions(settings.get_countable_extensions())
        self.scheduler.set_quiet_window_ms(settings.debounce_ms)
        return self.scheduler.recompute_now(reason="settings")

    def shutdown(self) -> None:
        """Huy recompute dang cho, dung watcher, go sinks."""
        self.scheduler.shutdown()
        self.source.close()
        self.registry.clear()
        log_info("StatsService shutdown")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _compute_current(self) -> StatsSnapshot:
        """Doc document va config TAI THOI DIEM recompute chay."""
        config = self._settings_provider().to_stats_config()
        return compute(self.source.get_active_document(), config)

    def _on_active_document_changed(self) -> None:
        # Focus change di tu thread goi open_document(), xu ly dong bo
        self.scheduler.notify_active_document_changed()

    def _on_content_edited(self) -> None:
        self._dispatch(self.scheduler.notify_content_edited)
