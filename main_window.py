"""
Wordstat Desktop — PySide6 Main Window

Companion window hiển thị Chars / Words / Pages của file markdown đang
được sửa trong editor khác. File được theo dõi bằng watchdog; mọi thay
đổi trên disk được debounce rồi broadcast tới panel và status bar.
"""

import sys
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMenu,
    QStatusBar,
    QWidget,
)

from components.stats_panel_qt import StatsPanelQt
from components.stats_settings_qt import StatsSettingsPanelQt
from config.paths import ensure_app_directories
from core.logging_config import flush_logs, log_error, log_info
from core.text_stats import StatsSnapshot
from core.theme import ThemeColors, ThemeFonts, app_stylesheet
from core.utils.qt_utils import get_signal_bridge, qt_timer_factory, run_on_main_thread
from services.settings_manager import add_recent_file, load_app_settings
from services.stats_service import StatsService


def format_status_line(snapshot: StatsSnapshot) -> str:
    """Rendering một dòng cho status bar."""
    return (
        f"{snapshot.words:,} words · {snapshot.characters:,} chars · "
        f"{snapshot.pages:.2f} pages"
    )


class WordstatMainWindow(QMainWindow):
    """Main application window."""

    APP_VERSION = "1.0.0"

    def __init__(self, service: Optional[StatsService] = None) -> None:
        super().__init__()

        self.setWindowTitle("Wordstat Desktop")
        self.resize(520, 360)

        self._service = service or StatsService(
            timer_factory=qt_timer_factory,
            dispatch=run_on_main_thread,
        )

        self._build_ui()
        self._build_menu()
        self._build_status_bar()

        # Sinks: panel + status bar
        self._service.register_sink(self.stats_panel.update_stats)
        self._service.register_sink(self._update_status_bar)

    # ── Layout ───────────────────────────────────────────────────
    def _build_ui(self) -> None:
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        self.stats_panel = StatsPanelQt()
        layout.addWidget(self.stats_panel, stretch=2)

        self.settings_panel = StatsSettingsPanelQt()
        self.settings_panel.settings_changed.connect(self._on_settings_changed)
        layout.addWidget(self.settings_panel, stretch=1)

        self.setCentralWidget(central)

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu("&File")

        open_action = QAction("&Open...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._open_file_dialog)
        file_menu.addAction(open_action)

        self._recent_menu = QMenu("Open &Recent", self)
        file_menu.addMenu(self._recent_menu)
        self._refresh_recent_menu()

        close_action = QAction("&Close Document", self)
        close_action.triggered.connect(lambda: self.open_document(None))
        file_menu.addAction(close_action)

    # ── Status Bar ───────────────────────────────────────────────
    def _build_status_bar(self) -> None:
        """
        Status bar footer:
        [Document path] — [words · chars · pages]
        """
        status_bar = QStatusBar()
        self.setStatusBar(status_bar)

        self._status_document = QLabel("No document")
        self._status_document.setStyleSheet(
            f"color: {ThemeColors.TEXT_MUTED}; "
            f"font-family: {ThemeFonts.FAMILY_MONO}; "
            f"font-size: {ThemeFonts.SIZE_CAPTION}px;"
        )
        status_bar.addWidget(self._status_document, stretch=1)

        self._status_stats = QLabel(format_status_line(StatsSnapshot()))
        self._status_stats.setStyleSheet(
            f"color: {ThemeColors.TEXT_SECONDARY}; "
            f"font-family: {ThemeFonts.FAMILY_MONO}; "
            f"font-size: {ThemeFonts.SIZE_CAPTION}px;"
        )
        status_bar.addPermanentWidget(self._status_stats)

    def _update_status_bar(self, snapshot: StatsSnapshot) -> None:
        self._status_stats.setText(format_status_line(snapshot))

    # ── Documents ────────────────────────────────────────────────
    def open_document(self, path: Optional[Path]) -> None:
        """Chuyển active document (None = đóng)."""
        self._service.open_document(path)

        active = self._service.active_path
        name = str(active) if active else None
        self._status_document.setText(name or "No document")
        self.stats_panel.set_document_name(active.name if active else None)

        if active is not None:
            add_recent_file(active)
            self._refresh_recent_menu()

    def _open_file_dialog(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Document",
            "",
            "Markdown / Text (*.md *.markdown *.txt);;All Files (*)",
        )
        if file_path:
            self.open_document(Path(file_path))

    def _refresh_recent_menu(self) -> None:
        self._recent_menu.clear()
        recent_files = load_app_settings().recent_files
        for entry in recent_files:
            action = QAction(entry, self)
            action.triggered.connect(
                lambda _checked=False, p=entry: self.open_document(Path(p))
            )
            self._recent_menu.addAction(action)
        self._recent_menu.setEnabled(bool(recent_files))

    def _on_settings_changed(self) -> None:
        self._service.refresh_now()

    # ── Lifecycle ────────────────────────────────────────────────
    def closeEvent(self, event) -> None:
        """Handle app close — huỷ recompute đang chờ, dừng watcher, flush logs."""
        try:
            self._service.shutdown()
        except Exception as e:
            log_error("closeEvent: service.shutdown failed", e)

        flush_logs()
        super().closeEvent(event)


def main(initial_path: Optional[Path] = None) -> None:
    """Entry point cho Wordstat Desktop (GUI mode)."""
    ensure_app_directories()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Wordstat Desktop")
    app.setOrganizationName("Wordstat")
    app.setStyleSheet(app_stylesheet())

    # Initialize global signal bridge on main thread
    get_signal_bridge()

    window = WordstatMainWindow()
    window.show()

    if initial_path is not None:
        window.open_document(initial_path)

    log_info("Wordstat Desktop started")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
