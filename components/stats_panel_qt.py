"""
Stats Panel (PySide6) - Hiển thị Chars / Words / Pages của active document.

Panel là một sink: đăng ký `panel.update_stats` vào StatsService.
"""

from typing import Optional

from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from core.text_stats import StatsSnapshot, ZERO_SNAPSHOT, format_snapshot
from core.theme import ThemeColors, ThemeFonts


class StatsPanelQt(QWidget):
    """
    Panel hiển thị snapshot mới nhất theo default rendering.

    Chỉ giữ snapshot nhận được gần nhất.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._snapshot: StatsSnapshot = ZERO_SNAPSHOT
        self._build_ui()
        self.update_stats(ZERO_SNAPSHOT)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        title = QLabel("DOCUMENT STATS")
        title.setStyleSheet(
            f"font-size: {ThemeFonts.SIZE_CAPTION}px; font-weight: bold; "
            f"color: {ThemeColors.TEXT_SECONDARY};"
        )
        layout.addWidget(title)

        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet(
            f"font-size: {ThemeFonts.SIZE_METRIC}px; font-weight: bold; "
            f"font-family: {ThemeFonts.FAMILY_MONO}; color: {ThemeColors.TEXT_PRIMARY};"
        )
        layout.addWidget(self._stats_label)

        self._document_label = QLabel("No document")
        self._document_label.setStyleSheet(
            f"font-size: {ThemeFonts.SIZE_CAPTION}px; color: {ThemeColors.TEXT_MUTED};"
        )
        layout.addWidget(self._document_label)
        layout.addStretch()

        self.setStyleSheet(
            f"StatsPanelQt {{ background-color: {ThemeColors.BG_SURFACE}; "
            f"border: 1px solid {ThemeColors.BORDER}; border-radius: 8px; }}"
        )

    def update_stats(self, snapshot: StatsSnapshot) -> None:
        """Sink entry point: render snapshot mới."""
        self._snapshot = snapshot
        self._stats_label.setText(format_snapshot(snapshot))

    def set_document_name(self, name: Optional[str]) -> None:
        self._document_label.setText(name or "No document")

    @property
    def snapshot(self) -> StatsSnapshot:
        return self._snapshot

    def stats_text(self) -> str:
        return self._stats_label.text()
