"""
Stats Settings Panel (PySide6) - Toggles cho content filters va words per page.

Moi thay doi duoc luu ngay qua settings_manager roi emit settings_changed
de StatsService recompute. Words per page khong hop le bi tu choi tai
day: hien loi inline va khoi phuc gia tri dang co hieu luc.
"""

from typing import Optional

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
    QWidget,
)

from core.theme import ThemeColors, ThemeFonts
from services.settings_manager import (
    load_app_settings,
    parse_words_per_page,
    update_app_setting,
    update_words_per_page,
)


class StatsSettingsPanelQt(QWidget):
    """Panel chinh settings cho text statistics."""

    settings_changed = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._build_ui()
        self._load_settings()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)

        title = QLabel("COUNTING")
        title.setStyleSheet(
            f"font-size: {ThemeFonts.SIZE_CAPTION}px; font-weight: bold; "
            f"color: {ThemeColors.TEXT_SECONDARY};"
        )
        layout.addWidget(title)

        self._contractions_toggle = QCheckBox("Ignore contractions ('s, 'll, 're ...)")
        self._comments_toggle = QCheckBox("Ignore %% comments %%")
        self._frontmatter_toggle = QCheckBox("Ignore frontmatter")
        for toggle in (
            self._contractions_toggle,
            self._comments_toggle,
            self._frontmatter_toggle,
        ):
            layout.addWidget(toggle)

        form = QFormLayout()
        self._words_per_page_input = QLineEdit()
        self._words_per_page_input.setFixedWidth(80)
        form.addRow("Words per page", self._words_per_page_input)
        layout.addLayout(form)

        self._error_label = QLabel("")
        self._error_label.setStyleSheet(
            f"color: {ThemeColors.ERROR}; font-size: {ThemeFonts.SIZE_CAPTION}px;"
        )
        self._error_label.hide()
        layout.addWidget(self._error_label)
        layout.addStretch()

    def _load_settings(self) -> None:
        settings = load_app_settings()

        # Chan signal khi nap gia tri ban dau
        for toggle, value in (
            (self._contractions_toggle, settings.ignore_contractions),
            (self._comments_toggle, settings.ignore_comments),
            (self._frontmatter_toggle, settings.ignore_frontmatter),
        ):
            toggle.blockSignals(True)
            toggle.setChecked(value)
            toggle.blockSignals(False)

        self._current_words_per_page = settings.words_per_page
        self._words_per_page_input.setText(str(settings.words_per_page))

        self._contractions_toggle.toggled.connect(
            lambda checked: self._save_toggle("ignore_contractions", checked)
        )
        self._comments_toggle.toggled.connect(
            lambda checked: self._save_toggle("ignore_comments", checked)
        )
        self._frontmatter_toggle.toggled.connect(
            lambda checked: self._save_toggle("ignore_frontmatter", checked)
        )
        self._words_per_page_input.editingFinished.connect(self._on_words_per_page_edited)

    def _save_toggle(self, key: str, checked: bool) -> None:
        if update_app_setting(**{key: checked}):
            self.settings_changed.emit()

    @Slot()
    def _on_words_per_page_edited(self) -> None:
        raw = self._words_per_page_input.text()
        if raw.strip() == str(self._current_words_per_page):
            self._error_label.hide()
            return

        value = parse_words_per_page(raw)
        if value is None:
            self._show_error(
                f"'{raw}' is not a positive whole number, "
                f"keeping {self._current_words_per_page}"
            )
            return

        if not update_words_per_page(value):
            self._show_error(
                f"Could not save settings, keeping {self._current_words_per_page}"
            )
            return

        self._current_words_per_page = value
        self._words_per_page_input.setText(str(value))
        self._error_label.hide()
        self.settings_changed.emit()

    def _show_error(self, message: str) -> None:
        self._error_label.setText(message)
        self._error_label.show()
        self._words_per_page_input.setText(str(self._current_words_per_page))

    @property
    def words_per_page(self) -> int:
        return self._current_words_per_page
