"""Tests cho WordstatMainWindow - wiring service, sinks, menu, lifecycle."""

from pathlib import Path
from unittest.mock import patch

import pytest

from core.text_stats import StatsSnapshot
from main_window import WordstatMainWindow, format_status_line
from services.document_pkg import FileDocumentSource
from services.settings_manager import load_app_settings
from services.stats_service import StatsService


@pytest.fixture
def window(qtbot, timers):
    service = StatsService(source=FileDocumentSource(watch=False), timer_factory=timers)
    win = WordstatMainWindow(service=service)
    qtbot.addWidget(win)
    yield win
    service.shutdown()


@pytest.fixture
def draft(tmp_path):
    path = tmp_path / "draft.md"
    path.write_text("---\ntitle: Draft\n---\nOne two three", encoding="utf-8")
    return path


def test_format_status_line():
    snapshot = StatsSnapshot(characters=12345, words=2000, pages=6.67)
    assert format_status_line(snapshot) == "2,000 words · 12,345 chars · 6.67 pages"


def test_main_window_initialization(window):
    """Window moi: zero snapshot, chua co document."""
    assert window.windowTitle() == "Wordstat Desktop"
    assert window.stats_panel.stats_text() == "Chars: 0\nWords: 0\nPages: 0.00"
    assert window._status_document.text() == "No document"
    assert not window._recent_menu.isEnabled()


def test_main_window_open_document_updates_sinks(window, draft):
    """Mo document -> panel va status bar nhan snapshot ngay."""
    window.open_document(draft)

    assert window.stats_panel.snapshot.words == 3
    assert window._status_stats.text() == "3 words · 13 chars · 0.01 pages"
    assert str(draft.resolve()) in window._status_document.text()


def test_main_window_open_adds_recent_file(window, draft):
    window.open_document(draft)

    assert load_app_settings().recent_files == [str(draft.resolve())]
    assert window._recent_menu.isEnabled()
    assert window._recent_menu.actions()[0].text() == str(draft.resolve())


def test_main_window_open_file_dialog(window, draft):
    """Mo file qua QFileDialog."""
    with patch(
        "main_window.QFileDialog.getOpenFileName", return_value=(str(draft), "")
    ):
        window._open_file_dialog()

    assert window.stats_panel.snapshot.words == 3


def test_main_window_file_dialog_cancelled(window):
    with patch("main_window.QFileDialog.getOpenFileName", return_value=("", "")):
        window._open_file_dialog()

    assert window._service.active_path is None


def test_main_window_settings_change_recomputes(window, draft):
    """Tat ignore frontmatter -> recompute voi settings moi."""
    window.open_document(draft)
    window.settings_panel._frontmatter_toggle.setChecked(False)

    # "title:", "Draft" + "One two three"
    assert window.stats_panel.snapshot.words == 5


def test_main_window_close_document(window, draft):
    window.open_document(draft)
    window.open_document(None)

    assert window.stats_panel.snapshot.words == 0
    assert window._status_document.text() == "No document"


def test_main_window_close_shuts_down_service(window, draft):
    window.open_document(draft)
    window.show()
    window.close()

    assert window._service.scheduler.is_shutdown
    assert len(window._service.registry) == 0


def test_main_window_recent_action_opens_file(window, draft, tmp_path):
    other = tmp_path / "other.md"
    other.write_text("just two")
    window.open_document(draft)
    window.open_document(other)

    # Recent menu: moi nhat dau tien
    actions = window._recent_menu.actions()
    assert [a.text() for a in actions] == [str(other.resolve()), str(draft.resolve())]

    actions[1].trigger()
    assert window._service.active_path == Path(draft.resolve())
