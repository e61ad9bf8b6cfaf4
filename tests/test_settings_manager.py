"""
Tests cho settings_manager: load/save/update va validation o config boundary.

Moi test patch SETTINGS_FILE sang tmp_path de khong dung toi
~/.wordstat-desktop/settings.json that.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from config.app_settings import AppSettings, MAX_RECENT_FILES
from services.settings_manager import (
    add_recent_file,
    load_app_settings,
    parse_words_per_page,
    save_app_settings,
    update_app_setting,
    update_words_per_page,
)


@pytest.fixture
def settings_file(tmp_path):
    """Patch SETTINGS_FILE sang file tam."""
    path = tmp_path / "settings.json"
    with patch("services.settings_manager.SETTINGS_FILE", path):
        yield path


class TestLoadSave:
    """Test load_app_settings, save_app_settings."""

    def test_load_no_file(self, settings_file):
        """Load khi file chua ton tai -> defaults."""
        assert load_app_settings().to_dict() == AppSettings().to_dict()

    def test_load_invalid_json(self, settings_file):
        """File corrupt -> defaults."""
        settings_file.write_text("not json {{{")
        assert load_app_settings().words_per_page == 300

    def test_load_non_dict_json(self, settings_file):
        settings_file.write_text("[1, 2, 3]")
        assert load_app_settings().words_per_page == 300

    def test_save_load_roundtrip(self, settings_file):
        assert save_app_settings(AppSettings(words_per_page=250)) is True
        assert load_app_settings().words_per_page == 250

    def test_save_preserves_extra_keys(self, settings_file):
        """Save bao toan keys khong thuoc AppSettings."""
        settings_file.write_text(json.dumps({"window_geometry": "abc"}))
        save_app_settings(AppSettings())
        data = json.loads(settings_file.read_text())
        assert data["window_geometry"] == "abc"
        assert data["words_per_page"] == 300


class TestUpdateAppSetting:
    """Test update_app_setting."""

    def test_update_single_field(self, settings_file):
        assert update_app_setting(ignore_comments=False) is True
        assert load_app_settings().ignore_comments is False

    def test_update_multiple_fields(self, settings_file):
        assert update_app_setting(ignore_contractions=True, debounce_ms=100) is True
        settings = load_app_settings()
        assert settings.ignore_contractions is True
        assert settings.debounce_ms == 100

    def test_unknown_field_raises(self, settings_file):
        with pytest.raises(TypeError):
            update_app_setting(not_a_field=1)

    def test_invalid_value_rejected_keeps_previous(self, settings_file):
        update_app_setting(words_per_page=250)
        assert update_app_setting(words_per_page=0) is False
        assert update_app_setting(words_per_page=True) is False
        assert load_app_settings().words_per_page == 250

    def test_invalid_value_writes_nothing(self, settings_file):
        """Mot value hong -> khong field nao duoc ghi."""
        assert update_app_setting(ignore_comments=False, words_per_page=-1) is False
        assert not settings_file.exists()


class TestWordsPerPage:
    """Test parse_words_per_page va update_words_per_page."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("275", 275),
            (" 300 ", 300),
            (42, 42),
            ("0", None),
            ("-5", None),
            ("abc", None),
            ("", None),
            ("2.5", None),
            ("1e3", None),
            (0, None),
            (True, None),
            (None, None),
            (3.0, None),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_words_per_page(raw) == expected

    def test_update_valid(self, settings_file):
        assert update_words_per_page("275") is True
        assert load_app_settings().words_per_page == 275

    def test_update_invalid_keeps_previous(self, settings_file):
        update_words_per_page("275")
        assert update_words_per_page("zero") is False
        assert update_words_per_page("0") is False
        assert load_app_settings().words_per_page == 275


class TestRecentFiles:
    """Test add_recent_file."""

    def test_newest_first_no_duplicates(self, settings_file):
        add_recent_file(Path("/docs/a.md"))
        add_recent_file(Path("/docs/b.md"))
        add_recent_file(Path("/docs/a.md"))
        assert load_app_settings().recent_files == [
            str(Path("/docs/a.md")),
            str(Path("/docs/b.md")),
        ]

    def test_capped(self, settings_file):
        for i in range(MAX_RECENT_FILES + 5):
            add_recent_file(Path(f"/docs/{i}.md"))
        recent = load_app_settings().recent_files
        assert len(recent) == MAX_RECENT_FILES
        assert recent[0] == str(Path(f"/docs/{MAX_RECENT_FILES + 4}.md"))
