"""
Tests cho command line entry point (main.py).
"""

from unittest.mock import patch

import pytest

from config.app_settings import AppSettings
from main import apply_overrides, build_parser, cli, run_once


@pytest.fixture
def default_settings():
    with patch("main.load_app_settings", return_value=AppSettings()):
        yield


@pytest.fixture
def draft(tmp_path):
    path = tmp_path / "draft.md"
    path.write_text("---\ntitle: x\n---\nit's a %%hidden%% test", encoding="utf-8")
    return path


class TestParser:
    """Test argparse configuration."""

    def test_defaults_are_none(self):
        args = build_parser().parse_args(["draft.md"])
        assert args.ignore_comments is None
        assert args.words_per_page is None
        assert not args.once and not args.watch

    def test_boolean_flags(self):
        args = build_parser().parse_args(
            ["draft.md", "--ignore-contractions", "--no-ignore-comments"]
        )
        assert args.ignore_contractions is True
        assert args.ignore_comments is False

    @pytest.mark.parametrize("bad", ["0", "-3", "abc", "2.5"])
    def test_invalid_words_per_page_exits(self, bad, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["draft.md", "--words-per-page", bad])
        assert exc_info.value.code == 2
        assert "words per page" in capsys.readouterr().err

    def test_once_and_watch_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["draft.md", "--once", "--watch"])


class TestApplyOverrides:
    def test_only_given_flags_override(self):
        args = build_parser().parse_args(["x.md", "--words-per-page", "275"])
        settings = apply_overrides(AppSettings(ignore_comments=False), args)
        assert settings.words_per_page == 275
        assert settings.ignore_comments is False

    def test_original_untouched(self):
        original = AppSettings()
        args = build_parser().parse_args(["x.md", "--ignore-contractions"])
        apply_overrides(original, args)
        assert original.ignore_contractions is False


class TestRunOnce:
    def test_default_filters(self, draft):
        # Frontmatter va comments bi bo, contractions giu nguyen
        assert run_once(draft, AppSettings()) == "Chars: 12\nWords: 3\nPages: 0.01"

    def test_not_countable(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b,c")
        assert run_once(path, AppSettings()) == "Chars: 0\nWords: 0\nPages: 0.00"

    def test_cli_once_prints_rendering(self, draft, default_settings, capsys):
        exit_code = cli([str(draft), "--once", "--ignore-contractions"])

        assert exit_code == 0
        assert capsys.readouterr().out == "Chars: 10\nWords: 3\nPages: 0.01\n"

    def test_cli_once_requires_file(self, default_settings):
        with pytest.raises(SystemExit) as exc_info:
            cli(["--once"])
        assert exc_info.value.code == 2
