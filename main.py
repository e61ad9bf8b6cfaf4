"""
Wordstat Desktop - Command Line Entry Point

Modes:
    wordstat                      # Mo GUI (PySide6)
    wordstat draft.md             # Mo GUI voi draft.md la active document
    wordstat draft.md --once      # In Chars / Words / Pages roi thoat
    wordstat draft.md --watch     # Theo doi file, log snapshot moi khi file doi

Cac flag --ignore-* / --words-per-page chi ap dung cho lan chay nay,
khong ghi vao settings.json.
"""

import argparse
import dataclasses
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from config.app_settings import AppSettings
from core.logging_config import flush_logs, log_info, set_debug_mode
from core.text_stats import StatsSnapshot, compute, format_snapshot
from services.document_pkg import FileDocumentSource
from services.settings_manager import load_app_settings, parse_words_per_page

_WATCH_POLL_SECONDS = 0.5


def _words_per_page_arg(raw: str) -> int:
    value = parse_words_per_page(raw)
    if value is None:
        raise argparse.ArgumentTypeError(
            f"invalid words per page: {raw!r} (expected a positive whole number)"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordstat",
        description="Live character, word and page counts for markdown documents",
    )
    parser.add_argument("file", nargs="?", type=Path, help="Document to count")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--once", action="store_true", help="Print stats for FILE and exit"
    )
    mode.add_argument(
        "--watch",
        action="store_true",
        help="Watch FILE and log stats every time it changes (Ctrl+C to stop)",
    )

    parser.add_argument(
        "--ignore-contractions",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strip 's, 'd, 'll, 've, 're, 'm before counting",
    )
    parser.add_argument(
        "--ignore-comments",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strip %%%%...%%%% comment regions",
    )
    parser.add_argument(
        "--ignore-frontmatter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strip the leading --- frontmatter block",
    )
    parser.add_argument(
        "--words-per-page",
        type=_words_per_page_arg,
        default=None,
        metavar="N",
        help="Words per page used for the page estimate",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Tao AppSettings moi voi cac flag CLI da duoc chi dinh."""
    overrides = {
        key: getattr(args, key)
        for key in (
            "ignore_contractions",
            "ignore_comments",
            "ignore_frontmatter",
            "words_per_page",
        )
        if getattr(args, key) is not None
    }
    return dataclasses.replace(settings, **overrides)


def run_once(path: Path, settings: AppSettings) -> str:
    """Tinh stats mot lan, khong theo doi file."""
    source = FileDocumentSource(settings.get_countable_extensions(), watch=False)
    source.set_active_path(path)
    snapshot = compute(source.get_active_document(), settings.to_stats_config())
    return format_snapshot(snapshot)


def run_watch(path: Path, args: argparse.Namespace) -> None:
    """Theo doi file cho toi khi Ctrl+C."""
    from services.stats_service import StatsService

    def _log_snapshot(snapshot: StatsSnapshot) -> None:
        log_info(
            f"[Watch] {snapshot.words} words, {snapshot.characters} chars, "
            f"{snapshot.pages:.2f} pages"
        )
        print(format_snapshot(snapshot), end="\n\n", flush=True)

    service = StatsService(
        settings_provider=lambda: apply_overrides(load_app_settings(), args)
    )
    service.register_sink(_log_snapshot)
    service.open_document(path)

    try:
        while True:
            time.sleep(_WATCH_POLL_SECONDS)
    except KeyboardInterrupt:
        pass
    finally:
        service.shutdown()


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Console script entry point. Tra ve exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_debug_mode(True)

    if (args.once or args.watch) and args.file is None:
        parser.error("FILE is required with --once / --watch")

    try:
        if args.once:
            settings = apply_overrides(load_app_settings(), args)
            print(run_once(args.file, settings))
            return 0

        if args.watch:
            run_watch(args.file, args)
            return 0

        from main_window import main as run_gui

        run_gui(args.file)
        return 0
    finally:
        flush_logs()


if __name__ == "__main__":
    sys.exit(cli())
