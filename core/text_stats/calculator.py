"""
Statistics Calculator - Ket hop content filter va tokenizer.

compute() la pure function: cung input -> cung StatsSnapshot.
"""

from decimal import Decimal, ROUND_HALF_UP

from core.text_stats.content_filter import filter_text
from core.text_stats.models import (
    DocumentSnapshot,
    StatsConfig,
    StatsSnapshot,
    ZERO_SNAPSHOT,
)
from core.text_stats.tokenizer import count_characters, count_words

_TWO_PLACES = Decimal("0.01")


def estimate_pages(words: int, words_per_page: int) -> Decimal:
    """words / words_per_page, lam tron half-up toi 2 chu so thap phan."""
    pages = Decimal(words) / Decimal(words_per_page)
    return pages.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def compute(doc: DocumentSnapshot, config: StatsConfig) -> StatsSnapshot:
    """
    Tinh StatsSnapshot cho document.

    Document khong countable -> ZERO_SNAPSHOT, khong chay pipeline.

    Args:
        doc: Noi dung active document
        config: Cau hinh filter va words_per_page (da validate)

    Returns:
        StatsSnapshot moi
    """
    if not doc.is_countable:
        return ZERO_SNAPSHOT

    filtered = filter_text(doc.raw_text, config)
    words = count_words(filtered)

    return StatsSnapshot(
        characters=count_characters(filtered),
        words=words,
        pages=estimate_pages(words, config.words_per_page),
    )


def format_snapshot(snapshot: StatsSnapshot) -> str:
    """Default rendering, duoc cac display surface tai hien nguyen van."""
    return (
        f"Chars: {snapshot.characters}\n"
        f"Words: {snapshot.words}\n"
        f"Pages: {snapshot.pages:.2f}"
    )
