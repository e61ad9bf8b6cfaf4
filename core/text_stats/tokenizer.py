"""
Tokenizer - Dem words va characters theo quy tac script-aware.

Quy tac:
- Run lien tiep cac ky tu SPACED (co the chua JOINER ben trong, va dau
  "," / "." giua hai chu so) = 1 word, bat ke do dai.
- Moi ky tu UNSPACED (CJK, Hiragana, Katakana) = 1 word rieng.
- Run chi gom JOINER (vd: "---", "'") khong phai la word.
- Con lai la separator: ket thuc run hien tai, khong tu tinh la word.

Single-pass, stateless, khong phu thuoc locale.
"""

from core.text_stats.script_tables import CharClass, lookup

# Dau phan cach hang nghin / thap phan trong so (12,345.67)
DIGIT_GROUPING = frozenset(",.")


def classify_char(ch: str) -> CharClass:
    """Phan loai mot ky tu theo script tables."""
    return lookup(ord(ch))


def count_characters(text: str) -> int:
    """So Unicode code points trong text (khong phai bytes)."""
    return len(text)


def count_words(text: str) -> int:
    """
    Dem so words trong text.

    Args:
        text: Text can dem (da qua content filter neu can)

    Returns:
        So words >= 0
    """
    words = 0
    in_run = False
    # Run co it nhat mot chu cai/chu so hay chua
    run_has_body = False
    last = len(text) - 1

    for i, ch in enumerate(text):
        char_class = classify_char(ch)

        if char_class is CharClass.SPACED:
            in_run = True
            run_has_body = True
            continue

        if char_class is CharClass.JOINER:
            in_run = True
            continue

        if (
            ch in DIGIT_GROUPING
            and in_run
            and i > 0
            and i < last
            and text[i - 1].isdecimal()
            and text[i + 1].isdecimal()
        ):
            continue

        # Separator hoac UNSPACED: dong run hien tai
        if run_has_body:
            words += 1
        in_run = False
        run_has_body = False

        if char_class is CharClass.UNSPACED:
            words += 1

    if run_has_body:
        words += 1

    return words
