"""
Script Tables - Bang phan loai ky tu theo he chu viet (data only).

Moi entry la mot khoang code point dong (start, end) kem CharClass.
Bang duoc sap xep theo start va khong co khoang nao chong nhau, de
tokenizer co the tra cuu bang bisect thay vi regex literal khong lo.

Code point khong nam trong bang nao -> SEPARATOR.
"""

import bisect
from enum import Enum


class CharClass(Enum):
    """Phan loai ky tu cho word segmentation."""

    # Chu cai cua he chu co dau cach giua cac tu, chu so
    SPACED = "spaced"
    # CJK ideographs, Hiragana, Katakana: moi ky tu la mot tu
    UNSPACED = "unspaced"
    # Ky tu noi ben trong tu (hyphen, apostrophe)
    JOINER = "joiner"
    # Whitespace va punctuation
    SEPARATOR = "separator"


_S = CharClass.SPACED
_U = CharClass.UNSPACED
_J = CharClass.JOINER

# (start, end, class) - inclusive, sorted, non-overlapping
SCRIPT_RANGES: tuple[tuple[int, int, CharClass], ...] = (
    (0x0027, 0x0027, _J),  # '
    (0x002D, 0x002D, _J),  # -
    (0x0030, 0x0039, _S),  # ASCII digits
    (0x0041, 0x005A, _S),  # Latin upper
    (0x0061, 0x007A, _S),  # Latin lower
    (0x00AA, 0x00AA, _S),
    (0x00B5, 0x00B5, _S),
    (0x00BA, 0x00BA, _S),
    (0x00C0, 0x00D6, _S),  # Latin-1 Supplement
    (0x00D8, 0x00F6, _S),
    (0x00F8, 0x02C1, _S),  # Latin Extended-A/B, IPA
    (0x02C6, 0x02D1, _S),
    (0x02E0, 0x02E4, _S),
    (0x0300, 0x036F, _S),  # Combining diacritics
    (0x0370, 0x037D, _S),  # Greek
    (0x037F, 0x0386, _S),
    (0x0388, 0x03FF, _S),
    (0x0400, 0x052F, _S),  # Cyrillic, Cyrillic Supplement
    (0x0531, 0x0556, _S),  # Armenian
    (0x0560, 0x0588, _S),
    (0x0591, 0x05BD, _S),  # Hebrew points
    (0x05BF, 0x05BF, _S),
    (0x05C1, 0x05C2, _S),
    (0x05C4, 0x05C5, _S),
    (0x05C7, 0x05C7, _S),
    (0x05D0, 0x05EA, _S),  # Hebrew letters
    (0x05EF, 0x05F2, _S),
    (0x0610, 0x061A, _S),  # Arabic
    (0x0620, 0x0669, _S),
    (0x066E, 0x06D3, _S),
    (0x06D5, 0x06DC, _S),
    (0x06DF, 0x06E8, _S),
    (0x06EA, 0x06FC, _S),
    (0x06FF, 0x06FF, _S),
    (0x0710, 0x074A, _S),  # Syriac
    (0x074D, 0x07B1, _S),  # Syriac supplement, Thaana
    (0x07C0, 0x07F5, _S),  # NKo
    (0x0900, 0x0963, _S),  # Devanagari (danda excluded)
    (0x0966, 0x0DFF, _S),  # Bengali .. Sinhala
    (0x0E01, 0x0E3A, _S),  # Thai
    (0x0E40, 0x0E4E, _S),
    (0x0E50, 0x0E59, _S),
    (0x0E81, 0x0EDF, _S),  # Lao
    (0x0F00, 0x0F00, _S),  # Tibetan
    (0x0F18, 0x0F19, _S),
    (0x0F20, 0x0F33, _S),
    (0x0F40, 0x0FBC, _S),
    (0x1000, 0x1049, _S),  # Myanmar
    (0x1050, 0x109D, _S),
    (0x10A0, 0x10FF, _S),  # Georgian
    (0x1100, 0x11FF, _S),  # Hangul Jamo
    (0x1200, 0x135F, _S),  # Ethiopic
    (0x1369, 0x137C, _S),
    (0x1380, 0x138F, _S),
    (0x13A0, 0x13FD, _S),  # Cherokee
    (0x1401, 0x166C, _S),  # Canadian syllabics
    (0x166F, 0x167F, _S),
    (0x1780, 0x17D3, _S),  # Khmer
    (0x17E0, 0x17E9, _S),
    (0x1800, 0x18AA, _S),  # Mongolian
    (0x1E00, 0x1FBC, _S),  # Latin Extended Additional, Greek Extended
    (0x1FC2, 0x1FCC, _S),
    (0x1FD0, 0x1FDB, _S),
    (0x1FE0, 0x1FEC, _S),
    (0x1FF2, 0x1FFC, _S),
    (0x2010, 0x2011, _J),  # hyphen, non-breaking hyphen
    (0x2019, 0x2019, _J),  # right single quotation mark
    (0x2C00, 0x2CE4, _S),  # Glagolitic, Latin Extended-C, Coptic
    (0x2D00, 0x2D2D, _S),  # Georgian supplement
    (0x2DE0, 0x2DFF, _S),  # Cyrillic Extended-A
    (0x3005, 0x3007, _U),  # iteration mark, closing mark, ideographic zero
    (0x3041, 0x3096, _U),  # Hiragana
    (0x309D, 0x309F, _U),
    (0x30A1, 0x30FA, _U),  # Katakana
    (0x30FC, 0x30FF, _U),
    (0x3131, 0x318E, _S),  # Hangul compatibility Jamo
    (0x31F0, 0x31FF, _U),  # Katakana phonetic extensions
    (0x3400, 0x4DBF, _U),  # CJK Extension A
    (0x4E00, 0x9FFF, _U),  # CJK Unified Ideographs
    (0xA640, 0xA69F, _S),  # Cyrillic Extended-B
    (0xA720, 0xA7FF, _S),  # Latin Extended-D
    (0xAC00, 0xD7A3, _S),  # Hangul syllables
    (0xF900, 0xFAFF, _U),  # CJK Compatibility Ideographs
    (0xFB00, 0xFB06, _S),  # Latin ligatures
    (0xFB13, 0xFB17, _S),  # Armenian ligatures
    (0xFB1D, 0xFB4F, _S),  # Hebrew presentation forms
    (0xFB50, 0xFDFB, _S),  # Arabic presentation forms-A
    (0xFE70, 0xFEFC, _S),  # Arabic presentation forms-B
    (0xFF10, 0xFF19, _S),  # Fullwidth digits
    (0xFF21, 0xFF3A, _S),  # Fullwidth Latin
    (0xFF41, 0xFF5A, _S),
    (0xFF66, 0xFF9F, _U),  # Halfwidth Katakana
    (0x20000, 0x2FA1F, _U),  # CJK Extensions B..F, compatibility supplement
    (0x30000, 0x3134F, _U),  # CJK Extension G
)

_STARTS: tuple[int, ...] = tuple(start for start, _end, _cls in SCRIPT_RANGES)


def lookup(code_point: int) -> CharClass:
    """Tra cuu CharClass cua mot code point bang binary search."""
    i = bisect.bisect_right(_STARTS, code_point) - 1
    if i >= 0:
        _start, end, char_class = SCRIPT_RANGES[i]
        if code_point <= end:
            return char_class
    return CharClass.SEPARATOR
