"""
Data model cho text statistics engine.

- StatsConfig: cau hinh bat bien cho mot lan tinh
- DocumentSnapshot: noi dung active document tai mot thoi diem
- StatsSnapshot: ket qua {characters, words, pages} broadcast toi sinks
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class StatsConfig:
    """
    Cau hinh cho mot lan compute.

    Attributes:
        ignore_contractions: Bo hau to 's, 'll, ... truoc khi dem
        ignore_comments: Bo cac vung %%...%%
        ignore_frontmatter: Bo frontmatter block o dau document
        words_per_page: So words tren mot trang (> 0)
    """

    ignore_contractions: bool = False
    ignore_comments: bool = False
    ignore_frontmatter: bool = False
    words_per_page: int = 300

    def __post_init__(self) -> None:
        if (
            isinstance(self.words_per_page, bool)
            or not isinstance(self.words_per_page, int)
            or self.words_per_page <= 0
        ):
            raise ValueError(
                f"words_per_page must be a positive integer, got {self.words_per_page!r}"
            )


@dataclass(frozen=True)
class DocumentSnapshot:
    """
    Noi dung cua active document.

    Attributes:
        raw_text: Toan bo text cua document
        is_countable: True chi khi document la plain-text/markdown
    """

    raw_text: str = ""
    is_countable: bool = False


@dataclass(frozen=True)
class StatsSnapshot:
    """Ket qua thong ke, thay the hoan toan snapshot truoc do."""

    characters: int = 0
    words: int = 0
    pages: Decimal = Decimal("0.00")


ZERO_SNAPSHOT = StatsSnapshot()
