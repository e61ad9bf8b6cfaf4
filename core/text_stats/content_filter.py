"""
Content Filter Pipeline - Cat bo cac vung khong tinh vao thong ke.

Thu tu co dinh (moi buoc chay tren output cua buoc truoc):
1. strip_contractions  (neu ignore_contractions)
2. strip_frontmatter   (neu ignore_frontmatter)
3. strip_comments      (neu ignore_comments)

Tat ca deu la pure functions: text in -> text out.
"""

import re

from core.text_stats.models import StatsConfig

FRONTMATTER_DELIMITER = "---"
COMMENT_MARKER = "%%"

_CONTRACTION_PATTERN = re.compile(
    r"(?<=\w)['’](?:s|d|ll|ve|re|m)(?!\w)",
    re.IGNORECASE,
)

_COMMENT_PATTERN = re.compile(
    re.escape(COMMENT_MARKER) + r".*?" + re.escape(COMMENT_MARKER),
    re.DOTALL,
)

_BOM = "\ufeff"


def strip_contractions(text: str) -> str:
    """Bo hau to 's, 'd, 'll, 've, 're, 'm o cuoi tu: "it's" -> "it"."""
    return _CONTRACTION_PATTERN.sub("", text)


def strip_frontmatter(text: str) -> str:
    """
    Bo frontmatter block o dau text.

    Text phai bat dau bang dong chi gom "---". Block ket thuc o cuoi
    dong chua lan xuat hien "---" tiep theo (vd: "----", "a --- b").
    Neu khong co dong dong block, toan bo text bi bo (frontmatter chua
    dong = khong co noi dung do duoc).

    Returns:
        Text con lai sau frontmatter, hoac text goc neu khong co frontmatter
    """
    body = text[1:] if text.startswith(_BOM) else text
    lines = body.splitlines(keepends=True)

    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return text

    for index in range(1, len(lines)):
        if FRONTMATTER_DELIMITER in lines[index]:
            return "".join(lines[index + 1 :])

    return ""


def strip_comments(text: str) -> str:
    """Bo moi vung %%...%% (ke ca nhieu dong). Marker le khong bi dong."""
    return _COMMENT_PATTERN.sub("", text)


def filter_text(text: str, config: StatsConfig) -> str:
    """
    Chay content filter pipeline theo config.

    Args:
        text: Raw document text
        config: StatsConfig quyet dinh pass nao duoc bat

    Returns:
        FilteredText - chi dung ngay cho tokenizer, khong luu lai
    """
    if config.ignore_contractions:
        text = strip_contractions(text)
    if config.ignore_frontmatter:
        text = strip_frontmatter(text)
    if config.ignore_comments:
        text = strip_comments(text)
    return text
