"""
Package core.text_stats - Text statistics engine.

Modules:
- script_tables: Bang code point ranges theo he chu viet (data)
- tokenizer: count_words / count_characters
- content_filter: Pipeline bo contractions, frontmatter, comments
- models: StatsConfig, DocumentSnapshot, StatsSnapshot
- calculator: compute() va default rendering
"""

from core.text_stats.calculator import compute, estimate_pages, format_snapshot
from core.text_stats.content_filter import filter_text
from core.text_stats.models import (
    DocumentSnapshot,
    StatsConfig,
    StatsSnapshot,
    ZERO_SNAPSHOT,
)
from core.text_stats.tokenizer import count_characters, count_words

__all__ = [
    "compute",
    "estimate_pages",
    "format_snapshot",
    "filter_text",
    "count_characters",
    "count_words",
    "DocumentSnapshot",
    "StatsConfig",
    "StatsSnapshot",
    "ZERO_SNAPSHOT",
]
