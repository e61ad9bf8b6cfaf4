"""
Tests cho script tables (data) va lookup bang binary search.
"""

from core.text_stats.script_tables import SCRIPT_RANGES, CharClass, lookup


class TestScriptRanges:
    """Kiem tra tinh toan ven cua bang ranges."""

    def test_ranges_sorted_and_non_overlapping(self):
        previous_end = -1
        for start, end, _char_class in SCRIPT_RANGES:
            assert start <= end
            assert start > previous_end
            previous_end = end

    def test_ranges_within_unicode(self):
        assert all(0 <= start and end <= 0x10FFFF for start, end, _ in SCRIPT_RANGES)

    def test_no_separator_entries(self):
        """SEPARATOR la mac dinh, khong can nam trong bang."""
        assert all(cls is not CharClass.SEPARATOR for _, _, cls in SCRIPT_RANGES)


class TestLookup:
    """Test lookup() tai bien cua cac ranges."""

    def test_range_boundaries(self):
        assert lookup(0x4E00) is CharClass.UNSPACED
        assert lookup(0x9FFF) is CharClass.UNSPACED
        assert lookup(0x0041) is CharClass.SPACED
        assert lookup(0x005A) is CharClass.SPACED

    def test_gaps_are_separators(self):
        assert lookup(0x0040) is CharClass.SEPARATOR  # @
        assert lookup(0x005B) is CharClass.SEPARATOR  # [
        assert lookup(0x0000) is CharClass.SEPARATOR

    def test_beyond_last_range(self):
        assert lookup(0x10FFFF) is CharClass.SEPARATOR

    def test_supplementary_cjk(self):
        assert lookup(0x20000) is CharClass.UNSPACED
