"""
Tests for rewriting generic patterns into calendar-specific format strings.
"""

import pytest

from datepath.components import CalendarKind
from datepath.tokens import (
    SOLAR_RULES,
    replace_single_token,
    rewrite_pattern,
    substitute_quarter,
)


# =============================================================================
# Solar rewriting
# =============================================================================

class TestSolarRewrite:
    """Year, month and day tokens get the solar prefix exactly once."""

    def test_daily_pattern(self):
        assert rewrite_pattern("YYYY-MM-DD", CalendarKind.SOLAR) == "sYYYY-sMM-sDD"

    def test_folder_pattern(self):
        result = rewrite_pattern("YYYY/MM/YYYY-MM-DD", CalendarKind.SOLAR)
        assert result == "sYYYY/sMM/sYYYY-sMM-sDD"

    def test_month_name_not_split(self):
        """MMMM must not be rewritten again by the MM rule."""
        result = rewrite_pattern("YYYY/MM-MMMM", CalendarKind.SOLAR)
        assert result == "sYYYY/sMM-sMMMM"

    def test_single_month_next_to_double_day(self):
        assert rewrite_pattern("YYYY-M-DD", CalendarKind.SOLAR) == "sYYYY-sM-sDD"

    def test_single_day(self):
        assert rewrite_pattern("YYYY-MM-D", CalendarKind.SOLAR) == "sYYYY-sMM-sD"

    def test_compact_pattern(self):
        assert rewrite_pattern("YYYYMMDD", CalendarKind.SOLAR) == "sYYYYsMMsDD"

    def test_rewriting_is_idempotent(self):
        once = rewrite_pattern("YYYY/MM-MMMM/YYYY-M-D", CalendarKind.SOLAR)
        assert rewrite_pattern(once, CalendarKind.SOLAR) == once

    def test_string_calendar_kind(self):
        assert rewrite_pattern("YYYY", "solar") == "sYYYY"

    def test_rules_are_longest_first(self):
        names = [rule.name for rule in SOLAR_RULES]
        assert names.index("MMMM") < names.index("MM")

    def test_no_tokens(self):
        assert rewrite_pattern("journal", CalendarKind.SOLAR) == "journal"


# =============================================================================
# Gregorian rewriting
# =============================================================================

class TestGregorianRewrite:
    """Gregorian patterns keep their tokens apart from week and quarter."""

    def test_daily_pattern_unchanged(self):
        assert rewrite_pattern("YYYY-MM-DD", CalendarKind.GREGORIAN) == "YYYY-MM-DD"

    def test_week_token(self):
        assert rewrite_pattern("YYYY-[W]WW", CalendarKind.GREGORIAN) == "YYYY-[W]ww"

    def test_quarter(self):
        result = rewrite_pattern("YYYY-[Q]Q", CalendarKind.GREGORIAN, has_quarter=True, quarter=4)
        assert result == "YYYY-[Q]4"


# =============================================================================
# Week and quarter tokens
# =============================================================================

class TestWeekAndQuarter:

    def test_solar_week(self):
        assert rewrite_pattern("YYYY-[W]WW", CalendarKind.SOLAR) == "sYYYY-[W]ww"

    def test_quarter_left_alone_without_value(self):
        assert rewrite_pattern("YYYY-[Q]Q", CalendarKind.SOLAR) == "sYYYY-[Q]Q"

    def test_quarter_substituted_outside_brackets(self):
        result = rewrite_pattern("YYYY-[Q]Q", CalendarKind.SOLAR, has_quarter=True, quarter=3)
        assert result == "sYYYY-[Q]3"

    def test_quarter_inside_longer_literal(self):
        assert substitute_quarter("[Quarter ]Q", 2) == "[Quarter ]2"

    def test_quarter_nested_brackets(self):
        assert substitute_quarter("[[Q]]Q", 1) == "[[Q]]1"

    def test_unbalanced_closing_bracket(self):
        assert substitute_quarter("]Q", 4) == "]4"


# =============================================================================
# Single-letter scanning
# =============================================================================

class TestReplaceSingleToken:

    @pytest.mark.parametrize("text,expected", [
        ("M", "sM"),
        ("M-D", "sM-D"),
        ("MM", "MM"),
        ("sM", "sM"),
        ("sMM", "sMM"),
        ("sMMMM", "sMMMM"),
    ])
    def test_standalone_only(self, text, expected):
        assert replace_single_token(text, "M", "sM") == expected

    def test_literal_inside_brackets_is_rewritten(self):
        """Day/month rewriting does not look at brackets."""
        assert replace_single_token("[D]", "D", "sD") == "[sD]"
