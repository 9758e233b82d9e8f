"""
Tests for the primary and following time grammars.
"""

import pytest

from timeexpr.patterns import (
    TimePatternConfig,
    find_primary_match,
    following_time_pattern,
    match_following,
    primary_time_pattern,
)


@pytest.fixture
def primary():
    return primary_time_pattern(r"(?:(?:at)\s*)??")


@pytest.fixture
def following():
    return following_time_pattern(r"\s*(?:-|to)\s*")


class TestPrimaryPattern:
    """Tests for primary matches."""

    def test_captures(self, primary):
        """Test every capture is exposed on the raw match."""
        match = find_primary_match(primary, "at 10:30:15.5 pm", 0)
        assert match.index == 0
        assert match.lead == ""
        assert match.text == "at 10:30:15.5 pm"
        assert match.hour == "10"
        assert match.minute == "30"
        assert match.second == "15"
        assert match.fraction == "5"
        assert match.meridiem == "pm"

    def test_optional_groups_are_none(self, primary):
        """Test missing groups are None."""
        match = find_primary_match(primary, "7", 0)
        assert match.hour == "7"
        assert match.minute is None
        assert match.second is None
        assert match.fraction is None
        assert match.meridiem is None

    def test_whitespace_boundary(self, primary):
        """Test the leading whitespace is captured as lead."""
        match = find_primary_match(primary, "wake 6am", 0)
        assert match.index == 4
        assert match.lead == " "
        assert match.text == " 6am"
        assert match.end_index == 8

    def test_offset_anchors_start_of_text(self, primary):
        """Test the remaining text after offset counts as start-of-text."""
        match = find_primary_match(primary, "x9:15", 1)
        assert match.index == 1
        assert match.text == "9:15"

    def test_word_suffix_required(self, primary):
        """Test digits followed by letters do not match."""
        assert find_primary_match(primary, "5kg", 0) is None

    def test_no_match(self, primary):
        """Test None without digits."""
        assert find_primary_match(primary, "no time", 0) is None

    def test_seconds_need_two_digits(self, primary):
        """Test a single seconds digit is not a seconds group."""
        match = find_primary_match(primary, "10:30:5", 0)
        assert match is None or match.second is None

    def test_prefix_groups_do_not_shift_captures(self):
        """Test locale prefixes may contain their own groups."""
        pattern = primary_time_pattern(r"(?:(at|@)\s*)?")
        match = find_primary_match(pattern, "@ 9:45", 0)
        assert match.hour == "9"
        assert match.minute == "45"

    def test_patterns_are_cached(self):
        """Test building the same grammar twice returns one compiled pattern."""
        assert primary_time_pattern("") is primary_time_pattern("")


class TestFollowingPattern:
    """Tests for following matches."""

    def test_match_at_offset(self, following):
        """Test the continuation is matched right at the offset."""
        match = match_following(following, "10-11pm", 2)
        assert match.index == 2
        assert match.text == "-11pm"
        assert match.lead == "-"
        assert match.hour == "11"
        assert match.meridiem == "pm"

    def test_word_phrase(self, following):
        """Test word separators are part of the lead."""
        match = match_following(following, "9 to 17:30", 1)
        assert match.lead == " to "
        assert match.minute == "30"

    def test_anchored(self, following):
        """Test a continuation further away is not matched."""
        assert match_following(following, "10 and 11", 2) is None


class TestTimePatternConfig:
    """Tests for TimePatternConfig."""

    def test_default_suffixes(self):
        """Test suffixes default to a non-word lookahead."""
        config = TimePatternConfig(primary_prefix="", following_phrase="-")
        assert config.primary_suffix == r"(?=\W|$)"
        assert config.following_suffix == r"(?=\W|$)"
