"""Unit tests for subtitle search."""

import pytest

from srtkit.core.search import (
    build_search_pattern,
    search_cue_at_timecode,
    search_word,
)
from srtkit.core.subtitle import Subtitle, SubtitleEntry


class TestSearchWord:
    """Test cases for search_word."""

    def test_case_insensitive_by_default(self):
        """Test that a lower-case query matches capitalised text."""
        subtitle = Subtitle(
            entries=[SubtitleEntry("00:00:01,000", "00:00:03,000", "Hello world")]
        )

        assert search_word(subtitle, "hello") == [0]

    def test_no_match_returns_none(self):
        """Test the no-match sentinel is distinct from an empty list."""
        subtitle = Subtitle(
            entries=[SubtitleEntry("00:00:01,000", "00:00:03,000", "Hello world")]
        )

        assert search_word(subtitle, "xyz") is None

    def test_case_sensitive(self, sample_subtitle):
        """Test exact-case matching."""
        assert search_word(sample_subtitle, "hello", case_sensitive=True) is None
        assert search_word(sample_subtitle, "Hello", case_sensitive=True) == [0]

    def test_returns_all_matching_positions(self, sample_subtitle):
        """Test that every matching entry is listed in order."""
        assert search_word(sample_subtitle, "world") == [0, 2]

    def test_phrase_spans_line_break(self, sample_subtitle):
        """Test that a space in the query matches a line break."""
        assert search_word(sample_subtitle, "are you") == [1]

    def test_phrase_spans_crlf_line_break(self):
        """Test that a space in the query matches CRLF."""
        entry = SubtitleEntry("00:00:01,000", "00:00:02,000", "x")
        entry.set_text("How are\r\nyou")
        subtitle = Subtitle(entries=[entry])

        assert search_word(subtitle, "are you") == [0]

    def test_metacharacters_are_literal(self, sample_subtitle):
        """Test that regex syntax in the query is escaped."""
        assert search_word(sample_subtitle, "world!") == [2]
        assert search_word(sample_subtitle, "w.rld") is None

    def test_strict_requires_boundaries(self, sample_subtitle):
        """Test strict matching against whole words only."""
        assert search_word(sample_subtitle, "wor") == [0, 2]
        assert search_word(sample_subtitle, "wor", strict=True) is None
        assert search_word(sample_subtitle, "world", strict=True) == [0, 2]

    def test_strict_accepts_punctuation_boundaries(self):
        """Test that . , ! ? delimit words in strict mode."""
        subtitle = Subtitle(
            entries=[
                SubtitleEntry("00:00:01,000", "00:00:02,000", "Hi,there!"),
                SubtitleEntry("00:00:03,000", "00:00:04,000", "thereafter"),
            ]
        )

        assert search_word(subtitle, "there", strict=True) == [0]

    def test_empty_subtitle(self):
        """Test searching a subtitle without entries."""
        assert search_word(Subtitle(), "anything") is None

    def test_build_search_pattern_flags(self):
        """Test that case sensitivity controls the IGNORECASE flag."""
        import re

        assert build_search_pattern("a").flags & re.IGNORECASE
        assert not build_search_pattern("a", case_sensitive=True).flags & re.IGNORECASE


class TestSearchCueAtTimecode:
    """Test cases for search_cue_at_timecode."""

    @pytest.mark.parametrize(
        ("at", "expected"),
        [
            (0, 0),
            (1000, 0),
            (2000, 0),
            (500, 0),
            (3000, 1),
            (3500, 1),
            (4000, 1),
            (6000, 2),
            (7000, 2),
            (9999, 2),
            (10_000, 3),
            (11_000, 3),
        ],
    )
    def test_finds_active_or_upcoming_cue(self, sample_subtitle, at, expected):
        """Test lookup inside cues, inside gaps and past the end."""
        assert search_cue_at_timecode(sample_subtitle, at) == expected

    def test_accepts_timecode_string(self, sample_subtitle):
        """Test lookup with a textual timecode."""
        assert search_cue_at_timecode(sample_subtitle, "00:00:04,500") == 1

    def test_empty_subtitle_returns_zero(self):
        """Test that the past-the-end index of an empty subtitle is 0."""
        assert search_cue_at_timecode(Subtitle(), 1000) == 0
