"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest

from srtkit.core.subtitle import Subtitle, SubtitleEntry
from srtkit.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the get_settings LRU cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def sample_vtt_content() -> str:
    """Return WebVTT-style content with dot separators."""
    return (
        "WEBVTT\n"
        "\n"
        "1\n"
        "00:00:01.000 --> 00:00:02.500\n"
        "First cue\n"
        "\n"
        "2\n"
        "00:00:03.000 --> 00:00:04.000\n"
        "Second cue\n"
    )


@pytest.fixture
def sample_subtitle() -> Subtitle:
    """Return a three-entry subtitle in chronological order."""
    return Subtitle(
        entries=[
            SubtitleEntry("00:00:01,000", "00:00:03,000", "Hello world"),
            SubtitleEntry("00:00:04,000", "00:00:06,000", "How are\nyou today?"),
            SubtitleEntry("00:00:08,000", "00:00:10,000", "Goodbye, world!"),
        ],
        source_name="sample.srt",
    )
