"""Core subtitle model and document operations."""

from srtkit.core.merger import merge_subtitles
from srtkit.core.retiming import change_frame_rate
from srtkit.core.search import search_cue_at_timecode, search_word
from srtkit.core.statistics import (
    ReadingStatistics,
    StatisticsRange,
    StatisticsReport,
    classify_reading_speed,
    compute_statistics,
)
from srtkit.core.subtitle import ReadingMetrics, Subtitle, SubtitleEntry
from srtkit.core.timecode import ms_to_timecode, round_half_away, timecode_to_ms

__all__ = [
    "ReadingMetrics",
    "ReadingStatistics",
    "StatisticsRange",
    "StatisticsReport",
    "Subtitle",
    "SubtitleEntry",
    "change_frame_rate",
    "classify_reading_speed",
    "compute_statistics",
    "merge_subtitles",
    "ms_to_timecode",
    "round_half_away",
    "search_cue_at_timecode",
    "search_word",
    "timecode_to_ms",
]
