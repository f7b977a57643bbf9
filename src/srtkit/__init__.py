"""SubRip/WebVTT subtitle parsing, editing and reading-speed statistics."""

from srtkit.constants import ReadingSpeedBucket
from srtkit.core import (
    Subtitle,
    SubtitleEntry,
    change_frame_rate,
    compute_statistics,
    merge_subtitles,
    search_cue_at_timecode,
    search_word,
)
from srtkit.errors import (
    EmptyDocumentStatisticsError,
    EncodingUndetectableError,
    InvalidFormatError,
    SourceNotFoundError,
    SubtitleError,
    UnreadableSourceError,
    WriteFailureError,
)
from srtkit.formats import parse_srt, serialize_srt, serialize_srt_range
from srtkit.pipeline import (
    is_valid_subtitle_file,
    load_subtitle,
    save_statistics,
    save_subtitle,
)

__all__ = [
    "EmptyDocumentStatisticsError",
    "EncodingUndetectableError",
    "InvalidFormatError",
    "ReadingSpeedBucket",
    "SourceNotFoundError",
    "Subtitle",
    "SubtitleEntry",
    "SubtitleError",
    "UnreadableSourceError",
    "WriteFailureError",
    "change_frame_rate",
    "compute_statistics",
    "is_valid_subtitle_file",
    "load_subtitle",
    "merge_subtitles",
    "parse_srt",
    "save_statistics",
    "save_subtitle",
    "search_cue_at_timecode",
    "search_word",
    "serialize_srt",
    "serialize_srt_range",
]
