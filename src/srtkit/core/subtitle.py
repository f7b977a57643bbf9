"""Subtitle domain models."""

import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

import structlog

from srtkit.constants import (
    CANONICAL_ENCODING,
    MIN_READING_SPEED_DURATION_MS,
    READING_SPEED_OFFSET_MS,
    ReadingSpeedBucket,
)
from srtkit.core.timecode import ms_to_timecode, round_half_away, timecode_to_ms

logger = structlog.get_logger()

_STYLE_DIRECTIVE = re.compile(r"{[^}]+}")
_BASIC_MARKUP = re.compile(r"<[/!?]?[A-Za-z][^>]*>|<!--.*?-->", re.DOTALL)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ReadingMetrics:
    """Snapshot of the measurements used for reading-speed statistics."""

    visible_text: str
    flattened_text: str
    char_length: int
    duration: int
    chars_per_second: float
    reading_speed: float


@dataclass
class SubtitleEntry:
    """Single subtitle cue with textual and millisecond timing.

    The textual timecodes and the millisecond offsets are kept in sync by the
    setters. Nothing derived from the text is cached on the entry.
    """

    start_tc: str
    stop_tc: str
    text: str
    start: int = field(init=False)
    stop: int = field(init=False)

    def __post_init__(self):
        self.text = self.text.strip()
        self.start = timecode_to_ms(self.start_tc)
        self.stop = timecode_to_ms(self.stop_tc)

    @classmethod
    def from_ms(cls, start: int, stop: int, text: str) -> "SubtitleEntry":
        """Create an entry from millisecond offsets."""
        entry = cls(ms_to_timecode(start), ms_to_timecode(stop), text)
        entry.start = start
        entry.stop = stop
        return entry

    def set_text(self, text: str) -> None:
        self.text = text

    def set_start_tc(self, timecode: str) -> None:
        self.start_tc = timecode
        self.start = timecode_to_ms(timecode)

    def set_stop_tc(self, timecode: str) -> None:
        self.stop_tc = timecode
        self.stop = timecode_to_ms(timecode)

    def set_start(self, ms: int) -> None:
        self.start = ms
        self.start_tc = ms_to_timecode(ms)

    def set_stop(self, ms: int) -> None:
        self.stop = ms
        self.stop_tc = ms_to_timecode(ms)

    @property
    def duration(self) -> int:
        """Duration in milliseconds; zero or negative for malformed cues."""
        return self.stop - self.start

    def compute_duration(self) -> int:
        """Re-derive millisecond offsets from the textual timecodes.

        Returns:
            The recomputed duration in milliseconds
        """
        self.start = timecode_to_ms(self.start_tc)
        self.stop = timecode_to_ms(self.stop_tc)
        return self.duration

    def timecode_string(self, webvtt: bool = False) -> str:
        """Return the ``start --> stop`` line for this entry.

        Args:
            webvtt: Use "." as fractional separator instead of ","
        """
        line = f"{self.start_tc} --> {self.stop_tc}"
        if webvtt:
            return line.replace(",", ".")
        return line.replace(".", ",")

    def visible_text(
        self,
        strip_basic: bool = False,
        replacements: Mapping[str, str] | None = None,
    ) -> str:
        """Return the text with style directives removed.

        Args:
            strip_basic: Also remove basic markup such as <i>, <b> and <u>
            replacements: Literal substrings to replace, applied in order

        Returns:
            Text without ``{...}`` directives
        """
        text = self.text
        if strip_basic:
            text = _BASIC_MARKUP.sub("", text)
        text = _STYLE_DIRECTIVE.sub("", text)

        for old, new in (replacements or {}).items():
            text = text.replace(old, new)

        return text

    def strip_tags(
        self,
        strip_basic: bool = False,
        replacements: Mapping[str, str] | None = None,
    ) -> bool:
        """Return True if stripping tags would change the text."""
        return self.visible_text(strip_basic, replacements) != self.text

    def get_text(
        self,
        strip_tags: bool = False,
        strip_basic: bool = False,
        replacements: Mapping[str, str] | None = None,
    ) -> str:
        """Return the raw text, or the visible text when ``strip_tags`` is set."""
        if strip_tags:
            return self.visible_text(strip_basic, replacements)
        return self.text

    def flattened_text(self) -> str:
        """Return the visible text on a single line, for length measurement only."""
        return _LINE_BREAK.sub("  ", self.visible_text(strip_basic=True))

    def char_length(self) -> int:
        """Number of characters (not bytes) of the flattened text."""
        return len(self.flattened_text())

    def chars_per_second(self) -> float:
        """Characters per second, rounded to one decimal.

        A zero duration yields ``math.inf``.
        """
        duration = self.compute_duration()
        if duration == 0:
            return math.inf
        return float(round_half_away(self.char_length() / (duration / 1000), 1))

    def reading_speed(self) -> float:
        """Reading speed based on the VisualSubSync algorithm.

        Durations of 500 ms or less are clamped to 501 ms so the divisor
        stays positive.
        """
        duration = self.compute_duration()
        if duration <= READING_SPEED_OFFSET_MS:
            duration = MIN_READING_SPEED_DURATION_MS
        return (self.char_length() * 1000) / (duration - READING_SPEED_OFFSET_MS)

    def metrics(self) -> ReadingMetrics:
        """Compute every statistics measurement for this entry at once."""
        return ReadingMetrics(
            visible_text=self.visible_text(strip_basic=True),
            flattened_text=self.flattened_text(),
            char_length=self.char_length(),
            duration=self.compute_duration(),
            chars_per_second=self.chars_per_second(),
            reading_speed=self.reading_speed(),
        )


def empty_stats() -> dict[ReadingSpeedBucket, int]:
    """Return a reading-speed bucket mapping with every count at zero."""
    return dict.fromkeys(ReadingSpeedBucket, 0)


@dataclass
class Subtitle:
    """Collection of subtitle entries loaded from one source.

    Entries are kept in display order, which is not necessarily chronological
    until ``sort`` is called.
    """

    entries: list[SubtitleEntry] = field(default_factory=list)
    source_name: str = ""
    encoding: str = CANONICAL_ENCODING
    has_bom: bool = False
    is_webvtt: bool = False
    stats: dict[ReadingSpeedBucket, int] = field(default_factory=empty_stats)

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> SubtitleEntry:
        """Get entry by index (0-based)."""
        return self.entries[index]

    def get_entry(self, index: int) -> SubtitleEntry | None:
        """Return the entry at ``index``, or None if there is none."""
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def set_webvtt(self, is_webvtt: bool = True) -> None:
        """Switch output format; WebVTT output is always UTF-8."""
        self.is_webvtt = is_webvtt
        if is_webvtt:
            self.encoding = CANONICAL_ENCODING

    def sort(self) -> None:
        """Sort entries by start time, keeping source order for equal starts."""
        keyed = [(entry.start, ordinal, entry) for ordinal, entry in enumerate(self)]
        keyed.sort(key=lambda item: (item[0], item[1]))
        self.entries = [entry for _, _, entry in keyed]

    def delete(self, index: int) -> bool:
        """Remove the entry at ``index`` and compact the sequence.

        Returns:
            True if an entry was removed, False if the index was out of range
        """
        if not 0 <= index < len(self.entries):
            logger.debug("delete_out_of_range", index=index, count=len(self.entries))
            return False
        del self.entries[index]
        return True
