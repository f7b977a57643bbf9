"""SRT format parser and serializer."""

import re
from collections.abc import Mapping

import structlog

from srtkit.constants import OUTPUT_LINE_ENDING, WEBVTT_HEADER
from srtkit.core.subtitle import Subtitle, SubtitleEntry
from srtkit.errors import InvalidFormatError

logger = structlog.get_logger()

_EOL = r"(?:\r\n|\r|\n)"
_TIMECODE = r"[0-9]{2}:[0-9]{2}:[0-9]{2}[,.][0-9]{3}"

# index, timing line, lazily matched text lines, blank separator line
CUE_PATTERN = re.compile(
    rf"[0-9]+{_EOL}({_TIMECODE}) --> ({_TIMECODE}){_EOL}((?:[^\r\n]*{_EOL})*?){_EOL}"
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Appended before matching so a last cue without trailing blank line still parses
_TRAILING_PADDING = "\n\n"


def is_valid_srt(content: str) -> bool:
    """Check whether content contains at least one cue block."""
    return CUE_PATTERN.search(content + _TRAILING_PADDING) is not None


def parse_srt(content: str, source_name: str = "") -> Subtitle:
    """Parse SRT (or WebVTT-style) content into a Subtitle object.

    Blocks that do not match the cue grammar are skipped. Index numbers are
    ignored; entries keep source order.

    Args:
        content: Decoded subtitle text
        source_name: Origin of the content, used in error messages

    Returns:
        Subtitle object containing parsed entries

    Raises:
        InvalidFormatError: If no cue block matches
    """
    matches = list(CUE_PATTERN.finditer(content + _TRAILING_PADDING))
    if not matches:
        raise InvalidFormatError(source_name)

    entries = [
        SubtitleEntry(
            start_tc=match.group(1),
            stop_tc=match.group(2),
            text=_LINE_BREAK.sub("\n", match.group(3)),
        )
        for match in matches
    ]

    is_webvtt = "." in matches[0].group(1)

    logger.debug(
        "subtitle_parsed",
        source=source_name,
        entries=len(entries),
        is_webvtt=is_webvtt,
    )
    return Subtitle(entries=entries, source_name=source_name, is_webvtt=is_webvtt)


def _format_block(
    number: int,
    entry: SubtitleEntry,
    *,
    webvtt: bool,
    strip_tags: bool,
    strip_basic: bool,
    replacements: Mapping[str, str] | None,
) -> str:
    text = entry.get_text(strip_tags, strip_basic, replacements)
    lines = [
        str(number),
        entry.timecode_string(webvtt),
        _LINE_BREAK.sub(OUTPUT_LINE_ENDING, text),
        "",
    ]
    return "".join(line + OUTPUT_LINE_ENDING for line in lines)


def serialize_srt_range(
    subtitle: Subtitle,
    start: int,
    end: int,
    *,
    strip_tags: bool = False,
    strip_basic: bool = False,
    replacements: Mapping[str, str] | None = None,
) -> str:
    """Serialize entries ``start`` to ``end`` (inclusive) to SRT format.

    Args:
        subtitle: Subtitle to serialize
        start: Position of the first entry; out of range means 0
        end: Position of the last entry; out of range means the last entry
        strip_tags: Remove ``{...}`` directives from the text
        strip_basic: Also remove basic markup (<i>, <b>, <u>...)
        replacements: Literal substrings to replace when stripping

    Returns:
        SRT format string with CRLF line endings, numbered from 1
    """
    count = len(subtitle)
    if start < 0 or start >= count:
        start = 0
    if end < 0 or end >= count:
        end = count - 1

    header = ""
    if subtitle.is_webvtt:
        header = WEBVTT_HEADER + OUTPUT_LINE_ENDING * 2

    blocks = [
        _format_block(
            number,
            subtitle[position],
            webvtt=subtitle.is_webvtt,
            strip_tags=strip_tags,
            strip_basic=strip_basic,
            replacements=replacements,
        )
        for number, position in enumerate(range(start, end + 1), start=1)
    ]

    return header + "".join(blocks)


def serialize_srt(
    subtitle: Subtitle,
    *,
    strip_tags: bool = False,
    strip_basic: bool = False,
    replacements: Mapping[str, str] | None = None,
) -> str:
    """Serialize Subtitle object to SRT (or WebVTT) format string.

    Args:
        subtitle: Subtitle object to serialize
        strip_tags: Remove ``{...}`` directives from the text
        strip_basic: Also remove basic markup (<i>, <b>, <u>...)
        replacements: Literal substrings to replace when stripping

    Returns:
        Subtitle text with CRLF line endings
    """
    return serialize_srt_range(
        subtitle,
        0,
        len(subtitle) - 1,
        strip_tags=strip_tags,
        strip_basic=strip_basic,
        replacements=replacements,
    )
