"""Search subtitle entries by text or by time."""

import re

from srtkit.core.subtitle import Subtitle
from srtkit.core.timecode import timecode_to_ms

_LINE_OR_SPACE = r"(?: |\r\n|\r|\n)"
_BOUNDARY_BEFORE = r"(?:^|\s|[.,!?])"
_BOUNDARY_AFTER = r"(?:$|\s|[.,!?])"


def build_search_pattern(
    word: str,
    *,
    case_sensitive: bool = False,
    strict: bool = False,
) -> re.Pattern[str]:
    """Compile the pattern used by ``search_word``.

    Args:
        word: Literal word or expression to look for
        case_sensitive: Match case exactly
        strict: Require whitespace, punctuation or text bounds around the match

    Returns:
        Compiled regular expression
    """
    # re.escape turns spaces into "\ ", so replace the escaped form
    pattern = re.escape(word).replace("\\ ", _LINE_OR_SPACE)

    if strict:
        pattern = f"{_BOUNDARY_BEFORE}{pattern}{_BOUNDARY_AFTER}"

    flags = 0 if case_sensitive else re.IGNORECASE
    return re.compile(pattern, flags)


def search_word(
    subtitle: Subtitle,
    word: str,
    *,
    case_sensitive: bool = False,
    strict: bool = False,
) -> list[int] | None:
    """Find entries whose text contains a word or expression.

    Spaces in ``word`` also match line breaks, so a phrase can span two
    lines of the same cue.

    Args:
        subtitle: Subtitle to search
        word: Literal word or expression to look for
        case_sensitive: Match case exactly
        strict: Require whitespace, punctuation or text bounds around the match

    Returns:
        Positions of matching entries, or None when nothing matches
    """
    pattern = build_search_pattern(word, case_sensitive=case_sensitive, strict=strict)
    matches = [
        position
        for position, entry in enumerate(subtitle)
        if pattern.search(entry.text)
    ]
    return matches or None


def search_cue_at_timecode(subtitle: Subtitle, timecode: int | str) -> int:
    """Find the entry displayed at, or coming right after, a point in time.

    Args:
        subtitle: Subtitle to search, expected in chronological order
        timecode: Milliseconds, or a timecode string

    Returns:
        Position of the active or upcoming entry, ``len(subtitle)`` if none
    """
    at = timecode_to_ms(timecode) if isinstance(timecode, str) else timecode

    prev_stop = 0
    for position, entry in enumerate(subtitle):
        in_gap = prev_stop <= at < entry.start
        displayed = entry.start <= at < entry.stop
        if in_gap or displayed:
            return position
        prev_stop = entry.stop

    return len(subtitle)
