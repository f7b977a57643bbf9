"""Conversion between textual timecodes and millisecond offsets."""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, ndigits: int = 0) -> float | int:
    """Round a number with halves going away from zero.

    Unlike the built-in ``round``, exact halves never go to the even side.

    Args:
        value: Number to round
        ndigits: Number of decimal places to keep

    Returns:
        An ``int`` when ``ndigits`` is 0, otherwise a ``float``.
        Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def timecode_to_ms(timecode: str) -> int:
    """Convert a timecode string into milliseconds.

    Args:
        timecode: Timecode in ``HH:MM:SS,mmm`` or ``HH:MM:SS.mmm`` format

    Returns:
        Offset in milliseconds

    Raises:
        ValueError: If the timecode does not have three numeric fields
    """
    try:
        hours, minutes, seconds = timecode.strip().split(":")
        total = (
            int(hours) * 3_600_000
            + int(minutes) * 60_000
            + float(seconds.replace(",", ".")) * 1000
        )
    except ValueError as e:
        raise ValueError(
            f"Invalid timecode '{timecode}', expected 'HH:MM:SS,mmm'"
        ) from e

    return int(round_half_away(total))


def ms_to_timecode(ms: float, separator: str = ",") -> str:
    """Convert milliseconds into a timecode string.

    The hour field wraps at 24, and a fractional input close to the next
    second can yield a four-digit millisecond field (e.g. ``999.6`` gives
    ``00:00:00,1000``).

    Args:
        ms: Offset in milliseconds
        separator: Fractional-second separator ("," for SubRip, "." for WebVTT)

    Returns:
        Timecode string in ``HH:MM:SS,mmm`` format
    """
    seconds = ms / 1000
    millis = int(round_half_away((seconds - int(seconds)) * 1000))
    secs = int(math.fmod(int(seconds), 60))
    minutes = int(math.fmod(int(seconds / 60), 60))
    hours = int(math.fmod(int(seconds / 3600), 24))

    return f"{hours:02d}:{minutes:02d}:{secs:02d}{separator}{millis:03d}"
