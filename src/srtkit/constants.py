"""Constants and enums shared across the package."""

from enum import StrEnum


class ReadingSpeedBucket(StrEnum):
    """Named reading-speed ranges, ordered from slowest to fastest."""

    TOO_SLOW = "tooSlow"
    SLOW_ACCEPTABLE = "slowAcceptable"
    A_BIT_SLOW = "aBitSlow"
    GOOD_SLOW = "goodSlow"
    PERFECT = "perfect"
    GOOD_FAST = "goodFast"
    A_BIT_FAST = "aBitFast"
    FAST_ACCEPTABLE = "fastAcceptable"
    TOO_FAST = "tooFast"


# Exclusive upper bounds; anything at or above the last bound is TOO_FAST
READING_SPEED_THRESHOLDS: tuple[tuple[float, ReadingSpeedBucket], ...] = (
    (5, ReadingSpeedBucket.TOO_SLOW),
    (10, ReadingSpeedBucket.SLOW_ACCEPTABLE),
    (13, ReadingSpeedBucket.A_BIT_SLOW),
    (15, ReadingSpeedBucket.GOOD_SLOW),
    (23, ReadingSpeedBucket.PERFECT),
    (27, ReadingSpeedBucket.GOOD_FAST),
    (31, ReadingSpeedBucket.A_BIT_FAST),
    (35, ReadingSpeedBucket.FAST_ACCEPTABLE),
)

BUCKET_COLORS: dict[ReadingSpeedBucket, str] = {
    ReadingSpeedBucket.TOO_SLOW: "#9999FF",
    ReadingSpeedBucket.SLOW_ACCEPTABLE: "#99CCFF",
    ReadingSpeedBucket.A_BIT_SLOW: "#99FFFF",
    ReadingSpeedBucket.GOOD_SLOW: "#99FFCC",
    ReadingSpeedBucket.PERFECT: "#99FF99",
    ReadingSpeedBucket.GOOD_FAST: "#CCFF99",
    ReadingSpeedBucket.A_BIT_FAST: "#FFFF99",
    ReadingSpeedBucket.FAST_ACCEPTABLE: "#FFCC99",
    ReadingSpeedBucket.TOO_FAST: "#FF9999",
}

BUCKET_LABELS: dict[ReadingSpeedBucket, str] = {
    ReadingSpeedBucket.TOO_SLOW: "TOO SLOW",
    ReadingSpeedBucket.SLOW_ACCEPTABLE: "Slow, acceptable",
    ReadingSpeedBucket.A_BIT_SLOW: "A bit slow",
    ReadingSpeedBucket.GOOD_SLOW: "Good",
    ReadingSpeedBucket.PERFECT: "Perfect",
    ReadingSpeedBucket.GOOD_FAST: "Good",
    ReadingSpeedBucket.A_BIT_FAST: "A bit fast",
    ReadingSpeedBucket.FAST_ACCEPTABLE: "Fast, acceptable",
    ReadingSpeedBucket.TOO_FAST: "TOO FAST",
}

# VisualSubSync reading speed subtracts this from the duration
READING_SPEED_OFFSET_MS = 500
MIN_READING_SPEED_DURATION_MS = 501

CANONICAL_ENCODING = "UTF-8"
WEBVTT_HEADER = "WEBVTT"
OUTPUT_LINE_ENDING = "\r\n"
