"""Reading-speed statistics over subtitle entries."""

from dataclasses import dataclass, field

import structlog
from pydantic import BaseModel

from srtkit.constants import (
    BUCKET_COLORS,
    BUCKET_LABELS,
    READING_SPEED_THRESHOLDS,
    ReadingSpeedBucket,
)
from srtkit.core.subtitle import Subtitle, empty_stats
from srtkit.core.timecode import round_half_away
from srtkit.errors import EmptyDocumentStatisticsError

logger = structlog.get_logger()


class StatisticsRange(BaseModel):
    """One bucket row of a statistics report."""

    name: ReadingSpeedBucket
    label: str
    color: str
    value: int
    percent: float


class StatisticsReport(BaseModel):
    """Structured reading-speed report, ready for rendering."""

    source_name: str = ""
    total: int
    ranges: list[StatisticsRange]


def classify_reading_speed(reading_speed: float) -> ReadingSpeedBucket:
    """Return the bucket for a reading speed.

    Boundary values belong to the faster bucket (thresholds use ``<``).
    """
    for upper_bound, bucket in READING_SPEED_THRESHOLDS:
        if reading_speed < upper_bound:
            return bucket
    return ReadingSpeedBucket.TOO_FAST


@dataclass
class ReadingStatistics:
    """Bucket counts computed over a subtitle."""

    counts: dict[ReadingSpeedBucket, int] = field(default_factory=empty_stats)
    total: int = 0

    def percentage_of(self, bucket: ReadingSpeedBucket) -> float:
        """Share of entries in ``bucket``, as a percentage with one decimal.

        Raises:
            EmptyDocumentStatisticsError: If no entries were counted
        """
        if self.total == 0:
            raise EmptyDocumentStatisticsError()
        return float(round_half_away(self.counts[bucket] * 100 / self.total, 1))

    def to_report(self, source_name: str = "") -> StatisticsReport:
        """Build the report structure consumed by the renderers."""
        return StatisticsReport(
            source_name=source_name,
            total=self.total,
            ranges=[
                StatisticsRange(
                    name=bucket,
                    label=BUCKET_LABELS[bucket],
                    color=BUCKET_COLORS[bucket],
                    value=self.counts[bucket],
                    percent=self.percentage_of(bucket),
                )
                for bucket in ReadingSpeedBucket
            ],
        )


def compute_statistics(subtitle: Subtitle) -> ReadingStatistics:
    """Classify every entry of ``subtitle`` by reading speed.

    The subtitle's ``stats`` mapping is reset and filled with the new counts.

    Args:
        subtitle: Subtitle to analyse

    Returns:
        Bucket counts and total number of entries
    """
    counts = empty_stats()
    for entry in subtitle:
        metrics = entry.metrics()
        counts[classify_reading_speed(metrics.reading_speed)] += 1

    subtitle.stats = dict(counts)
    statistics = ReadingStatistics(counts=counts, total=len(subtitle))

    logger.info(
        "statistics_computed",
        source=subtitle.source_name,
        total=statistics.total,
        perfect=counts[ReadingSpeedBucket.PERFECT],
    )
    return statistics
