"""Merge the entries of two subtitles into one."""

import structlog

from srtkit.core.subtitle import Subtitle

logger = structlog.get_logger()


def merge_subtitles(target: Subtitle, other: Subtitle) -> Subtitle:
    """Import the entries of another subtitle into ``target``.

    Args:
        target: Subtitle receiving the entries; modified in place
        other: Subtitle providing the entries; its entry list is left as is

    Returns:
        ``target``, re-sorted by start time

    Raises:
        TypeError: If ``other`` is not a Subtitle

    Notes:
        - Entries are shared, not copied
        - Entries with equal start times keep their relative order,
          target entries first
    """
    if not isinstance(other, Subtitle):
        raise TypeError(
            f"Can only merge a Subtitle, got {type(other).__name__}"
        )

    target.entries.extend(other.entries)
    target.sort()

    logger.debug(
        "subtitles_merged",
        target=target.source_name,
        other=other.source_name,
        added=len(other),
        total=len(target),
    )
    return target
