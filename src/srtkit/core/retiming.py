"""Frame-rate conversion of subtitle timings."""

import structlog

from srtkit.core.subtitle import Subtitle
from srtkit.core.timecode import round_half_away

logger = structlog.get_logger()


def change_frame_rate(subtitle: Subtitle, old_fps: float, new_fps: float) -> None:
    """Rescale every entry's timing by ``new_fps / old_fps``.

    Args:
        subtitle: Subtitle to retime in place
        old_fps: Frame rate the timings were authored for
        new_fps: Target frame rate

    Raises:
        ValueError: If either frame rate is not positive
    """
    if old_fps <= 0 or new_fps <= 0:
        raise ValueError(
            f"Frame rates must be positive, got {old_fps} -> {new_fps}"
        )

    ratio = new_fps / old_fps
    for entry in subtitle:
        old_start = entry.start
        old_stop = entry.stop

        entry.set_start(int(round_half_away(old_start * ratio)))
        entry.set_stop(int(round_half_away(old_stop * ratio)))

    logger.info(
        "frame_rate_changed",
        source=subtitle.source_name,
        old_fps=old_fps,
        new_fps=new_fps,
        entries=len(subtitle),
    )
