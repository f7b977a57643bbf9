"""structlog configuration."""

import logging

import structlog

from srtkit.utils.config import get_settings


def setup_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Configure structlog for applications embedding srtkit.

    Args:
        level: Minimum level name; defaults to ``Settings.log_level``
        json: Use the JSON renderer; defaults to ``Settings.log_json``
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    use_json = settings.log_json if json is None else json

    renderer: structlog.typing.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        cache_logger_on_first_use=False,
    )
