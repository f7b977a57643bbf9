"""Subtitle format handlers."""

from srtkit.formats.report import render_statistics_html, render_statistics_xml
from srtkit.formats.srt import (
    CUE_PATTERN,
    is_valid_srt,
    parse_srt,
    serialize_srt,
    serialize_srt_range,
)

__all__ = [
    "CUE_PATTERN",
    "is_valid_srt",
    "parse_srt",
    "render_statistics_html",
    "render_statistics_xml",
    "serialize_srt",
    "serialize_srt_range",
]
