"""Load subtitle files into Subtitle objects and write them back."""

from collections.abc import Mapping
from pathlib import Path
from typing import Literal

import structlog

from srtkit.core.statistics import ReadingStatistics
from srtkit.core.subtitle import Subtitle
from srtkit.errors import (
    SourceNotFoundError,
    SubtitleError,
    UnreadableSourceError,
    WriteFailureError,
)
from srtkit.formats.report import render_statistics_html, render_statistics_xml
from srtkit.formats.srt import is_valid_srt, parse_srt, serialize_srt
from srtkit.utils.config import Settings, get_settings
from srtkit.utils.encoding import (
    decode_to_canonical,
    detect_encoding,
    encode_from_canonical,
)

logger = structlog.get_logger()


def _read_source(path: Path) -> bytes:
    if not path.exists():
        raise SourceNotFoundError(str(path))

    try:
        data = path.read_bytes()
    except OSError as e:
        raise UnreadableSourceError(str(path), detail=str(e)) from e

    if not data:
        raise UnreadableSourceError(str(path), detail="File is empty")
    return data


def load_subtitle(
    path: Path | str,
    encoding: str | None = None,
    *,
    settings: Settings | None = None,
) -> Subtitle:
    """Load and parse a subtitle file.

    Args:
        path: Subtitle file (.srt or WebVTT-style)
        encoding: Encoding of the file; detected when omitted
        settings: Settings to use; defaults to get_settings()

    Returns:
        Parsed Subtitle with encoding and BOM information recorded

    Raises:
        SourceNotFoundError: If the file does not exist
        UnreadableSourceError: If the file cannot be read or is empty
        EncodingUndetectableError: If no usable encoding can be determined
        InvalidFormatError: If no cue block can be parsed
    """
    path = Path(path)
    settings = settings or get_settings()

    data = _read_source(path)
    label = encoding or detect_encoding(path, settings)
    decoded = decode_to_canonical(
        data, label, default_encoding=settings.default_encoding
    )

    subtitle = parse_srt(decoded.text, source_name=str(path))
    subtitle.encoding = decoded.encoding
    subtitle.has_bom = decoded.has_bom

    logger.info(
        "subtitle_loaded",
        source=str(path),
        entries=len(subtitle),
        encoding=subtitle.encoding,
        has_bom=subtitle.has_bom,
        is_webvtt=subtitle.is_webvtt,
    )
    return subtitle


def is_valid_subtitle_file(
    path: Path | str,
    encoding: str | None = None,
    *,
    settings: Settings | None = None,
) -> bool:
    """Check whether a file contains at least one parseable cue.

    Missing, unreadable or undecodable files are reported as invalid.
    """
    path = Path(path)
    settings = settings or get_settings()

    try:
        data = _read_source(path)
        label = encoding or detect_encoding(path, settings)
        decoded = decode_to_canonical(
            data, label, default_encoding=settings.default_encoding
        )
    except SubtitleError as e:
        logger.debug("subtitle_validation_failed", source=str(path), code=e.code)
        return False

    return is_valid_srt(decoded.text)


def _write_bytes(path: Path, data: bytes) -> Path:
    try:
        path.write_bytes(data)
    except OSError as e:
        raise WriteFailureError(str(path), detail=str(e)) from e
    return path


def save_subtitle(
    subtitle: Subtitle,
    path: Path | str | None = None,
    *,
    content: str | None = None,
    strip_tags: bool = False,
    strip_basic: bool = False,
    replacements: Mapping[str, str] | None = None,
) -> Path:
    """Serialize and write a subtitle in its working encoding.

    Args:
        subtitle: Subtitle to save
        path: Output file; defaults to the subtitle's source
        content: Pre-built text (e.g. from serialize_srt_range); built from
            the whole subtitle when omitted
        strip_tags: Remove ``{...}`` directives when building
        strip_basic: Also remove basic markup when building
        replacements: Literal substrings to replace when stripping

    Returns:
        Path of the written file

    Raises:
        WriteFailureError: If the file cannot be written
    """
    target = Path(path) if path is not None else Path(subtitle.source_name)

    if content is None:
        content = serialize_srt(
            subtitle,
            strip_tags=strip_tags,
            strip_basic=strip_basic,
            replacements=replacements,
        )

    data = encode_from_canonical(content, subtitle.encoding, subtitle.has_bom)
    _write_bytes(target, data)

    logger.info(
        "subtitle_saved",
        target=str(target),
        entries=len(subtitle),
        encoding=subtitle.encoding,
        size=len(data),
    )
    return target


def save_statistics(
    statistics: ReadingStatistics,
    path: Path | str,
    *,
    output: Literal["html", "xml"] = "html",
    source_name: str = "",
) -> Path:
    """Render reading-speed statistics and write them to a file.

    Args:
        statistics: Result of compute_statistics
        path: Output file
        output: Report format, "html" or "xml"
        source_name: Subtitle file name written into the XML report

    Returns:
        Path of the written file

    Raises:
        ValueError: If the output format is unknown
        EmptyDocumentStatisticsError: If the statistics cover no entries
        WriteFailureError: If the file cannot be written
    """
    if output not in {"html", "xml"}:
        raise ValueError(f"Unsupported report format: {output}. Supported: html, xml")

    report = statistics.to_report(source_name)
    if output == "xml":
        rendered = render_statistics_xml(report)
    else:
        rendered = render_statistics_html(report)

    return _write_bytes(Path(path), rendered.encode("utf-8"))
