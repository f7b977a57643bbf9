"""Pytest configuration and shared fixtures for integration tests."""

import codecs
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from srtkit.utils.config import get_settings

# ---------------------------------------------------------------------------
# Environment fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def no_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Switch to a temporary directory with no .env file."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()


@pytest.fixture
def fake_file_command() -> Iterator[MagicMock]:
    """Patch the ``file`` utility so it reports UTF-8 for every path."""
    with patch("srtkit.utils.encoding.subprocess.run") as mock_run:
        mock_run.return_value = MagicMock(stdout="utf-8\n", returncode=0)
        yield mock_run


# ---------------------------------------------------------------------------
# Subtitle file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def bom_srt_file(tmp_path: Path) -> Path:
    """Write a three-cue UTF-8 file with BOM and CRLF line endings."""
    path = tmp_path / "episode.srt"
    path.write_bytes(
        codecs.BOM_UTF8
        + b"1\r\n00:00:01,000 --> 00:00:04,000\r\nHello, this is a test.\r\n\r\n"
        + b"2\r\n00:00:05,000 --> 00:00:08,000\r\nThis is the second subtitle.\r\n\r\n"
        + b"3\r\n00:00:09,000 --> 00:00:12,000\r\nAnd this is the third one.\r\n\r\n"
    )
    return path


@pytest.fixture
def insert_srt_file(tmp_path: Path) -> Path:
    """Write a single very short cue meant to be merged into another file."""
    path = tmp_path / "insert.srt"
    path.write_text(
        "1\n00:00:04,500 --> 00:00:04,900\n<i>Quick!</i>\n",
        encoding="utf-8",
    )
    return path
