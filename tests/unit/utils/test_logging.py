"""Unit tests for structlog configuration and emitted events."""

import json
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from srtkit.core.statistics import compute_statistics
from srtkit.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_json_output(self, capsys):
        """Test that the JSON renderer emits one object per event."""
        setup_logging("debug", json=True)

        structlog.get_logger().info("subtitle_loaded", entries=3)

        event = json.loads(capsys.readouterr().out.strip())
        assert event["event"] == "subtitle_loaded"
        assert event["entries"] == 3
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_level_filters_lower_events(self, capsys):
        """Test that events below the configured level are dropped."""
        setup_logging("warning", json=True)

        structlog.get_logger().info("subtitle_loaded")

        assert capsys.readouterr().out == ""

    def test_defaults_come_from_settings(self, capsys, monkeypatch):
        """Test that level and renderer default to the environment."""
        monkeypatch.setenv("SRTKIT_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("SRTKIT_LOG_JSON", "true")
        setup_logging()

        logger = structlog.get_logger()
        logger.warning("ignored")
        logger.error("write_failure", target="out.srt")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "write_failure"


class TestEmittedEvents:
    """Events logged by the library."""

    def test_statistics_event(self, sample_subtitle):
        """Test the event emitted after classifying entries."""
        with capture_logs() as logs:
            compute_statistics(sample_subtitle)

        assert logs == [
            {
                "event": "statistics_computed",
                "log_level": "info",
                "source": "sample.srt",
                "total": 3,
                "perfect": 0,
            }
        ]

    def test_delete_out_of_range_event(self, sample_subtitle):
        """Test the debug event for an index without entry."""
        with capture_logs() as logs:
            assert sample_subtitle.delete(7) is False

        assert logs[0]["event"] == "delete_out_of_range"
        assert logs[0]["count"] == 3
