"""Tests for logging configuration."""

import json
import logging

from anki_splitter.utils.logging import configure_logging, get_logger


class TestLogging:
    """structlog output to console and file."""

    def test_file_log_is_json(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "anki-splitter.log"
        configure_logging(log_level="ERROR", log_file=log_file)

        get_logger("test").info("hard_split_completed", source_id="1726891647690", fragments=2)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        event = next(r for r in records if r["event"] == "hard_split_completed")
        assert event["fragments"] == 2
        assert event["source_id"] == "1726891647690"
        assert event["level"] == "info"

    def test_console_level(self, capsys) -> None:
        configure_logging(log_level="WARNING")

        logger = get_logger("test")
        logger.info("quiet_event")
        logger.warning("loud_event")

        err = capsys.readouterr().err
        assert "loud_event" in err
        assert "quiet_event" not in err
