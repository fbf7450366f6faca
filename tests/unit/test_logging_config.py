"""Unit tests for logging configuration and the JSON formatter."""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from condlang.config.models import LoggingConfig
from condlang.logging import JSONFormatter, configure_logging


def _record(
    msg: str = "Test",
    name: str = "condlang.test",
    level: int = logging.INFO,
    args: tuple = (),
    exc_info=None,
) -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("DEBUG", logging.DEBUG),
        ],
    )
    def test_sets_root_level(self, level: str, expected: int) -> None:
        """Should map level names to logging constants, ignoring case."""
        configure_logging(LoggingConfig(level=level))

        assert logging.getLogger().level == expected

    def test_stderr_only(self) -> None:
        """Should add a single stderr handler when no file is given."""
        configure_logging(LoggingConfig(file=None))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, tmp_path: Path) -> None:
        """Should log only to a rotating file when one is configured."""
        configure_logging(LoggingConfig(file=tmp_path / "condlang.log"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RotatingFileHandler)

    def test_file_and_stderr(self, tmp_path: Path) -> None:
        """Should add both handlers when include_stderr is set."""
        configure_logging(
            LoggingConfig(file=tmp_path / "condlang.log", include_stderr=True)
        )

        assert len(logging.getLogger().handlers) == 2

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Should create missing parent directories for the log file."""
        log_dir = tmp_path / "logs" / "nested"
        configure_logging(LoggingConfig(file=log_dir / "condlang.log"))

        assert log_dir.exists()

    def test_falls_back_to_stderr(self, tmp_path: Path, capsys) -> None:
        """Should fall back to stderr when the log file cannot be opened."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")

        configure_logging(LoggingConfig(file=blocker / "condlang.log"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], RotatingFileHandler)
        assert "Could not open log file" in capsys.readouterr().err

    def test_writes_json_lines(self, tmp_path: Path) -> None:
        """Should write one JSON object per record to the log file."""
        log_file = tmp_path / "condlang.log"
        configure_logging(LoggingConfig(level="debug", file=log_file, format="json"))

        logging.getLogger("condlang.solver").debug("Solved %s", "x")
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "Solved x"
        assert entry["logger"] == "condlang.solver"

    def test_text_formatter(self) -> None:
        configure_logging(LoggingConfig(format="text"))

        assert not isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_json_formatter(self) -> None:
        configure_logging(LoggingConfig(format="json"))

        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_reconfigure_replaces_handlers(self) -> None:
        """Should not accumulate handlers across calls."""
        configure_logging(LoggingConfig(level="info"))
        initial = len(logging.getLogger().handlers)

        configure_logging(LoggingConfig(level="debug"))

        assert len(logging.getLogger().handlers) == initial


class TestJSONFormatter:
    """Tests for JSONFormatter output."""

    def test_basic_fields(self) -> None:
        data = json.loads(JSONFormatter().format(_record("Test message")))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert data["logger"] == "condlang.test"

    def test_timestamp_uses_record_created_time(self) -> None:
        """Should render record.created as an ISO-8601 UTC timestamp."""
        record = _record()
        record.created = 1577836800.0  # 2020-01-01 00:00:00 UTC

        data = json.loads(JSONFormatter().format(record))

        assert datetime.fromisoformat(data["timestamp"]) == datetime(
            2020, 1, 1, tzinfo=timezone.utc
        )

    def test_message_args(self) -> None:
        data = json.loads(JSONFormatter().format(_record("Solved %r", args=("a > b",))))

        assert data["message"] == "Solved 'a > b'"

    @pytest.mark.parametrize("name", ["root", ""])
    def test_no_logger_field_for_root(self, name: str) -> None:
        data = json.loads(JSONFormatter().format(_record(name=name)))

        assert "logger" not in data

    def test_extra_context(self) -> None:
        """Should collect non-standard record attributes under context."""
        record = _record()
        record.expression = "5 > 3"
        record.result = True

        data = json.loads(JSONFormatter().format(record))

        assert data["context"] == {"expression": "5 > 3", "result": True}

    def test_no_context_without_extras(self) -> None:
        data = json.loads(JSONFormatter().format(_record()))

        assert "context" not in data

    def test_exception_info(self) -> None:
        try:
            raise ValueError("Unknown comparison operator")
        except ValueError:
            record = _record("failed", level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert "ValueError" in data["exception"]
        assert "Unknown comparison operator" in data["exception"]

    def test_special_characters_escaped(self) -> None:
        record = _record('"a" == "a"\n&& 1 > 0')

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == '"a" == "a"\n&& 1 > 0'
