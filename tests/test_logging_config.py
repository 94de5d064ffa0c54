"""
Tests for structured logging.
"""

import json
import logging

from namedmodes.config import LoggingConfig
from namedmodes.logging_config import (
    CommandContext,
    JSONFormatter,
    StructuredFormatter,
    nick_var,
    setup_logging,
    setup_logging_from_config,
    target_var,
)


def _record(message="hello"):
    return logging.LogRecord(
        name="namedmodes.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestCommandContext:
    """Tests for CommandContext."""

    def test_sets_and_resets(self):
        with CommandContext(nick="alice", target="#test"):
            assert nick_var.get() == "alice"
            assert target_var.get() == "#test"

        assert nick_var.get() is None
        assert target_var.get() is None

    def test_nested(self):
        with CommandContext(nick="alice"):
            with CommandContext(target="#test"):
                assert nick_var.get() == "alice"
                assert target_var.get() == "#test"
            assert target_var.get() is None


class TestFormatters:
    """Tests for the log formatters."""

    def test_json_includes_context(self):
        with CommandContext(nick="alice", target="#test"):
            data = json.loads(JSONFormatter().format(_record()))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["nick"] == "alice"
        assert data["target"] == "#test"

    def test_json_without_context(self):
        data = json.loads(JSONFormatter().format(_record()))

        assert "nick" not in data

    def test_json_extra_fields(self):
        data = json.loads(JSONFormatter(extra_fields={"server": "irc.test"}).format(_record()))

        assert data["server"] == "irc.test"

    def test_structured_appends_context(self):
        formatter = StructuredFormatter(use_color=False)
        with CommandContext(nick="alice", target="#test"):
            line = formatter.format(_record())

        assert "[INFO]" in line
        assert "hello" in line
        assert line.endswith("[nick=alice, target=#test]")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_logging(self, tmp_path, restore_root_logger):
        root = setup_logging(level="DEBUG", json_format=True, log_dir=tmp_path, console_output=False)

        logging.getLogger("namedmodes.test").info("to file")
        for handler in root.handlers:
            handler.flush()

        lines = (tmp_path / "namedmodes.log").read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "to file"
        assert root.level == logging.DEBUG

    def test_console_only(self, restore_root_logger):
        root = setup_logging(level="WARNING")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert root.level == logging.WARNING

    def test_from_config(self, tmp_path, restore_root_logger):
        config = LoggingConfig(level="ERROR", log_dir=str(tmp_path), log_file="x.log")

        root = setup_logging_from_config(config)

        assert root.level == logging.ERROR
        assert (tmp_path / "x.log").exists()
