"""Unit tests for logging infrastructure."""

import json
import logging
import sys

from pantry_chef.utils.logger import ColorTextFormatter, JSONFormatter, get_logger, logger


def make_record(msg="Test message", level=logging.INFO, name="test_logger", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Test JSONFormatter produces valid JSON output."""

    def test_json_formatter_outputs_valid_json(self):
        """Test that JSONFormatter produces valid JSON."""
        parsed = json.loads(JSONFormatter().format(make_record()))

        assert parsed["level"] == "INFO"
        assert parsed["logger"] == "test_logger"
        assert parsed["message"] == "Test message"
        assert "timestamp" in parsed

    def test_json_formatter_includes_exception_traceback(self):
        """Test that JSONFormatter includes exception traceback when present."""
        try:
            raise ValueError("Test error")
        except ValueError:
            record = make_record("Error occurred", level=logging.ERROR, exc_info=sys.exc_info())

        parsed = json.loads(JSONFormatter().format(record))

        assert "exception" in parsed
        assert "ValueError" in parsed["exception"]

    def test_json_formatter_includes_generation_extras(self):
        """Test that outcome and recipe_id extras are emitted when present."""
        record = make_record()
        record.outcome = "blocked"
        record.recipe_id = "recipe_abc"

        parsed = json.loads(JSONFormatter().format(record))

        assert parsed["outcome"] == "blocked"
        assert parsed["recipe_id"] == "recipe_abc"
        assert "ingredient_count" not in parsed


class TestColorTextFormatter:
    """Test ColorTextFormatter produces colored text output."""

    def test_includes_level_logger_and_message(self):
        """Test that the line contains level, logger name and message."""
        output = ColorTextFormatter().format(make_record("Custom message", name="my_logger"))

        assert "INFO" in output
        assert "my_logger" in output
        assert "Custom message" in output

    def test_uses_level_color(self):
        """Test that ERROR records are wrapped in the red ANSI code."""
        output = ColorTextFormatter().format(make_record(level=logging.ERROR))

        assert output.startswith("\033[31m")
        assert output.endswith(ColorTextFormatter.RESET)

    def test_appends_generation_extras(self):
        """Test that extras are rendered as key=value pairs."""
        record = make_record()
        record.outcome = "success"
        record.ingredient_count = 2

        output = ColorTextFormatter().format(record)

        assert "[outcome=success ingredient_count=2]" in output

    def test_includes_exception_traceback(self):
        """Test that ColorTextFormatter includes exception traceback."""
        try:
            raise RuntimeError("Test error")
        except RuntimeError:
            record = make_record("Error occurred", level=logging.ERROR, exc_info=sys.exc_info())

        output = ColorTextFormatter().format(record)

        assert "RuntimeError" in output
        assert "Test error" in output


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_logger_instance(self):
        """Test that get_logger returns a logging.Logger instance."""
        assert isinstance(get_logger("pantry_chef_test_module"), logging.Logger)

    def test_get_logger_reuses_configured_logger(self):
        """Test that repeated calls do not stack handlers."""
        first = get_logger("pantry_chef_reuse")
        second = get_logger("pantry_chef_reuse")

        assert first is second
        assert len(second.handlers) == 1

    def test_json_log_type_selects_json_formatter(self, monkeypatch):
        """Test that LOG_TYPE=json attaches JSONFormatter."""
        monkeypatch.setenv("LOG_TYPE", "json")
        json_logger = get_logger("pantry_chef_json_logger")

        assert isinstance(json_logger.handlers[0].formatter, JSONFormatter)

    def test_log_level_from_environment(self, monkeypatch):
        """Test that LOG_LEVEL controls the logger level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        debug_logger = get_logger("pantry_chef_debug_logger")

        assert debug_logger.level == logging.DEBUG

    def test_module_logger_name(self):
        """Test the module-level service logger."""
        assert logger.name == "pantry_chef"
