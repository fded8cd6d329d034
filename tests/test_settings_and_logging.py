"""Tests for config/settings.py and config/enhanced_logging.py."""

import logging

from cards.elements import text_block
from config import enhanced_logging
from config.enhanced_logging import (
    CONSOLE_FORMAT,
    ColoredFormatter,
    PlainFormatter,
    FILE_FORMAT,
    get_logger,
    log_execution_time,
    setup_logger,
)
from config.settings import Settings, settings


def _record(msg):
    return logging.LogRecord("cards.test", logging.INFO, __file__, 12, msg, None, None)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_PATH", "STRICT_VALIDATION", "EMOJI_LANGUAGE"):
            monkeypatch.delenv(f"CARD_ELEMENTS_{name}", raising=False)
        configured = Settings(_env_file=None)
        assert configured.log_level == "INFO"
        assert configured.log_path == ""
        assert configured.strict_validation is True
        assert configured.emoji_language == "alias"
        assert configured.max_log_message_length == 3000

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CARD_ELEMENTS_STRICT_VALIDATION", "false")
        monkeypatch.setenv("CARD_ELEMENTS_EMOJI_LANGUAGE", "en")
        configured = Settings(_env_file=None)
        assert configured.strict_validation is False
        assert configured.emoji_language == "en"


class TestFormatters:
    def test_colors_stripped_without_tty(self):
        formatter = ColoredFormatter(CONSOLE_FORMAT, use_colors=False)
        output = formatter.format(_record("hello"))
        assert "\033[" not in output
        assert "hello" in output
        assert "test_settings_and_logging.py:12" in output

    def test_long_messages_truncated(self, monkeypatch):
        monkeypatch.setattr(settings, "max_log_message_length", 20)
        output = PlainFormatter(FILE_FORMAT).format(_record("x" * 50))
        assert output.endswith("x" * 17 + "...")


class TestLibraryLogging:
    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("cards").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_building_leaves_root_logger_alone(self, monkeypatch, preprocessor):
        root = logging.getLogger()
        monkeypatch.setattr(enhanced_logging, "_root_logger_initialized", False)
        before = list(root.handlers)
        level = root.level
        text_block(text="hello", preprocessor=preprocessor)
        get_logger("cards.test")
        assert enhanced_logging._root_logger_initialized is False
        assert root.handlers == before
        assert root.level == level


class TestSetup:
    def test_setup_is_idempotent(self, monkeypatch):
        root = logging.getLogger()
        before = list(root.handlers)
        monkeypatch.setattr(enhanced_logging, "_root_logger_initialized", False)
        level = root.level
        try:
            assert setup_logger() is setup_logger()
        finally:
            root.setLevel(level)
            for handler in list(root.handlers):
                if handler not in before:
                    root.removeHandler(handler)

    def test_file_handler_when_log_path_set(self, monkeypatch, tmp_path):
        root = logging.getLogger()
        before = list(root.handlers)
        monkeypatch.setattr(settings, "log_path", str(tmp_path))
        monkeypatch.setattr(enhanced_logging, "_root_logger_initialized", False)
        try:
            setup_logger()
            file_handlers = [
                h for h in root.handlers
                if isinstance(h, logging.FileHandler) and getattr(h, "_cards_handler", False)
            ]
            assert len(file_handlers) == 1
            assert str(tmp_path) in file_handlers[0].baseFilename
        finally:
            for handler in list(root.handlers):
                if handler not in before:
                    root.removeHandler(handler)
                    handler.close()
            for handler in before:
                if handler not in root.handlers:
                    root.addHandler(handler)


class TestExecutionTime:
    def test_returns_result_and_logs(self, caplog):
        @log_execution_time
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(2, 3) == 5
        assert "Completed add" in caplog.text
