import logging
import uuid

from binstring.logging import LOG_FORMAT, get_logger


def _fresh_name() -> str:
    return f"binstring.test.{uuid.uuid4().hex}"


class TestGetLogger:
    def test_default_level_is_warning(self, monkeypatch):
        """Library loggers default to WARNING."""
        monkeypatch.delenv("BINSTRING_LOG_LEVEL", raising=False)
        logger = get_logger(_fresh_name())
        assert logger.level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        """BINSTRING_LOG_LEVEL overrides the default level."""
        monkeypatch.setenv("BINSTRING_LOG_LEVEL", "debug")
        logger = get_logger(_fresh_name())
        assert logger.level == logging.DEBUG

    def test_invalid_level_falls_back(self, monkeypatch):
        """Unknown level names fall back to WARNING."""
        monkeypatch.setenv("BINSTRING_LOG_LEVEL", "chatty")
        logger = get_logger(_fresh_name())
        assert logger.level == logging.WARNING

    def test_non_level_attribute_falls_back(self, monkeypatch):
        """Names of non-level logging attributes are not accepted as levels."""
        monkeypatch.setenv("BINSTRING_LOG_LEVEL", "basic_format")
        logger = get_logger(_fresh_name())
        assert logger.level == logging.WARNING

    def test_single_handler(self):
        """Repeated calls do not stack handlers."""
        name = _fresh_name()
        first = get_logger(name)
        second = get_logger(name)

        assert first is second
        assert len(second.handlers) == 1
        assert second.handlers[0].formatter._fmt == LOG_FORMAT
