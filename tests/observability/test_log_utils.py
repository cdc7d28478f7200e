"""
Tests for logging helpers.
"""

import logging

import pytest

from ragindex.observability import (
    configure_logging,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("short", "short"),
            ([0.1, 0.2, 0.3], "list(3 items)"),
            ({"a": 1, "b": 2}, "dict(2 keys)"),
            (42, "42"),
        ],
    )
    def test_should_render_value(self, value, expected: str) -> None:
        assert safe_log_value(value) == expected

    def test_long_string_should_be_truncated(self) -> None:
        rendered = safe_log_value("x" * 500, max_length=10)

        assert rendered.startswith("x" * 10 + "...")
        assert "500 total" in rendered


class TestLogWithContext:
    def test_should_append_context_and_attach_record_attribute(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        # Arrange
        logger = logging.getLogger("ragindex.tests.log_utils")

        # Act
        with caplog.at_level(logging.INFO, logger="ragindex.tests.log_utils"):
            log_with_context(logger, logging.INFO, "Indexed file", path="/a.md", chunks=3)

        # Assert
        record = caplog.records[-1]
        assert record.getMessage() == "Indexed file [path=/a.md chunks=3]"
        assert record.context == {"path": "/a.md", "chunks": "3"}

    def test_exception_should_be_logged_with_type_and_traceback(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = logging.getLogger("ragindex.tests.log_utils")
        error = RuntimeError("boom")

        with caplog.at_level(logging.ERROR, logger="ragindex.tests.log_utils"):
            log_exception_with_context(logger, "Chunk failed", error, chunk_index=1)

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.context["error_type"] == "RuntimeError"
        assert record.context["chunk_index"] == "1"
        assert record.exc_info is not None


class TestConfigureLogging:
    @pytest.fixture
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield root
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_should_install_single_handler_with_level(self, restore_root_logger) -> None:
        configure_logging("debug")
        configure_logging("WARNING")

        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unknown_level_should_fall_back_to_info(self, restore_root_logger) -> None:
        configure_logging("LOUD")

        assert restore_root_logger.level == logging.INFO
