"""Unit tests for the logging system."""

import logging
from pathlib import Path

import pytest

from weatherkit.core.logging_system import (
    LoggingError,
    MillisecondFormatter,
    get_logger,
    initialize_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def clean_logging(restore_root_logger):
    """Shut the logging system down after every test."""
    yield
    shutdown_logging()


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_initialize_defaults(self) -> None:
        """Test default initialization installs a console handler."""
        initialize_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(type(h) is logging.StreamHandler for h in root.handlers)

    def test_initialize_with_missing_config(self) -> None:
        """Test a missing config file raises LoggingError."""
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_initialize_with_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text("console: [unclosed\n", encoding="utf-8")
        with pytest.raises(LoggingError, match="Failed to load"):
            initialize_logging(config)

    @pytest.mark.parametrize("content", ["- console\n- file\n", "DEBUG\n"])
    def test_initialize_with_non_mapping(self, tmp_path: Path, content: str) -> None:
        """Test a list or scalar at the top level raises LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text(content, encoding="utf-8")
        with pytest.raises(LoggingError, match="must be a mapping"):
            initialize_logging(config)

    def test_unknown_level(self, tmp_path: Path) -> None:
        """Test an unknown level name raises LoggingError."""
        config = tmp_path / "logging.yaml"
        config.write_text("level: LOUD\n", encoding="utf-8")
        with pytest.raises(LoggingError, match="Unknown log level"):
            initialize_logging(config)

    def test_file_logging(self, tmp_path: Path) -> None:
        """Test messages reach the configured log file."""
        log_file = tmp_path / "logs" / "weatherkit.log"
        config = tmp_path / "logging.yaml"
        config.write_text(
            "level: DEBUG\n"
            "console:\n"
            "  enabled: false\n"
            "file:\n"
            "  enabled: true\n"
            f"  path: {log_file.as_posix()}\n",
            encoding="utf-8",
        )
        initialize_logging(config)

        get_logger("weatherkit.test").info("QNH %.1f hPa", 1013.25)
        shutdown_logging()

        content = log_file.read_text(encoding="utf-8")
        assert "weatherkit.test - INFO - QNH 1013.2 hPa" in content

    def test_repeated_initialization_replaces_handlers(self) -> None:
        """Test initializing twice does not duplicate handlers."""
        root = logging.getLogger()
        before = len(root.handlers)
        initialize_logging()
        initialize_logging()
        assert len(root.handlers) == before + 1


class TestGetLogger:
    """Tests for logger creation."""

    def test_get_logger_creates_logger(self) -> None:
        """Test that get_logger returns a named logger."""
        logger = get_logger("weatherkit.navigation")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "weatherkit.navigation"

    def test_get_logger_is_cached(self) -> None:
        """Test repeated calls return the same logger."""
        assert get_logger("weatherkit.a") is get_logger("weatherkit.a")

    def test_per_logger_level(self, tmp_path: Path) -> None:
        """Test levels from the loggers section are applied."""
        config = tmp_path / "logging.yaml"
        config.write_text("loggers:\n  weatherkit.levels: WARNING\n", encoding="utf-8")
        initialize_logging(config)
        assert get_logger("weatherkit.levels").level == logging.WARNING

    def test_shutdown_removes_handlers(self) -> None:
        """Test shutdown removes the installed handlers."""
        root = logging.getLogger()
        before = len(root.handlers)
        initialize_logging()
        shutdown_logging()
        assert len(root.handlers) == before


class TestMillisecondFormatter:
    """Tests for the formatter."""

    def test_milliseconds_appended(self) -> None:
        """Test the time carries a dot and three millisecond digits."""
        formatter = MillisecondFormatter("%(asctime)s", "%H:%M:%S")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        record.msecs = 7
        assert formatter.formatTime(record, "%H:%M:%S").endswith(".007")
