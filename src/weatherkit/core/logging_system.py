"""Logging setup for applications embedding weatherkit.

Library modules only ever call ``logging.getLogger(__name__)``; this module
lets a host application configure those loggers from a YAML file.

Example configuration:

    level: INFO
    format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console:
      enabled: true
      level: WARNING
    file:
      enabled: true
      path: logs/weatherkit.log
    loggers:
      weatherkit.navigation: DEBUG

Typical usage example:
    from weatherkit.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger("weatherkit.navigation")
    log.debug("Course unavailable, speed %.1f m/s", speed)
"""

import logging
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_installed_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def initialize_logging(config_path: str | Path | None = None) -> None:
    """Initialize logging from a YAML configuration.

    Safe to call more than once; handlers installed by a previous call are
    replaced. Handlers added to the root logger by others are left alone.

    Args:
        config_path: Path to a logging configuration YAML file. If None,
            the default configuration is used.

    Raises:
        LoggingError: If the configuration cannot be loaded or applied.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config root must be a mapping: {config_path}")

        _logging_config = _merge_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    _loggers_cache.clear()
    _configure_root_logger()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "file": {
            "enabled": False,
            "path": "logs/weatherkit.log",
        },
        "loggers": {},
    }


def _merge_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _configure_root_logger() -> None:
    """Install console and file handlers on the root logger."""
    root_logger = logging.getLogger()
    root_logger.setLevel(_level(_logging_config["level"]))

    _remove_installed_handlers()

    console_config = _logging_config["console"]
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    file_config = _logging_config["file"]
    if file_config.get("enabled", False):
        log_file = Path(file_config.get("path", "logs/weatherkit.log"))
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            raise LoggingError(f"Cannot open log file {log_file}: {e}") from e
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def _remove_installed_handlers() -> None:
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    return MillisecondFormatter(_logging_config["format"], _logging_config["date_format"])


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Levels for individual loggers come from the ``loggers`` section of the
    configuration. Initializes logging with defaults on first use.

    Args:
        name: Logger name, usually a module path.

    Returns:
        Cached logger instance.
    """
    if not _initialized:
        initialize_logging()

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    level = (_logging_config.get("loggers") or {}).get(name)
    if level is not None:
        logger.setLevel(_level(level))

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close the handlers installed by ``initialize_logging``."""
    global _initialized

    for handler in _installed_handlers:
        handler.flush()
    _remove_installed_handlers()
    _loggers_cache.clear()
    _initialized = False
