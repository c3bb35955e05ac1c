"""Pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield root

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Write a settings file with a US-style ``units`` section."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "units:\n"
        "  pressure: inches_of_mercury\n"
        "  temperature: fahrenheit\n"
        "  speed: miles_per_hour\n"
        "  precision: 2\n"
        "station:\n"
        "  icao: KSFO\n"
        "  elevation_ft: 13\n",
        encoding="utf-8",
    )
    return path
