# tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mullerroot.core import logger as logger_module
from mullerroot.core.config import Settings, settings
from mullerroot.core.logger import LOG_FILE_NAME, setup_logging


def test_settings_defaults():
    s = Settings(_env_file=None)

    assert s.MAX_ITERATIONS == 1_000_000
    assert s.MAX_TOLERANCE_DIGITS == 40
    assert s.DEFAULT_ITERATIONS == 20
    assert s.DEFAULT_TOLERANCE_DIGITS == 15
    assert s.API_V1_STR == "/api/v1"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MAX_ITERATIONS", "500")
    monkeypatch.setenv("MAX_TOLERANCE_DIGITS", "16")

    s = Settings(_env_file=None)
    assert s.MAX_ITERATIONS == 500
    assert s.MAX_TOLERANCE_DIGITS == 16


@pytest.mark.parametrize(
    "overrides",
    [
        {"MAX_ITERATIONS": 2},
        {"MAX_TOLERANCE_DIGITS": 0},
        {"MAX_ITERATIONS": 10, "DEFAULT_ITERATIONS": 20},
        {"MAX_TOLERANCE_DIGITS": 10, "DEFAULT_TOLERANCE_DIGITS": 15},
        {"APP_ENV": "staging"},
    ],
)
def test_settings_rejects_bad_values(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_setup_logging_without_file_sink(monkeypatch):
    monkeypatch.setattr(settings, "LOG_TO_FILE", False)

    assert setup_logging() is None


def test_setup_logging_with_file_sink(monkeypatch, tmp_path):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(settings, "LOG_TO_FILE", True)
    monkeypatch.setattr(settings, "LOG_DIR", str(log_dir))

    path = setup_logging()

    assert path == str(log_dir.resolve() / LOG_FILE_NAME)
    assert Path(path).parent.is_dir()
    assert logger_module.settings is settings
