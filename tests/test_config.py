"""Tests for settings and logging setup."""

import logging

import pytest

from app.config import Settings, get_settings
from app.logging_config import configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_defaults(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.GROQ_API_KEY == ""
    assert settings.QUIZ_ESTIMATED_QUESTIONS_PER_ATTEMPT == 10
    assert settings.GENERATION_TIMEOUT_SECONDS > 0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GENERATION_TIMEOUT_SECONDS", "3.5")
    assert Settings(_env_file=None).GENERATION_TIMEOUT_SECONDS == 3.5


def test_configure_logging(restore_root_logger):
    configure_logging("debug")
    assert restore_root_logger.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_twice_keeps_one_handler(restore_root_logger):
    configure_logging("info")
    configure_logging("warning")
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.WARNING
