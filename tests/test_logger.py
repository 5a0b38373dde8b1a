import logging

from resume_screener.utils import logger as logger_module
from resume_screener.utils.logger import get_logger, resolve_level


def test_resolve_level_known_names():
    assert resolve_level("DEBUG") == logging.DEBUG
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(" error ") == logging.ERROR


def test_resolve_level_unknown_falls_back_to_info():
    assert resolve_level("verbose") == logging.INFO
    assert resolve_level("") == logging.INFO


def test_get_logger_with_unknown_configured_level(monkeypatch):
    monkeypatch.setattr(logger_module, "LOG_LEVEL", "verbose")
    log = get_logger("resume_screener.tests.unknown_level")
    assert log.level == logging.INFO
    assert log.handlers


def test_get_logger_explicit_level():
    log = get_logger("resume_screener.tests.explicit_level", logging.DEBUG)
    assert log.level == logging.DEBUG
