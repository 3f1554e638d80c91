"""
Tests for logger setup: level names, repeated setup on reruns, env-driven configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from user_admin.utils import logger as app_logger


@pytest.fixture
def fresh_logger(request: pytest.FixtureRequest):
    """Yield a unique logger name and strip its handlers afterwards."""
    name = f"user_admin_test.{request.node.name}"
    yield name
    log = logging.getLogger(name)
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()


def _restore_app_logger() -> None:
    log = logging.getLogger(app_logger.LOGGER_NAME)
    for h in list(log.handlers):
        if isinstance(h, logging.FileHandler):
            log.removeHandler(h)
            h.close()
    log.setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("chatty", logging.INFO),
        ("", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_resolve_level(level, expected) -> None:
    assert app_logger.resolve_level(level) == expected


def test_setup_logger_twice_adds_one_stderr_handler(fresh_logger: str) -> None:
    log = app_logger.setup_logger(fresh_logger, level="INFO")
    app_logger.setup_logger(fresh_logger, level="DEBUG")
    streams = [h for h in log.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    # Second call still applies the new level
    assert log.level == logging.DEBUG


def test_setup_logger_writes_file(fresh_logger: str, tmp_path: Path) -> None:
    path = tmp_path / "logs" / "app.log"
    log = app_logger.setup_logger(fresh_logger, level="INFO", log_file=path)
    app_logger.setup_logger(fresh_logger, level="INFO", log_file=path)
    assert sum(isinstance(h, logging.FileHandler) for h in log.handlers) == 1

    log.info("user %s saved", "bob")
    for h in log.handlers:
        h.flush()
    line = path.read_text(encoding="utf-8").strip()
    assert line.endswith(f"| INFO | {fresh_logger} | user bob saved")


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "console.log"
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", str(path))
    try:
        log = app_logger.configure_logging()
        assert log is app_logger.get_logger()
        assert log.level == logging.DEBUG
        assert any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path.resolve()
            for h in log.handlers
        )
    finally:
        _restore_app_logger()
