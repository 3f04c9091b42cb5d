"""Shared test fixtures for the lvlog test suite."""

import pytest

from lvlog import logger as _logger_mod
from lvlog.build import BuildFlags, BuildMode
from lvlog.config import LoggerConfig
from lvlog.logger import LevelLogger
from lvlog.sinks import MemorySink


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
LVLOG_ENV_VARS = (
    "LVLOG_LEVEL", "LVLOG_COLORIZE",
    "LVLOG_BUILD", "LVLOG_ASSERTIONS", "LVLOG_RICH_TEXT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's LVLOG_* settings out of every test."""
    for name in LVLOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_singleton():
    """Save and restore the process-wide logger around each test."""
    saved = _logger_mod._logger
    yield
    _logger_mod._logger = saved


# ---------------------------------------------------------------------------
# Build flags
# ---------------------------------------------------------------------------
@pytest.fixture
def diagnostic_flags():
    return BuildFlags(mode=BuildMode.DIAGNOSTIC, assertions=True, rich_text=False)


@pytest.fixture
def optimized_flags():
    return BuildFlags(mode=BuildMode.OPTIMIZED, assertions=True, rich_text=False)


@pytest.fixture
def rich_flags():
    return BuildFlags(mode=BuildMode.DIAGNOSTIC, assertions=True, rich_text=True)


# ---------------------------------------------------------------------------
# Sinks and loggers
# ---------------------------------------------------------------------------
@pytest.fixture
def sink():
    """A plain (non rich-text) in-memory sink."""
    return MemorySink()


@pytest.fixture
def log(sink, diagnostic_flags):
    """Diagnostic-build logger at the default configuration."""
    return LevelLogger(sink=sink, config=LoggerConfig(), flags=diagnostic_flags)


@pytest.fixture
def optimized_log(sink, optimized_flags):
    """Optimized-build logger: no caller prefixes."""
    return LevelLogger(sink=sink, config=LoggerConfig(), flags=optimized_flags)


@pytest.fixture
def rich_sink():
    return MemorySink(rich_text=True)


@pytest.fixture
def rich_log(rich_sink, rich_flags):
    """Logger whose build and sink both support color markup."""
    return LevelLogger(sink=rich_sink, config=LoggerConfig(), flags=rich_flags)
