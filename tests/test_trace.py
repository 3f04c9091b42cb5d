"""Tests for lvlog.trace — function tracing through the process logger."""

import pytest

from lvlog.config import LoggerConfig
from lvlog.levels import Level
from lvlog.logger import init_logger
from lvlog.trace import trace


MODULE = __name__.rsplit('.', 1)[-1]


@trace
def add(a, b):
    return a + b


@trace
def touch(path):
    return None


@trace
def explode(message):
    raise ValueError(message)


class Inventory:

    @trace
    def count(self, items):
        return len(items)


@pytest.fixture
def traced(sink, diagnostic_flags):
    """Install a diagnostic process logger writing to the memory sink."""
    return init_logger(sink=sink, config=LoggerConfig(), flags=diagnostic_flags)


class TestTrace:

    def test_entry_and_exit(self, traced, sink):
        assert add(1, b=2) == 3
        prefix = f"[{MODULE}.add]"
        assert sink.texts == [
            f"{prefix} >> {MODULE}.add(1, b=2)",
            f"{prefix} << {MODULE}.add returned: 3",
        ]

    def test_none_result_has_no_exit_line(self, traced, sink):
        touch("x")
        assert len(sink.records) == 1

    def test_exception_logged_and_reraised(self, traced, sink):
        with pytest.raises(ValueError, match="bad"):
            explode("bad")
        assert sink.texts[-1] == f"[{MODULE}.explode] !! {MODULE}.explode raised: ValueError: bad"

    def test_method_scope(self, traced, sink):
        assert Inventory().count([1, 2, 3, 4, 5]) == 5
        assert sink.texts[0].startswith("[Inventory.count] >> ")
        assert "[...5 items...]" in sink.texts[0]

    def test_long_string_abbreviated(self, traced, sink):
        touch("x" * 80)
        assert "'" + "x" * 47 + "...'" in sink.texts[0]

    def test_silent_below_verbose(self, traced, sink):
        traced.threshold = Level.DEBUG
        assert add(2, 2) == 4
        assert sink.records == []

    def test_keeps_function_metadata(self):
        assert add.__name__ == "add"
        assert Inventory.count.__qualname__ == "Inventory.count"
