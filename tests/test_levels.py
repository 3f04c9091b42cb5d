"""
Tests for lvlog.levels — severity ordering, aliases, parsing, sink mapping.
"""

import pytest

from lvlog.levels import Level, SinkSeverity, is_enabled, sink_severity_for


# =============================================================================
# Ordering and aliases
# =============================================================================

class TestLevelValues:
    """Verify level values, ordering and alias identity."""

    def test_level_ordering(self):
        """VERBOSE < DEBUG < INFO < WARNING < ERROR < CRITICAL < SILENT."""
        assert (Level.VERBOSE < Level.DEBUG < Level.INFO < Level.WARNING
                < Level.ERROR < Level.CRITICAL < Level.SILENT)

    def test_specific_values(self):
        assert Level.VERBOSE == 0
        assert Level.INFO == 2
        assert Level.CRITICAL == 5
        assert Level.SILENT == 6

    def test_spam_is_verbose(self):
        assert Level.SPAM is Level.VERBOSE

    def test_fatal_is_critical(self):
        assert Level.FATAL is Level.CRITICAL

    def test_iteration_skips_aliases(self):
        """Aliases are not distinct members."""
        assert [lvl.name for lvl in Level] == [
            'VERBOSE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'SILENT',
        ]

    def test_aliases_listing(self):
        assert Level.aliases(Level.VERBOSE) == ['SPAM']
        assert Level.aliases(Level.CRITICAL) == ['FATAL']
        assert Level.aliases(Level.INFO) == []


# =============================================================================
# Parsing
# =============================================================================

class TestLevelParse:
    """Level.parse accepts members, ints and names."""

    @pytest.mark.parametrize("value,expected", [
        ("verbose", Level.VERBOSE),
        ("SPAM", Level.VERBOSE),
        (" Info ", Level.INFO),
        ("fatal", Level.CRITICAL),
        ("silent", Level.SILENT),
        ("3", Level.WARNING),
        (4, Level.ERROR),
        (Level.DEBUG, Level.DEBUG),
    ])
    def test_valid_values(self, value, expected):
        assert Level.parse(value) is expected

    @pytest.mark.parametrize("value", ["loud", "", 7, -1, "-1", 2.0, None, True])
    def test_invalid_values_raise(self, value):
        with pytest.raises(ValueError):
            Level.parse(value)


# =============================================================================
# Sink severity and the emit rule
# =============================================================================

class TestSinkSeverity:

    @pytest.mark.parametrize("level,expected", [
        (Level.VERBOSE, SinkSeverity.LOG),
        (Level.SPAM, SinkSeverity.LOG),
        (Level.DEBUG, SinkSeverity.LOG),
        (Level.INFO, SinkSeverity.LOG),
        (Level.WARNING, SinkSeverity.WARNING),
        (Level.ERROR, SinkSeverity.ERROR),
        (Level.CRITICAL, SinkSeverity.ERROR),
        (Level.FATAL, SinkSeverity.ERROR),
    ])
    def test_mapping(self, level, expected):
        assert sink_severity_for(level) is expected

    def test_silent_is_not_loggable(self):
        with pytest.raises(ValueError, match="SILENT"):
            sink_severity_for(Level.SILENT)


class TestIsEnabled:

    def test_equality_passes(self):
        assert is_enabled(Level.INFO, Level.INFO)

    def test_one_above_suppresses(self):
        assert not is_enabled(Level.WARNING, Level.INFO)

    def test_silent_suppresses_critical(self):
        assert not is_enabled(Level.SILENT, Level.CRITICAL)

    def test_verbose_admits_everything(self):
        assert all(is_enabled(Level.VERBOSE, lvl) for lvl in Level)
