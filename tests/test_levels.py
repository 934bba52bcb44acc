"""Tests for clog.levels — ordering, parsing, syslog priorities."""

import pytest

from clog.errors import UnknownLevel
from clog.levels import Level, SYSLOG_PRIORITIES, parse_level, syslog_priority


class TestLevelOrdering:

    def test_level_ordering(self):
        """DEBUG < INFO < NOTICE < WARNING < ERROR < CRITICAL."""
        assert (Level.DEBUG < Level.INFO < Level.NOTICE < Level.WARNING
                < Level.ERROR < Level.CRITICAL)

    def test_every_level_has_a_priority(self):
        assert set(SYSLOG_PRIORITIES) == set(Level)

    @pytest.mark.parametrize("level,priority", [
        (Level.DEBUG, 'debug'),
        (Level.NOTICE, 'notice'),
        (Level.ERROR, 'err'),
        (Level.CRITICAL, 'crit'),
    ])
    def test_priority_names(self, level, priority):
        assert syslog_priority(level) == priority


class TestParseLevel:

    @pytest.mark.parametrize("value,expected", [
        (Level.INFO, Level.INFO),
        (3, Level.WARNING),
        ("3", Level.WARNING),
        ("notice", Level.NOTICE),
        ("  Error ", Level.ERROR),
        ("warn", Level.WARNING),
        ("CRIT", Level.CRITICAL),
        ("fatal", Level.CRITICAL),
    ])
    def test_accepted_values(self, value, expected):
        assert parse_level(value) is expected

    @pytest.mark.parametrize("value", [99, -1, "loud", "", None, True, 2.0])
    def test_rejected_values(self, value):
        with pytest.raises(UnknownLevel):
            parse_level(value)
