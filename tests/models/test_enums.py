"""Tests for log level definitions."""

import pytest

from nsdebug.errors import InvalidLevelError
from nsdebug.models.enums import LogLevel, level_name, parse_level


def test_level_ordering():
    assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR
    assert [int(l) for l in LogLevel] == [0, 1, 2, 3]


@pytest.mark.parametrize("name", ["DEBUG", "INFO", "WARN", "ERROR"])
def test_name_parse_roundtrip(name):
    assert level_name(parse_level(name)) == name
    assert parse_level(level_name(LogLevel[name])) == LogLevel[name]


def test_level_name_accepts_ordinals():
    assert level_name(0) == "DEBUG"
    assert level_name(3) == "ERROR"


@pytest.mark.parametrize("value", [-1, 4, 7])
def test_level_name_out_of_range(value):
    with pytest.raises(InvalidLevelError) as exc_info:
        level_name(value)
    assert str(value) in str(exc_info.value)


@pytest.mark.parametrize("text", ["trace", "debug", "Warn", "WARNING", "", " INFO"])
def test_parse_level_rejects_non_canonical(text):
    with pytest.raises(InvalidLevelError) as exc_info:
        parse_level(text)
    assert exc_info.value.value == text


def test_invalid_level_is_value_error():
    """Callers catching ValueError also catch level errors."""
    with pytest.raises(ValueError):
        parse_level("trace")


def test_str_is_canonical_name():
    assert str(LogLevel.WARN) == "WARN"
