"""Tests for the distance and time parsers."""

import pytest

from today_i_ran.shared.errors import InvalidUnit, ParseError
from today_i_ran.shared.formatting import format_duration
from today_i_ran.shared.models import UnitSystem, format_distance
from today_i_ran.shared.parsing import parse_distance, parse_duration


@pytest.mark.parametrize(
    ("text", "meters"),
    [
        ("14.3km", 14300),
        ("14.3 km", 14300),
        ("  400m  ", 400),
        ("5.km", 5000),
        (".5km", 500),
        ("100 yards", 91.44),
        ("3 FT", 0.9144),
        ("26.2mi", 42164.8128),
        ("0km", 0),
    ],
)
def test_parse_distance(text, meters):
    """Test parsing distances in the supported units."""
    assert parse_distance(text).meters == pytest.approx(meters)


@pytest.mark.parametrize("text", ["", "km", "14.3", "-5km", "1,000m", "5 k m", "1e3km"])
def test_parse_distance_malformed(text):
    """Test that text without a number and a unit is rejected."""
    with pytest.raises(ParseError):
        parse_distance(text)


def test_parse_distance_unknown_unit():
    """Test that an unknown distance unit raises InvalidUnit."""
    with pytest.raises(InvalidUnit) as exc_info:
        parse_distance("10 leagues")
    assert exc_info.value.unit == "leagues"


def test_parse_distance_round_trip():
    """Test that formatting a parsed distance recovers the input value."""
    assert format_distance(parse_distance("14.3km").meters, UnitSystem.METRIC) == "14.300 km"
    assert format_distance(parse_distance("3.1mi").meters, UnitSystem.IMPERIAL) == "3.100 mi"
    assert format_distance(parse_distance("0.125 miles").meters, UnitSystem.IMPERIAL) == "0.125 mi"


@pytest.mark.parametrize(
    ("text", "seconds"),
    [
        ("1h12min4s", 4324),
        ("1 h 12 min 4 s", 4324),
        ("25min", 1500),
        ("30s", 30),
        ("45sec", 45),
        ("2h", 7200),
        ("4s1h", 3604),
        ("1H30MIN", 5400),
        ("1.5h", 5400),
        ("0s", 0),
    ],
)
def test_parse_duration(text, seconds):
    """Test parsing times with any combination of components."""
    assert parse_duration(text).seconds == pytest.approx(seconds)


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_duration_without_components(text):
    """Test that a time without components is zero."""
    assert parse_duration(text).seconds == 0


@pytest.mark.parametrize("text", ["abc", "12", "1h 30", "h12", "1h-2min", "1:30:00"])
def test_parse_duration_malformed(text):
    """Test that text that is not a sequence of components is rejected."""
    with pytest.raises(ParseError):
        parse_duration(text)


def test_parse_duration_unknown_unit():
    """Test that an unknown time unit raises InvalidUnit."""
    with pytest.raises(InvalidUnit) as exc_info:
        parse_duration("1h12m")
    assert exc_info.value.unit == "m"


def test_parse_duration_duplicate_component():
    """Test that giving a component twice is rejected."""
    with pytest.raises(ParseError, match="hours more than once"):
        parse_duration("1h2h")
    with pytest.raises(ParseError, match="seconds more than once"):
        parse_duration("10s5sec")


@pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 3599, 3600, 3604, 4324, 86399, 90061])
def test_parse_duration_round_trip(seconds):
    """Test that a formatted whole-second duration parses back exactly."""
    assert parse_duration(format_duration(seconds)).seconds == seconds


@pytest.mark.parametrize("text", ["1" + "0" * 400 + "m", "1" + "0" * 306 + "mi"])
def test_parse_distance_too_large(text):
    """Test that a distance that overflows to infinity is rejected."""
    with pytest.raises(ParseError, match="too large"):
        parse_distance(text)


@pytest.mark.parametrize(
    "text", ["1" + "0" * 400 + "s", "1" + "0" * 305 + "h", "1" + "0" * 308 + "s 1" + "0" * 308 + "min"]
)
def test_parse_duration_too_large(text):
    """Test that a time whose total overflows to infinity is rejected."""
    with pytest.raises(ParseError, match="too large"):
        parse_duration(text)
