"""Parsers for the distance and time arguments."""

import logging
import math
import re

from .errors import InvalidUnit, ParseError
from .models import Distance, Duration, convert_distance

logger = logging.getLogger(__name__)

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"

DISTANCE_PATTERN = re.compile(rf"^\s*(?P<value>{_NUMBER})\s*(?P<unit>[A-Za-z]+)\s*$")
DURATION_COMPONENT_PATTERN = re.compile(rf"\s*(?P<value>{_NUMBER})\s*(?P<unit>[A-Za-z]+)\s*")

# Seconds per duration unit; each component may appear at most once
DURATION_UNITS: dict[str, tuple[str, float]] = {
    "h": ("hours", 3600.0),
    "min": ("minutes", 60.0),
    "s": ("seconds", 1.0),
    "sec": ("seconds", 1.0),
}


def parse_distance(text: str) -> Distance:
    """
    Parse a distance argument such as "14.3km" or "5 miles".

    Args:
        text: A non-negative decimal number followed by a unit token

    Returns:
        Distance in meters

    Raises:
        ParseError: If the text is not a number followed by a unit, or the
            number is too large to represent
        InvalidUnit: If the unit token is unknown
    """
    match = DISTANCE_PATTERN.match(text)
    if match is None:
        raise ParseError(f'Could not parse distance "{text}". Expected e.g. "14.3km".')

    value = float(match.group("value"))
    meters = convert_distance(value, match.group("unit"))
    if not math.isfinite(meters):
        raise ParseError(f'Distance "{text}" is too large.')
    logger.debug(f"Parsed distance {text!r} as {meters} m")
    return Distance(meters=meters)


def parse_duration(text: str) -> Duration:
    """
    Parse a time argument such as "1h12min4s" or "25 min 30 s".

    Components are optional and may come in any order. An empty string is a
    duration of zero.

    Args:
        text: Sequence of ``<number><unit>`` components, unit one of h, min, s

    Returns:
        Duration in seconds

    Raises:
        ParseError: On text that is not a component, a repeated component or
            a total too large to represent
        InvalidUnit: If a component has an unknown unit
    """
    seen: set[str] = set()
    seconds = 0.0
    position = 0

    while position < len(text):
        match = DURATION_COMPONENT_PATTERN.match(text, position)
        if match is None:
            if not text[position:].strip():
                break
            raise ParseError(f'Could not parse time "{text}" at "{text[position:]}".')

        unit = match.group("unit").lower()
        if unit not in DURATION_UNITS:
            raise InvalidUnit(
                match.group("unit"),
                f'Unknown time unit "{match.group("unit")}". Use h, min or s.',
            )

        component, factor = DURATION_UNITS[unit]
        if component in seen:
            raise ParseError(f'Time "{text}" gives {component} more than once.')
        seen.add(component)

        seconds += float(match.group("value")) * factor
        if not math.isfinite(seconds):
            raise ParseError(f'Time "{text}" is too large.')
        position = match.end()

    logger.debug(f"Parsed time {text!r} as {seconds} s")
    return Duration(seconds=seconds)
