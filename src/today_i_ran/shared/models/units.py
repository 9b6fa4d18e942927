"""Unit conversion utilities for distance and speed."""

from enum import Enum

from ..errors import InvalidUnit


class UnitSystem(str, Enum):
    """Unit system for displaying results."""

    METRIC = "metric"  # kilometers
    IMPERIAL = "imperial"  # miles


# Conversion constants (meters per unit)
METER = 1.0
KILOMETER = 1000.0
YARD = 0.9144
FOOT = 0.3048
MILE = 1609.344

# Speed conversion (meters per second per display unit)
KMH_IN_MPS = KILOMETER / 3600
MPH_IN_MPS = MILE / 3600

DISTANCE_UNITS: dict[str, float] = {
    "m": METER,
    "meter": METER,
    "meters": METER,
    "km": KILOMETER,
    "kilometer": KILOMETER,
    "kilometers": KILOMETER,
    "yd": YARD,
    "yard": YARD,
    "yards": YARD,
    "ft": FOOT,
    "foot": FOOT,
    "feet": FOOT,
    "mi": MILE,
    "mile": MILE,
    "miles": MILE,
}


def _factor(unit: str) -> float:
    try:
        return DISTANCE_UNITS[unit.strip().lower()]
    except KeyError:
        raise InvalidUnit(unit) from None


def convert_distance(value: float, unit: str) -> float:
    """
    Convert a distance to meters.

    Args:
        value: Distance expressed in ``unit``
        unit: Unit token, e.g. "km", "miles" (case-insensitive)

    Returns:
        Distance in meters

    Raises:
        InvalidUnit: If the unit token is not recognized
    """
    return value * _factor(unit)


def meters_to(meters: float, unit: str) -> float:
    """
    Convert meters to another distance unit.

    Args:
        meters: Distance in meters
        unit: Target unit token

    Returns:
        Distance in the target unit
    """
    return meters / _factor(unit)


def format_distance(meters: float, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Format distance with appropriate unit label.

    Args:
        meters: Distance in meters
        unit: Unit system for conversion and label

    Returns:
        Formatted distance string (e.g., "14.300 km" or "3.100 mi")
    """
    if unit == UnitSystem.IMPERIAL:
        return f"{meters / MILE:.3f} mi"
    return f"{meters / KILOMETER:.3f} km"
