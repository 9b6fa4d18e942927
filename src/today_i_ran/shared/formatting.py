"""Human readable rendering of durations, velocities and ratios."""

import math

from .models import Duration, UnitSystem, Velocity, format_distance

INFINITY = "∞"

__all__ = ["format_distance", "format_duration", "format_ratio", "format_velocity"]


def format_duration(duration: Duration | float) -> str:
    """
    Format a duration as hours, minutes and seconds.

    The total is rounded half-up to whole seconds before it is split, unlike
    rounding only the seconds component, so 59.6 s prints "1 min" and never
    "60 s". Only non-zero components are printed (e.g. "1 h 12 min 4 s",
    "1 h 4 s", "30 s"); a zero duration prints "0 s" and an infinite one
    prints "∞".

    Args:
        duration: Duration model or number of seconds

    Returns:
        Formatted duration string
    """
    seconds = duration.seconds if isinstance(duration, Duration) else duration
    if math.isinf(seconds):
        return INFINITY

    total = math.floor(seconds + 0.5)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    parts = []
    if hours:
        parts.append(f"{hours} h")
    if minutes:
        parts.append(f"{minutes} min")
    if secs:
        parts.append(f"{secs} s")
    return " ".join(parts) or "0 s"


def format_velocity(velocity: Velocity, unit: UnitSystem = UnitSystem.METRIC) -> str:
    """Format velocity as "11.906 km/h" or "7.398 mph"."""
    if unit == UnitSystem.IMPERIAL:
        return f"{velocity.miles_per_hour:.3f} mph"
    return f"{velocity.kilometers_per_hour:.3f} km/h"


def format_ratio(ratio: float) -> str:
    """Format a velocity ratio, e.g. "0.563 times"."""
    return f"{ratio:.3f} times"
