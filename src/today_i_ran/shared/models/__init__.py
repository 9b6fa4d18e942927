"""Data models for Today I Ran."""

from .quantities import Distance, Duration, Velocity
from .references import (
    IMPERIAL_TARGETS,
    METRIC_TARGETS,
    REFERENCE_PERFORMANCES,
    ProjectionTarget,
    ReferencePerformance,
    targets_for,
    validate_references,
)
from .units import (
    DISTANCE_UNITS,
    UnitSystem,
    convert_distance,
    format_distance,
    meters_to,
)

__all__ = [
    # Quantities
    "Distance",
    "Duration",
    "Velocity",
    # Reference data
    "ProjectionTarget",
    "ReferencePerformance",
    "METRIC_TARGETS",
    "IMPERIAL_TARGETS",
    "REFERENCE_PERFORMANCES",
    "targets_for",
    "validate_references",
    # Units
    "UnitSystem",
    "DISTANCE_UNITS",
    "convert_distance",
    "meters_to",
    "format_distance",
]
