"""Built-in projection targets and reference performances."""

import math
from collections.abc import Sequence

from pydantic import BaseModel, Field

from ..errors import InvalidReferenceData
from .quantities import Distance, Duration, Velocity
from .units import KILOMETER, METER, MILE, YARD, UnitSystem

HALF_MARATHON = 21.0975 * KILOMETER
MARATHON = 42.195 * KILOMETER


class ProjectionTarget(BaseModel):
    """A named standard distance to estimate a finishing time for."""

    label: str = Field(description="Human readable name, e.g. '5 km'")
    distance: Distance = Field(description="Target distance")

    model_config = {"frozen": True}


class ReferencePerformance(BaseModel):
    """A notable performance whose average velocity the user is compared to."""

    label: str = Field(description="Description of the performance")
    velocity: Velocity = Field(description="Average velocity of the performance")

    model_config = {"frozen": True}

    @classmethod
    def from_result(
        cls, label: str, distance: Distance, duration: Duration
    ) -> "ReferencePerformance":
        """
        Build a reference from a race result.

        Raises:
            InvalidReferenceData: If the result has no finite positive duration
        """
        if duration.seconds <= 0 or not math.isfinite(duration.seconds):
            raise InvalidReferenceData(f'Reference "{label}" has no usable duration.')
        return cls(
            label=label,
            velocity=Velocity(meters_per_second=distance.meters / duration.seconds),
        )


def _target(label: str, meters: float) -> ProjectionTarget:
    return ProjectionTarget(label=label, distance=Distance(meters=meters))


METRIC_TARGETS: tuple[ProjectionTarget, ...] = (
    _target("100 m", 100 * METER),
    _target("1 km", 1 * KILOMETER),
    _target("5 km", 5 * KILOMETER),
    _target("10 km", 10 * KILOMETER),
    _target("half marathon", HALF_MARATHON),
    _target("marathon", MARATHON),
)

IMPERIAL_TARGETS: tuple[ProjectionTarget, ...] = (
    _target("100 yd", 100 * YARD),
    _target("1/8 mi", 0.125 * MILE),
    _target("1/4 mi", 0.25 * MILE),
    _target("1 mi", 1 * MILE),
    _target("half marathon", HALF_MARATHON),
    _target("marathon", MARATHON),
)


def _reference(label: str, kmh: float) -> ReferencePerformance:
    return ReferencePerformance(label=label, velocity=Velocity.from_kilometers_per_hour(kmh))


# Curated order, slowest first
REFERENCE_PERFORMANCES: tuple[ReferencePerformance, ...] = (
    _reference("Ashprihanal Aalto's 3100 mi (longest ultra marathon) WR", 5.1480),
    _reference("Yohann Diniz' 50 km race walk WR", 14.1143),
    _reference("Eliud Kipchoge's inofficial marathon WR", 21.1563),
    _reference("Kenenisa Bekele's 10000 m WR", 22.8205),
    _reference("Usain Bolt's 100 m WR", 37.5783),
    _reference("Cheetah Sarah's 100 m animal WR", 60.5042),
)


def targets_for(unit: UnitSystem) -> tuple[ProjectionTarget, ...]:
    """Return the projection targets shown for a unit system."""
    if unit == UnitSystem.IMPERIAL:
        return IMPERIAL_TARGETS
    return METRIC_TARGETS


def validate_references(references: Sequence[ReferencePerformance]) -> None:
    """
    Check the reference table before it is used for comparisons.

    Args:
        references: Reference performances in display order

    Raises:
        InvalidReferenceData: On an empty table, a duplicate label or a
            velocity that is not finite and positive
    """
    if not references:
        raise InvalidReferenceData("No reference performances defined.")

    seen: set[str] = set()
    for reference in references:
        if reference.label in seen:
            raise InvalidReferenceData(f'Duplicate reference "{reference.label}".')
        seen.add(reference.label)

        mps = reference.velocity.meters_per_second
        if mps <= 0 or not math.isfinite(mps):
            raise InvalidReferenceData(
                f'Reference "{reference.label}" has an invalid velocity ({mps} m/s).'
            )
