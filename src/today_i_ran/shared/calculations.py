"""Velocity, projections and comparisons derived from a run."""

import logging
import math
from collections.abc import Sequence

from pydantic import BaseModel, Field

from .errors import DivisionByZero, RunInputError
from .models import (
    REFERENCE_PERFORMANCES,
    Distance,
    Duration,
    ProjectionTarget,
    ReferencePerformance,
    UnitSystem,
    Velocity,
    targets_for,
)

logger = logging.getLogger(__name__)


class Projection(BaseModel):
    """Estimated time for a target distance at the run's average velocity."""

    label: str
    duration: Duration

    model_config = {"frozen": True}


class Comparison(BaseModel):
    """Ratio of the run's average velocity to a reference velocity."""

    label: str
    ratio: float = Field(ge=0)

    model_config = {"frozen": True}


class RunReport(BaseModel):
    """Everything the CLI prints for one run, computed up front."""

    unit_system: UnitSystem
    distance: Distance
    duration: Duration
    velocity: Velocity
    projections: list[Projection] = Field(default_factory=list)
    comparisons: list[Comparison] = Field(default_factory=list)


def average_velocity(distance: Distance, duration: Duration) -> Velocity:
    """
    Compute the average velocity of a run.

    A zero distance gives a velocity of zero whatever the duration, including
    a zero duration.

    Raises:
        DivisionByZero: If a positive distance was covered in zero time
        RunInputError: If the velocity overflows
    """
    if distance.meters == 0:
        return Velocity(meters_per_second=0.0)
    if duration.seconds == 0:
        raise DivisionByZero("Cannot compute a velocity for a distance covered in no time.")
    mps = distance.meters / duration.seconds
    if not math.isfinite(mps):
        raise RunInputError("Velocity is too large to compute.")
    return Velocity(meters_per_second=mps)


def project_durations(
    velocity: Velocity, targets: Sequence[ProjectionTarget]
) -> list[Projection]:
    """
    Estimate how long each target distance takes at a constant velocity.

    Results keep the order of ``targets``. At zero velocity every target
    gets an infinite duration.
    """
    mps = velocity.meters_per_second
    projections = []
    for target in targets:
        seconds = target.distance.meters / mps if mps > 0 else math.inf
        projections.append(Projection(label=target.label, duration=Duration(seconds=seconds)))
    return projections


def compare_velocities(
    velocity: Velocity, references: Sequence[ReferencePerformance]
) -> list[Comparison]:
    """Compare a velocity to each reference, keeping the table's order."""
    return [
        Comparison(
            label=reference.label,
            ratio=velocity.meters_per_second / reference.velocity.meters_per_second,
        )
        for reference in references
    ]


def build_report(
    distance: Distance,
    duration: Duration,
    unit_system: UnitSystem = UnitSystem.METRIC,
    verbose: bool = False,
    references: Sequence[ReferencePerformance] = REFERENCE_PERFORMANCES,
) -> RunReport:
    """
    Compute the full report for a run.

    Projections and comparisons are only included when ``verbose`` is set.
    """
    velocity = average_velocity(distance, duration)
    logger.debug(
        f"Average velocity {velocity.meters_per_second:.4f} m/s "
        f"over {distance.meters} m in {duration.seconds} s"
    )

    projections: list[Projection] = []
    comparisons: list[Comparison] = []
    if verbose:
        projections = project_durations(velocity, targets_for(unit_system))
        comparisons = compare_velocities(velocity, references)

    return RunReport(
        unit_system=unit_system,
        distance=distance,
        duration=duration,
        velocity=velocity,
        projections=projections,
        comparisons=comparisons,
    )
